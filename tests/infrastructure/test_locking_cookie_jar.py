from __future__ import annotations

import threading
from datetime import datetime, timezone

from requests.cookies import create_cookie

from httpc_test.domain.cookie import SameSite
from httpc_test.infrastructure.http.locking_cookie_jar import LockingCookieJar, to_cookie


def test_to_cookie_reads_flags() -> None:
    jc = create_cookie(
        "session",
        "abc123",
        domain="example.com",
        path="/",
        secure=True,
        expires=1445412480,
        rest={"HttpOnly": None, "SameSite": "Lax"},
    )

    c = to_cookie(jc)

    assert c.name == "session"
    assert c.value == "abc123"
    assert c.http_only is True
    assert c.secure is True
    assert c.same_site is SameSite.LAX
    assert c.domain == "example.com"
    assert c.path == "/"
    assert c.expires == datetime(2015, 10, 21, 7, 28, tzinfo=timezone.utc)


def test_to_cookie_has_expires_but_no_max_age() -> None:
    c = to_cookie(create_cookie("theme", "dark", expires=1445412480))
    assert c.max_age is None
    assert c.expires == datetime(2015, 10, 21, 7, 28, tzinfo=timezone.utc)


def test_to_cookie_defaults() -> None:
    c = to_cookie(create_cookie("a", "1"))
    assert c.http_only is False
    assert c.same_site is SameSite.NONE
    assert c.expires is None


def test_snapshot_and_find() -> None:
    jar = LockingCookieJar()
    jar.set_cookie(create_cookie("a", "1"))
    jar.set_cookie(create_cookie("b", "2"))

    snap = jar.snapshot()
    jar.clear()

    assert sorted(c.name for c in snap) == ["a", "b"]
    assert jar.snapshot() == []
    assert jar.find("a") is None


def test_find() -> None:
    jar = LockingCookieJar()
    jar.set_cookie(create_cookie("a", "1"))
    assert jar.find("a").value == "1"
    assert jar.find("missing") is None


def test_copy_keeps_cookies() -> None:
    jar = LockingCookieJar()
    jar.set_cookie(create_cookie("a", "1"))
    assert jar.copy().get("a") == "1"


def test_concurrent_writes_and_snapshots() -> None:
    jar = LockingCookieJar()
    errors = []

    def writer(n: int) -> None:
        try:
            for i in range(200):
                jar.set_cookie(create_cookie(f"w{n}_{i}", str(i)))
        except Exception as e:  # noqa: BLE001
            errors.append(e)

    def reader() -> None:
        try:
            for _ in range(200):
                jar.snapshot()
        except Exception as e:  # noqa: BLE001
            errors.append(e)

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(3)]
    threads += [threading.Thread(target=reader) for _ in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert len(jar.snapshot()) == 600
