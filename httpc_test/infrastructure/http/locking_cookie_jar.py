# httpc_test/infrastructure/http/locking_cookie_jar.py
from __future__ import annotations

from datetime import datetime, timezone
from http.cookiejar import Cookie as JarCookie
from threading import RLock
from typing import Any, Iterator, List, Optional, Tuple

from requests.cookies import RequestsCookieJar

from httpc_test.domain.cookie import Cookie, SameSite


def _rest_attr(c: JarCookie, name: str) -> Tuple[bool, Any]:
    # http.cookiejar keeps the case of non-standard attributes as sent
    wanted = name.lower()
    for key, value in (getattr(c, "_rest", None) or {}).items():
        if key.lower() == wanted:
            return True, value
    return False, None


def to_cookie(c: JarCookie) -> Cookie:
    """
    max_age is always None: http.cookiejar folds Max-Age into an absolute
    expires when it stores the cookie, so jar cookies only carry expires.
    """
    http_only, _ = _rest_attr(c, "HttpOnly")
    _, same_site = _rest_attr(c, "SameSite")
    expires = datetime.fromtimestamp(c.expires, tz=timezone.utc) if c.expires is not None else None
    return Cookie(
        name=c.name,
        value=c.value if c.value is not None else "",
        http_only=http_only,
        secure=bool(c.secure),
        same_site=SameSite.parse(same_site if isinstance(same_site, str) else None),
        path=c.path or None,
        domain=c.domain or None,
        expires=expires,
    )


class LockingCookieJar(RequestsCookieJar):
    """
    requests cookie jar whose writes, iteration and snapshots share one lock.
    The lock is only held for in-memory work, never across network I/O.
    """

    def __init__(self, policy: Any = None):
        super().__init__(policy)
        self._jar_lock = RLock()

    def extract_cookies(self, response: Any, request: Any) -> None:
        with self._jar_lock:
            super().extract_cookies(response, request)

    def set_cookie(self, cookie: JarCookie, *args: Any, **kwargs: Any) -> Any:
        with self._jar_lock:
            return super().set_cookie(cookie, *args, **kwargs)

    def clear(self, domain: Optional[str] = None, path: Optional[str] = None, name: Optional[str] = None) -> None:
        with self._jar_lock:
            super().clear(domain, path, name)

    def __iter__(self) -> Iterator[JarCookie]:
        with self._jar_lock:
            return iter(list(super().__iter__()))

    def __getstate__(self) -> dict:
        state = super().__getstate__()
        state.pop("_jar_lock", None)
        return state

    def __setstate__(self, state: dict) -> None:
        super().__setstate__(state)
        self._jar_lock = RLock()

    # CookieJarPort
    def snapshot(self) -> List[Cookie]:
        with self._jar_lock:
            return [to_cookie(c) for c in self]

    def find(self, name: str) -> Optional[Cookie]:
        with self._jar_lock:
            for c in self:
                if c.name == name:
                    return to_cookie(c)
        return None
