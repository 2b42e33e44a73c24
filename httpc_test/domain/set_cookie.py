# httpc_test/domain/set_cookie.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from http.cookiejar import parse_ns_headers
from typing import Any, Dict, Iterable, List, Optional, Tuple

from httpc_test.domain.cookie import Cookie, SameSite


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def _expires(raw: Any) -> Optional[datetime]:
    # parse_ns_headers already turned the date into epoch seconds, or None
    if raw is None:
        return None
    try:
        return datetime.fromtimestamp(raw, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def _max_age(raw: Optional[str]) -> Optional[timedelta]:
    if raw in ("", None):
        return None
    try:
        return timedelta(seconds=int(raw))
    except (TypeError, ValueError):
        return None


def _attributes(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    """
    Attribute names lowercased; first occurrence wins.
    Unknown attributes (Priority, Partitioned, ...) are kept but never read.
    """
    attrs: Dict[str, Any] = {}
    for key, value in pairs:
        attrs.setdefault(key.lower(), value)
    return attrs


def parse_set_cookie(header: str) -> Optional[Cookie]:
    """
    Parse one Set-Cookie header value with the same splitter the requests
    cookie jar uses, so both views agree on which cookies a response set.
    Returns None when the header has no `name=value` pair in front.
    """
    parsed = parse_ns_headers([header])
    if not parsed:
        return None

    (name, value), *rest = parsed[0]
    if value is None:
        return None

    attrs = _attributes(rest)
    return Cookie(
        name=name,
        value=_unquote(value),
        http_only="httponly" in attrs,
        secure="secure" in attrs,
        same_site=SameSite.parse(attrs.get("samesite")),
        path=attrs.get("path") or None,
        domain=attrs.get("domain") or None,
        max_age=_max_age(attrs.get("max-age")),
        expires=_expires(attrs.get("expires")),
    )


def parse_set_cookies(headers: Iterable[str]) -> List[Cookie]:
    out: List[Cookie] = []
    for header in headers:
        cookie = parse_set_cookie(header)
        if cookie is not None:
            out.append(cookie)
    return out
