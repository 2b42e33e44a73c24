# httpc_test/infrastructure/http/requests_transport.py
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import requests

from httpc_test.application.ports.transport import RawResponse, TransportPort
from httpc_test.domain.exceptions import TransportError
from httpc_test.infrastructure.http.locking_cookie_jar import LockingCookieJar


def _header_pairs(resp: requests.Response) -> List[Tuple[str, str]]:
    """
    Response headers in received order, repeated names kept.

    Read from the http.client message requests also hands to the cookie jar;
    urllib3's HTTPHeaderDict groups values by name (A, A, B for A, B, A).
    """
    original = getattr(resp.raw, "_original_response", None)
    msg = getattr(original, "msg", None)
    if msg is not None and hasattr(msg, "items"):
        return [(str(name), str(value)) for name, value in msg.items()]

    raw_headers = getattr(resp.raw, "headers", None)
    if raw_headers is not None and hasattr(raw_headers, "getlist"):
        return [(name, value) for name in raw_headers for value in raw_headers.getlist(name)]
    return list(resp.headers.items())


def _read_content(resp: requests.Response, method: str, url: str) -> bytes:
    try:
        return resp.content
    except requests.RequestException as e:
        raise TransportError(f"{method} {url}: failed reading body: {e}", original_error=e) from e


class RequestsSessionTransport(TransportPort):
    def __init__(
        self,
        base_headers: Optional[Dict[str, str]] = None,
        timeout_sec: float = 20.0,
        session: Optional[requests.Session] = None,
    ):
        self._session = session or requests.Session()
        self._jar = LockingCookieJar()
        self._jar.update(self._session.cookies)
        self._session.cookies = self._jar
        self._base_headers = dict(base_headers or {})
        self._timeout = timeout_sec

    @property
    def cookie_jar(self) -> LockingCookieJar:
        return self._jar

    @property
    def session(self) -> requests.Session:
        return self._session

    def send(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        body: Optional[bytes] = None,
    ) -> RawResponse:
        merged = dict(self._base_headers)
        if headers:
            merged.update(headers)

        try:
            resp = self._session.request(
                method=method.upper(),
                url=url,
                headers=merged,
                data=body,
                timeout=self._timeout,
                stream=True,  # body is read by the capture step, or not at all
            )
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}", original_error=e) from e

        return RawResponse(
            status=resp.status_code,
            headers=_header_pairs(resp),
            read=lambda: _read_content(resp, method, url),
            reason=resp.reason or None,
            close=resp.close,
        )

    def close(self) -> None:
        self._session.close()
