# httpc_test/application/client.py
from __future__ import annotations

from threading import Lock
from typing import Any, Dict, List, Optional

from httpc_test.application.ports.logger import LoggerPort, NullLogger
from httpc_test.application.ports.transport import TransportPort
from httpc_test.application.push_content import PushContent, to_push_content
from httpc_test.application.response_capture import capture_response
from httpc_test.application.services.cookie_diff import diff_cookies
from httpc_test.application.services.redactor import mask_dict
from httpc_test.domain.cookie import Cookie
from httpc_test.domain.exceptions import HttpcTestError, UnsupportedMethodError
from httpc_test.domain.response import Response

PUSH_METHODS = ("POST", "PUT", "PATCH")


class Client:
    """
    Test-oriented HTTP client.

    Every request returns an immutable Response holding the status, headers,
    the cookies set by that response, a snapshot of the client cookie jar and
    the buffered body. Cookies accumulate in the transport's jar across calls.
    """

    def __init__(
        self,
        transport: TransportPort,
        base_url: Optional[str] = None,
        logger: Optional[LoggerPort] = None,
    ):
        self._transport = transport
        self._base_url = base_url
        self._logger = logger or NullLogger()
        self._last_cookies: List[Cookie] = []
        self._cookies_lock = Lock()

    @property
    def base_url(self) -> Optional[str]:
        return self._base_url

    def compose_url(self, path: str) -> str:
        # plain concatenation, callers own the leading "/"
        if self._base_url:
            return f"{self._base_url}{path}"
        return path

    # region: --- client cookies (live jar)
    def client_cookies(self) -> List[Cookie]:
        return self._transport.cookie_jar.snapshot()

    def client_cookie(self, name: str) -> Optional[Cookie]:
        return self._transport.cookie_jar.find(name)

    def client_cookie_value(self, name: str) -> Optional[str]:
        c = self.client_cookie(name)
        return c.value if c is not None else None
    # endregion

    # region: --- raw verbs
    def do_get(self, path: str) -> Response:
        return self._send("GET", self.compose_url(path))

    def do_delete(self, path: str) -> Response:
        return self._send("DELETE", self.compose_url(path))

    def do_post(self, path: str, content: Any) -> Response:
        return self.do_push("POST", path, content)

    def do_put(self, path: str, content: Any) -> Response:
        return self.do_push("PUT", path, content)

    def do_patch(self, path: str, content: Any) -> Response:
        return self.do_push("PATCH", path, content)

    def do_push(self, method: str, path: str, content: Any) -> Response:
        verb = method.upper()
        if verb not in PUSH_METHODS:
            raise UnsupportedMethodError(method)
        return self._send(verb, self.compose_url(path), to_push_content(content))
    # endregion

    # region: --- typed verbs
    def get(self, path: str, type_: Any = Any) -> Any:
        return self.do_get(path).json_body_as(type_)

    def delete(self, path: str, type_: Any = Any) -> Any:
        return self.do_delete(path).json_body_as(type_)

    def post(self, path: str, content: Any, type_: Any = Any) -> Any:
        return self.do_post(path, content).json_body_as(type_)

    def put(self, path: str, content: Any, type_: Any = Any) -> Any:
        return self.do_put(path, content).json_body_as(type_)

    def patch(self, path: str, content: Any, type_: Any = Any) -> Any:
        return self.do_patch(path, content).json_body_as(type_)
    # endregion

    def _send(self, method: str, url: str, content: Optional[PushContent] = None) -> Response:
        headers: Optional[Dict[str, str]] = None
        body: Optional[bytes] = None
        if content is not None:
            headers = {"Content-Type": content.content_type}
            body = content.encode()

        self._logger.info(
            "http.request",
            method=method,
            url=url,
            headers=mask_dict(headers),
            content_type=content.content_type if content is not None else None,
            body_len=len(body) if body is not None else 0,
        )

        try:
            raw = self._transport.send(method, url, headers=headers, body=body)
        except HttpcTestError as e:
            self._logger.error("http.transport_failed", method=method, url=url, error=str(e))
            raise

        try:
            # snapshot after send so this response's Set-Cookie is visible
            client_cookies = self._transport.cookie_jar.snapshot()
            response = capture_response(method, url, client_cookies, raw)
        except HttpcTestError as e:
            self._logger.error(
                "http.capture_failed",
                method=method,
                url=url,
                status=raw.status,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise
        finally:
            raw.close()

        self._log_response(response)
        return response

    def _log_response(self, response: Response) -> None:
        self._logger.info(
            "http.response",
            method=response.request_method,
            url=response.request_url,
            status=response.status,
            content_type=response.header("Content-Type"),
            body_kind=response.body_kind.value,
            headers=mask_dict(response.headers.as_dict()),
            response_cookies=[c.name for c in response.response_cookies],
            client_cookie_count=len(response.client_cookies),
        )

        with self._cookies_lock:
            d = diff_cookies(self._last_cookies, response.client_cookies)
            self._last_cookies = list(response.client_cookies)

        if not d.empty:
            self._logger.info(
                "http.cookie_diff",
                url=response.request_url,
                added=d.added,
                removed=d.removed,
                changed=d.changed,
            )
