# httpc_test/domain/response.py
from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from httpc_test.domain.body import Body, BodyKind, JsonBody, TextBody
from httpc_test.domain.cookie import Cookie
from httpc_test.domain.exceptions import NoJsonBodyError, NoTextBodyError, TypeMismatchError
from httpc_test.domain.headers import Headers
from httpc_test.domain.json_pointer import resolve_pointer
from httpc_test.domain.transcript import print_response

T = TypeVar("T")


def decode_as(value: Any, type_: Type[T]) -> T:
    try:
        return TypeAdapter(type_).validate_python(value)
    except ValidationError as e:
        raise TypeMismatchError(str(e)) from e


def _find_cookie(cookies: Tuple[Cookie, ...], name: str) -> Optional[Cookie]:
    for c in cookies:
        if c.name == name:
            return c
    return None


@dataclass(frozen=True)
class Response:
    """
    Captured outcome of one request. Built once by the capture step, never mutated.

    client_cookies: the client jar as it was right after this response arrived
    response_cookies: only the cookies this response set via Set-Cookie
    """
    request_method: str
    request_url: str
    status: int
    headers: Headers
    client_cookies: Tuple[Cookie, ...]
    response_cookies: Tuple[Cookie, ...]
    body: Body
    reason: Optional[str] = None

    @property
    def body_kind(self) -> BodyKind:
        return self.body.kind

    # -- headers
    def header(self, name: str) -> Optional[str]:
        return self.headers.get(name)

    def header_all(self, name: str) -> List[str]:
        return self.headers.get_all(name)

    # -- cookies set by this response
    def response_cookie(self, name: str) -> Optional[Cookie]:
        return _find_cookie(self.response_cookies, name)

    def response_cookie_value(self, name: str) -> Optional[str]:
        c = self.response_cookie(name)
        return c.value if c is not None else None

    # -- client jar at capture time
    def client_cookie(self, name: str) -> Optional[Cookie]:
        return _find_cookie(self.client_cookies, name)

    def client_cookie_value(self, name: str) -> Optional[str]:
        c = self.client_cookie(name)
        return c.value if c is not None else None

    # -- body
    def json_body(self) -> Any:
        if isinstance(self.body, JsonBody):
            return copy.deepcopy(self.body.value)
        raise NoJsonBodyError()

    def text_body(self) -> str:
        if isinstance(self.body, TextBody):
            return self.body.text
        raise NoTextBodyError()

    def json_body_as(self, type_: Type[T]) -> T:
        return decode_as(self.json_body(), type_)

    def json_value_at(self, pointer: str, type_: Optional[Type[T]] = None) -> Any:
        """
        Resolve a JSON Pointer ("/data/items/0/name") inside the JSON body.
        With type_, the resolved value is validated into that type.
        """
        if not isinstance(self.body, JsonBody):
            raise NoJsonBodyError()
        value = copy.deepcopy(resolve_pointer(self.body.value, pointer))
        if type_ is None:
            return value
        return decode_as(value, type_)

    # -- printing
    def print(self) -> None:
        print_response(self, include_body=True)

    def print_no_body(self) -> None:
        print_response(self, include_body=False)
