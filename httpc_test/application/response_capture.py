# httpc_test/application/response_capture.py
from __future__ import annotations

import json
from typing import Sequence

from httpc_test.application.ports.transport import RawResponse
from httpc_test.domain.body import Body, BodyKind, JsonBody, OpaqueBody, TextBody, classify
from httpc_test.domain.cookie import Cookie
from httpc_test.domain.exceptions import BodyDecodeError
from httpc_test.domain.headers import Headers
from httpc_test.domain.response import Response
from httpc_test.domain.set_cookie import parse_set_cookies


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not valid json")


def _read_body(raw: RawResponse, kind: BodyKind) -> Body:
    if kind is BodyKind.OPAQUE:
        return OpaqueBody()

    data = raw.read()
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise BodyDecodeError(f"{kind.value} body is not valid UTF-8: {e}") from e

    if kind is BodyKind.TEXT:
        return TextBody(text)

    try:
        return JsonBody(json.loads(text, parse_constant=_reject_constant))
    except ValueError as e:
        raise BodyDecodeError(f"malformed json body: {e}") from e


def capture_response(
    method: str,
    url: str,
    client_cookies: Sequence[Cookie],
    raw: RawResponse,
) -> Response:
    """
    Turn a raw transport outcome into an immutable Response.

    client_cookies must be the jar snapshot taken after the transport call
    returned, so the Set-Cookie effects of this very request are visible.
    Raises BodyDecodeError when a JSON/text body does not conform; nothing is
    returned in that case.
    """
    status = raw.status
    response_cookies = parse_set_cookies(raw.header_values("Set-Cookie"))
    headers = Headers.from_pairs(raw.headers)
    kind = classify(headers.get("Content-Type"))
    body = _read_body(raw, kind)

    return Response(
        request_method=method,
        request_url=url,
        status=status,
        reason=raw.reason,
        headers=headers,
        client_cookies=tuple(client_cookies),
        response_cookies=tuple(response_cookies),
        body=body,
    )
