# httpc_test/domain/transcript.py
from __future__ import annotations

import json
import sys
from http import HTTPStatus
from typing import TYPE_CHECKING, List, Optional, TextIO

from httpc_test.domain.body import JsonBody, TextBody

if TYPE_CHECKING:
    from httpc_test.domain.response import Response


def _label(name: str) -> str:
    return f"=> {name:<15}:"


def _status_line(status: int, reason: Optional[str]) -> str:
    if not reason:
        try:
            reason = HTTPStatus(status).phrase
        except ValueError:
            reason = None
    return f"{status} {reason}" if reason else str(status)


def render(response: "Response", include_body: bool = True) -> str:
    lines: List[str] = [
        "",
        f"=== Response for {response.request_method} {response.request_url}",
        f"{_label('Status')} {_status_line(response.status, response.reason)}",
        _label("Headers"),
    ]
    for name, value in response.headers:
        lines.append(f"   {name}: {value}")

    if response.response_cookies:
        lines.append(_label("Response Cookies"))
        for c in response.response_cookies:
            lines.append(f"   {c.name}: {c.value}")

    if response.client_cookies:
        lines.append(_label("Client Cookies"))
        for c in response.client_cookies:
            lines.append(f"   {c.name}: {c.value}")

    if include_body:
        body = response.body
        if isinstance(body, JsonBody):
            lines.append(_label("Response Body"))
            lines.append(json.dumps(body.value, indent=2, ensure_ascii=False))
        elif isinstance(body, TextBody):
            lines.append(_label("Response Body"))
            lines.append(body.text)

    lines.append("===")
    lines.append("")
    return "\n".join(lines) + "\n"


def print_response(response: "Response", include_body: bool = True, file: Optional[TextIO] = None) -> None:
    out = file if file is not None else sys.stdout
    out.write(render(response, include_body=include_body))
    out.flush()
