# httpc_test/application/push_content.py
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Tuple, Union

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain"


@dataclass(frozen=True)
class JsonContent:
    value: Any

    @property
    def content_type(self) -> str:
        return JSON_CONTENT_TYPE

    def encode(self) -> bytes:
        return json.dumps(self.value, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


@dataclass(frozen=True)
class TextContent:
    body: str
    content_type: str = TEXT_CONTENT_TYPE

    def encode(self) -> bytes:
        return self.body.encode("utf-8")


PushContent = Union[JsonContent, TextContent]


def json_content(value: Any) -> JsonContent:
    return JsonContent(value)


def text_content(body: str, content_type: str = TEXT_CONTENT_TYPE) -> TextContent:
    return TextContent(body=body, content_type=content_type)


def _is_text_pair(value: Any) -> bool:
    return (
        isinstance(value, tuple)
        and len(value) == 2
        and isinstance(value[0], str)
        and isinstance(value[1], str)
    )


def to_push_content(value: Union[PushContent, str, Tuple[str, str], Any]) -> PushContent:
    """
    str                  -> text/plain
    (body, content_type) -> text with that content type
    JsonContent/TextContent pass through
    anything else        -> JSON (use json_content() for a bare JSON string)
    """
    if isinstance(value, (JsonContent, TextContent)):
        return value
    if isinstance(value, str):
        return TextContent(body=value)
    if _is_text_pair(value):
        return TextContent(body=value[0], content_type=value[1])
    return JsonContent(value)
