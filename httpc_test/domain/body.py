# httpc_test/domain/body.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class BodyKind(str, Enum):
    JSON = "json"
    TEXT = "text"
    OPAQUE = "opaque"


def classify(content_type: Optional[str]) -> BodyKind:
    """
    Decide how a response body is interpreted from its Content-Type value.
    Prefix match on the media type; parameters such as charset are ignored.
    """
    if not content_type:
        return BodyKind.OPAQUE
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type.startswith("application/json"):
        return BodyKind.JSON
    if media_type.startswith("text/"):
        return BodyKind.TEXT
    return BodyKind.OPAQUE


@dataclass(frozen=True)
class JsonBody:
    value: Any

    @property
    def kind(self) -> BodyKind:
        return BodyKind.JSON


@dataclass(frozen=True)
class TextBody:
    text: str

    @property
    def kind(self) -> BodyKind:
        return BodyKind.TEXT


@dataclass(frozen=True)
class OpaqueBody:
    # bytes are never read for opaque bodies

    @property
    def kind(self) -> BodyKind:
        return BodyKind.OPAQUE


Body = Union[JsonBody, TextBody, OpaqueBody]
