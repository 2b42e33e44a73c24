# httpc_test/domain/json_pointer.py
from __future__ import annotations

from typing import Any, List

from httpc_test.domain.exceptions import NoJsonValueFoundError


def split_pointer(pointer: str) -> List[str]:
    """
    "/a/b~1c/0" -> ["a", "b/c", "0"]
    "" addresses the whole document.
    """
    if pointer == "":
        return []
    if not pointer.startswith("/"):
        raise NoJsonValueFoundError(pointer)
    # ~1 before ~0 so that "~01" decodes to "~1"
    return [t.replace("~1", "/").replace("~0", "~") for t in pointer[1:].split("/")]


def _array_index(token: str, size: int, pointer: str) -> int:
    if not (token.isascii() and token.isdigit()) or (len(token) > 1 and token.startswith("0")):
        raise NoJsonValueFoundError(pointer)
    idx = int(token)
    if idx >= size:
        raise NoJsonValueFoundError(pointer)
    return idx


def resolve_pointer(document: Any, pointer: str) -> Any:
    current = document
    for token in split_pointer(pointer):
        if isinstance(current, dict):
            if token not in current:
                raise NoJsonValueFoundError(pointer)
            current = current[token]
        elif isinstance(current, list):
            current = current[_array_index(token, len(current), pointer)]
        else:
            raise NoJsonValueFoundError(pointer)
    return current
