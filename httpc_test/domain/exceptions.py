# httpc_test/domain/exceptions.py
from __future__ import annotations

from typing import Optional


class HttpcTestError(Exception):
    pass


class TransportError(HttpcTestError):
    """Network, connection or body read failure reported by the transport."""

    def __init__(self, message: str, original_error: Optional[BaseException] = None):
        super().__init__(message)
        self.original_error = original_error


class BodyDecodeError(HttpcTestError):
    """The content-type announced JSON or text but the bytes did not conform."""


class NoJsonBodyError(HttpcTestError):
    def __init__(self, message: str = "No json body"):
        super().__init__(message)


class NoTextBodyError(HttpcTestError):
    def __init__(self, message: str = "No text body"):
        super().__init__(message)


class NoJsonValueFoundError(HttpcTestError):
    def __init__(self, pointer: str):
        super().__init__(f"No json value found at pointer '{pointer}'")
        self.pointer = pointer


class TypeMismatchError(HttpcTestError):
    pass


class UnsupportedMethodError(HttpcTestError):
    def __init__(self, method: str):
        super().__init__(f"Unsupported push method: {method} (expected POST, PUT or PATCH)")
        self.method = method
