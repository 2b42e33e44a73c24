__version__ = "0.1.0"

from loguru import logger as _logger

from httpc_test.application.client import Client
from httpc_test.application.push_content import (
    JsonContent,
    PushContent,
    TextContent,
    json_content,
    text_content,
)
from httpc_test.domain.body import BodyKind, JsonBody, OpaqueBody, TextBody, classify
from httpc_test.domain.cookie import Cookie, SameSite
from httpc_test.domain.exceptions import (
    BodyDecodeError,
    HttpcTestError,
    NoJsonBodyError,
    NoJsonValueFoundError,
    NoTextBodyError,
    TransportError,
    TypeMismatchError,
    UnsupportedMethodError,
)
from httpc_test.domain.response import Response
from httpc_test.infrastructure.client_factory import new_client

# library: silent until setup_console_logging() enables the namespace
_logger.disable("httpc_test")

__all__ = [
    "__version__",
    "new_client",
    "Client",
    "Response",
    "Cookie",
    "SameSite",
    "BodyKind",
    "JsonBody",
    "TextBody",
    "OpaqueBody",
    "classify",
    "PushContent",
    "JsonContent",
    "TextContent",
    "json_content",
    "text_content",
    "HttpcTestError",
    "TransportError",
    "BodyDecodeError",
    "NoJsonBodyError",
    "NoTextBodyError",
    "NoJsonValueFoundError",
    "TypeMismatchError",
    "UnsupportedMethodError",
]
