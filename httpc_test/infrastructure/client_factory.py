# httpc_test/infrastructure/client_factory.py
from __future__ import annotations

from typing import Optional

from httpc_test.application.client import Client
from httpc_test.application.ports.logger import LoggerPort
from httpc_test.application.ports.transport import TransportPort
from httpc_test.infrastructure.config.settings import Settings, load_settings
from httpc_test.infrastructure.http.requests_transport import RequestsSessionTransport
from httpc_test.infrastructure.logging.loguru_logger import LoguruLogger


def new_client(
    base_url: Optional[str] = None,
    *,
    settings: Optional[Settings] = None,
    logger: Optional[LoggerPort] = None,
    transport: Optional[TransportPort] = None,
) -> Client:
    """
    Client backed by a requests session with its own cookie jar.
    An explicit base_url wins over HTTPC_TEST_BASE_URL.
    """
    settings = settings or load_settings()
    if transport is None:
        transport = RequestsSessionTransport(
            base_headers={"User-Agent": settings.user_agent},
            timeout_sec=settings.timeout_sec,
        )
    return Client(
        transport=transport,
        base_url=base_url if base_url is not None else settings.base_url,
        logger=logger or LoguruLogger(),
    )
