# httpc_test/application/ports/cookie_jar.py
from __future__ import annotations

from typing import List, Optional, Protocol

from httpc_test.domain.cookie import Cookie


class CookieJarPort(Protocol):
    """
    Client-side cookie store. Written by the transport on every response,
    only read from here.
    """

    def snapshot(self) -> List[Cookie]:
        ...

    def find(self, name: str) -> Optional[Cookie]:
        ...
