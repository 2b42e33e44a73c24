# httpc_test/application/ports/transport.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from httpc_test.application.ports.cookie_jar import CookieJarPort


def _noop() -> None:
    return None


@dataclass(frozen=True)
class RawResponse:
    status: int
    headers: List[Tuple[str, str]]  # received order, repeated names kept
    read: Callable[[], bytes]       # reads the whole body stream
    reason: Optional[str] = None
    close: Callable[[], None] = field(default=_noop)

    def header_values(self, name: str) -> List[str]:
        key = name.lower()
        return [v for n, v in self.headers if n.lower() == key]


class TransportPort(ABC):
    @abstractmethod
    def send(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        body: Optional[bytes] = None,
    ) -> RawResponse:
        """
        Applies Set-Cookie headers to cookie_jar before returning.
        Raises TransportError on network failure.
        """
        ...

    @property
    @abstractmethod
    def cookie_jar(self) -> CookieJarPort:
        ...
