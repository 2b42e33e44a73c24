# httpc_test/infrastructure/logging/console_logger.py
from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, TextIO

from httpc_test.application.ports.logger import LoggerPort

_LEVELS = {"DEBUG": 10, "INFO": 20, "ERROR": 40}


@dataclass(frozen=True)
class ConsoleLogger(LoggerPort):
    """
    One line per event: `<event> <json payload>`.
    Written to stderr by default so transcripts on stdout stay clean.
    """
    level: str = "DEBUG"
    stream: Optional[TextIO] = None
    bound: Dict[str, Any] = field(default_factory=dict)

    def bind(self, **fields: Any) -> "ConsoleLogger":
        merged = dict(self.bound)
        merged.update(fields)
        return ConsoleLogger(level=self.level, stream=self.stream, bound=merged)

    def debug(self, event: str, **fields: Any) -> None:
        self._emit("DEBUG", event, fields)

    def info(self, event: str, **fields: Any) -> None:
        self._emit("INFO", event, fields)

    def error(self, event: str, **fields: Any) -> None:
        self._emit("ERROR", event, fields)

    def _emit(self, level: str, event: str, fields: Dict[str, Any]) -> None:
        if _LEVELS[level] < _LEVELS.get(self.level.upper(), 0):
            return
        payload = dict(self.bound)
        payload.update(fields)
        payload.setdefault("type", event)
        payload.setdefault("level", level.lower())
        out = self.stream if self.stream is not None else sys.stderr
        print(f"{event} {json.dumps(payload, ensure_ascii=False, default=str)}", file=out)
