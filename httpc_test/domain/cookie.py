# httpc_test/domain/cookie.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional


class SameSite(str, Enum):
    NONE = "None"  # unspecified or SameSite=None
    LAX = "Lax"
    STRICT = "Strict"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "SameSite":
        if not raw:
            return cls.NONE
        lowered = raw.strip().lower()
        for member in cls:
            if member.value.lower() == lowered:
                return member
        return cls.NONE


@dataclass(frozen=True)
class Cookie:
    name: str
    value: str
    http_only: bool = False
    secure: bool = False
    same_site: SameSite = SameSite.NONE
    path: Optional[str] = None
    domain: Optional[str] = None
    max_age: Optional[timedelta] = None  # response cookies only; the jar keeps expires
    expires: Optional[datetime] = None

    @property
    def same_site_lax(self) -> bool:
        return self.same_site is SameSite.LAX

    @property
    def same_site_strict(self) -> bool:
        return self.same_site is SameSite.STRICT
