# httpc_test/application/services/redactor.py
from __future__ import annotations

from typing import Any, Dict, Optional

SENSITIVE_KEYS = {"password", "passwd", "authorization", "proxy-authorization", "cookie", "set-cookie", "x-api-key"}
MASK = "********"


def mask_value(key: str, value: Any) -> Any:
    if key.lower() in SENSITIVE_KEYS and value is not None:
        return MASK
    return value


def mask_dict(d: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    return {k: mask_value(k, v) for k, v in (d or {}).items()}
