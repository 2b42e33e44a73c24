# httpc_test/infrastructure/config/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from dotenv import dotenv_values

from httpc_test import __version__

ENV_PREFIX = "HTTPC_TEST_"
DEFAULT_TIMEOUT_SEC = 20.0
DEFAULT_USER_AGENT = f"httpc-test/{__version__}"


@dataclass(frozen=True)
class Settings:
    base_url: Optional[str] = None
    timeout_sec: float = DEFAULT_TIMEOUT_SEC
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "INFO"


def _float(values: Mapping[str, Optional[str]], key: str, default: float) -> float:
    raw = values.get(key)
    if raw in (None, ""):
        return default
    try:
        return float(raw)  # type: ignore[arg-type]
    except ValueError as e:
        raise ValueError(f"{key} must be a number, got {raw!r}") from e


def load_settings(
    env_file: Union[str, Path, None] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    .env values (when the file exists) overlaid by the process environment.
    """
    values: Dict[str, Optional[str]] = {}
    path = Path(env_file) if env_file is not None else Path.cwd() / ".env"
    if path.exists():
        values.update(dotenv_values(path))
    values.update(os.environ if environ is None else environ)

    return Settings(
        base_url=values.get(f"{ENV_PREFIX}BASE_URL") or None,
        timeout_sec=_float(values, f"{ENV_PREFIX}TIMEOUT_SEC", DEFAULT_TIMEOUT_SEC),
        user_agent=values.get(f"{ENV_PREFIX}USER_AGENT") or DEFAULT_USER_AGENT,
        log_level=(values.get(f"{ENV_PREFIX}LOG_LEVEL") or "INFO").upper(),
    )
