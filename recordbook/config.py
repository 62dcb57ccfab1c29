"""Runtime settings read from the environment.

    RECORDBOOK_STORE      JSON store used by the stock commands (default: inventory.json)
    RECORDBOOK_LOG_LEVEL  Logging level name (default: WARNING)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_STORE = "inventory.json"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Settings:
    store_path: Path
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, env: Optional[dict[str, str]] = None) -> Settings:
        """Build settings from env (defaults to os.environ)."""
        env = os.environ if env is None else env
        return cls(
            store_path=Path(env.get("RECORDBOOK_STORE") or DEFAULT_STORE),
            log_level=(env.get("RECORDBOOK_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )
