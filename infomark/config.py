from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from .routes import DEFAULT_API_VERSION
from .transport import DEFAULT_USER_AGENT, ConnectionTarget

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
_ENV_FILE = _PROJECT_ROOT / '.env'
if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE)


def _optional_float(value: str | None) -> float | None:
    if value is None or value.strip() == '':
        return None
    return float(value)


@dataclass(slots=True)
class Settings:
    host: str = field(default_factory=lambda: os.getenv('INFOMARK_HOST', 'localhost'))
    port: int = field(default_factory=lambda: int(os.getenv('INFOMARK_PORT', 2020)))
    ssl: bool = field(default_factory=lambda: os.getenv('INFOMARK_SSL', '1') != '0')
    user_agent: str = field(default_factory=lambda: os.getenv('INFOMARK_USER_AGENT', DEFAULT_USER_AGENT))
    timeout: float | None = field(default_factory=lambda: _optional_float(os.getenv('INFOMARK_TIMEOUT')))
    api_version: str = field(default_factory=lambda: os.getenv('INFOMARK_API_VERSION', DEFAULT_API_VERSION))

    def target(self) -> ConnectionTarget:
        return ConnectionTarget(host=self.host, port=self.port, scheme='https' if self.ssl else 'http')


__all__ = ['Settings']
