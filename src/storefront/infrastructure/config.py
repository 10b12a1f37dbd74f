"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = _DEFAULT_DATA_DIR
    address_url: str = "https://viacep.com.br"
    address_timeout: float = 5.0
    admin_token: str | None = None
    log_level: str = "INFO"

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        timeout = float(env.get("STOREFRONT_ADDRESS_TIMEOUT", "5.0"))
        if timeout <= 0:
            raise ValueError("STOREFRONT_ADDRESS_TIMEOUT must be positive")

        return Settings(
            data_dir=Path(env.get("STOREFRONT_DATA_DIR", str(_DEFAULT_DATA_DIR))),
            address_url=env.get("STOREFRONT_ADDRESS_URL", "https://viacep.com.br").rstrip("/"),
            address_timeout=timeout,
            admin_token=env.get("STOREFRONT_ADMIN_TOKEN") or None,
            log_level=env.get("STOREFRONT_LOG_LEVEL", "INFO").upper(),
        )
