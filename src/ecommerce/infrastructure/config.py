"""Runtime settings, read once from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_LEVELS_BY_ENVIRONMENT = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    environment: str = "development"
    log_level: str = "DEBUG"

    @property
    def accounts_file(self) -> Path:
        return self.data_dir / "accounts.json"

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def orders_file(self) -> Path:
        return self.data_dir / "orders.json"

    @staticmethod
    def from_env(data_dir: Path | None = None) -> Settings:
        """Build settings from ``ECOMMERCE_DATA_DIR``, ``ENVIRONMENT`` and
        ``LOG_LEVEL``. An explicit *data_dir* wins over the environment."""
        environment = os.getenv("ENVIRONMENT", "development").lower()
        if data_dir is None:
            env_dir = os.getenv("ECOMMERCE_DATA_DIR")
            data_dir = Path(env_dir) if env_dir else DEFAULT_DATA_DIR
        log_level = os.getenv("LOG_LEVEL", _LEVELS_BY_ENVIRONMENT.get(environment, "INFO"))
        return Settings(
            data_dir=data_dir,
            environment=environment,
            log_level=log_level.upper(),
        )
