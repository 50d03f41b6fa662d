"""
Settings and logging setup.

    settings = Settings.from_env()
    configure_logging(settings.log_level)

Variables:
    STOREFRONT_DATABASE_URL   SQLAlchemy URL, or memory:// for no persistence
    STOREFRONT_LOG_LEVEL      logging level name
    STOREFRONT_RECHECK_STOCK  re-validate stock when placing an order
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

MEMORY_URL = "memory://"
DEFAULT_DATABASE_URL = "sqlite:///storefront.db"
DEFAULT_LOG_LEVEL = "INFO"

_TRUE = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True, slots=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    log_level: str = DEFAULT_LOG_LEVEL
    recheck_stock: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return cls(
            database_url=env.get("STOREFRONT_DATABASE_URL", DEFAULT_DATABASE_URL),
            log_level=env.get("STOREFRONT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            recheck_stock=env.get("STOREFRONT_RECHECK_STOCK", "false").strip().lower() in _TRUE,
        )

    @property
    def in_memory(self) -> bool:
        return self.database_url == MEMORY_URL


def configure_logging(level: str | int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


__all__ = ("MEMORY_URL", "Settings", "configure_logging")
