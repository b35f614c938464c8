from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

_DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "catalog.json"


def parse_origins(raw: str) -> tuple[str, ...]:
    """Split a comma-separated CORS origin list, dropping blanks."""
    return tuple(o.strip() for o in raw.split(",") if o.strip())


@dataclass(frozen=True)
class AppConfig:
    catalog_path: Path = Path(os.getenv("CATALOG_PATH", str(_DEFAULT_CATALOG_PATH)))
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3001"))
    cors_origins: tuple[str, ...] = parse_origins(os.getenv("CORS_ORIGINS", "*"))
    environment: str = os.getenv("ENVIRONMENT", "production")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    vegetarian_category: str = os.getenv("VEGETARIAN_CATEGORY", "Vegetarian")

    @property
    def debug(self) -> bool:
        return self.environment.strip().lower() == "development"


DEFAULT_APP_CONFIG = AppConfig()


def setup_logging(config: AppConfig = DEFAULT_APP_CONFIG) -> None:
    """Configure root logging for the service."""
    log_level = getattr(logging, config.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
