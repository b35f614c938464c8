"""
Run the API server.

Usage:
    python -m gastronomy_api
"""
from __future__ import annotations

import logging

import uvicorn

from .config import DEFAULT_APP_CONFIG, setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    config = DEFAULT_APP_CONFIG
    # Must run before the app module is imported; importing it loads the catalog
    setup_logging(config)
    logger.info("Starting server on http://%s:%d", config.host, config.port)
    uvicorn.run(
        "gastronomy_api.app:app",
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
