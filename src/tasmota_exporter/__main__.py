from __future__ import annotations

import sys

import uvicorn
from loguru import logger

from tasmota_exporter import settings
from tasmota_exporter.api import app


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def main() -> None:
    """Blocking runner, serves /probe until interrupted."""
    configure_logging()
    host, port = settings.parse_listen_addr(settings.LISTEN_ADDR)

    logger.info(f"Starting tasmota exporter on {settings.LISTEN_ADDR}")
    uvicorn.run(app, host=host, port=port, log_level="warning")
    logger.info("Server closed")


if __name__ == "__main__":
    main()
