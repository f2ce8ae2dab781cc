"""Server entry point."""

import logging

import uvicorn

from .app import create_app
from ..core.config import RelayConfig

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure the root logger for the relay process."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """Entry point for the letter relay server."""
    config = RelayConfig.from_env()
    configure_logging(config.log_level)
    logger.info(f"Starting letter relay: {config.get_environment_summary()}")

    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=False,
    )
