"""Logging configuration for Workflow Board."""

import logging
import sys

from ..config import get_config

SYNC_LOGGER = "workflow_board.services.workflow_sync"

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def parse_level(name: str, default: int = logging.INFO) -> int:
    """Map a config level name to a logging level."""
    return LEVELS.get(name.lower(), default)


def setup_logging() -> None:
    """Configure logging based on config settings.

    The column/status sync logger takes its level from ``sync.log_level``.
    """
    config = get_config()
    level = parse_level(config.logging.level)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    logging.getLogger("uvicorn").setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(level)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.DEBUG if config.logging.level == "debug" else logging.WARNING
    )
    logging.getLogger(SYNC_LOGGER).setLevel(parse_level(config.sync.log_level, level))

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured at level: {config.logging.level} "
        f"(sync: {config.sync.log_level})"
    )
