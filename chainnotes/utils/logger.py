"""Loguru setup for chainnotes."""

import sys
from pathlib import Path

from loguru import logger

from chainnotes.config import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[module]}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(config: LoggingConfig | None = None) -> None:
    """
    Route chainnotes logs to stderr and, when enabled, to a rotated file.

    Args:
        config: Logging section of the configuration (defaults apply when omitted)
    """
    config = config or LoggingConfig()
    logger.remove()
    # Records logged before setup_logging or outside get_logger carry no module
    logger.configure(extra={"module": "chainnotes"})

    logger.add(sys.stderr, level=config.level, format=CONSOLE_FORMAT, colorize=True)

    if config.log_to_file:
        log_dir = Path(config.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_dir / "chainnotes_{time:YYYY-MM-DD}.log",
            level=config.level,
            rotation=config.file_rotation,
            retention=config.file_retention,
            compression=config.compression,
            serialize=config.serialize,
            enqueue=True,
        )


def get_logger(name: str):
    """Logger bound to a module name, shown in the console sink."""
    return logger.bind(module=name)
