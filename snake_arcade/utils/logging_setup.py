"""
Logging setup - configure the root logger once from LoggingConfig.
"""
import logging
from pathlib import Path

from .config_loader import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(config: LoggingConfig) -> None:
    """
    Configure logging for the application.

    Args:
        config: Level name and optional log file
    """
    level = getattr(logging, config.level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.level}")

    handlers = [logging.StreamHandler()]
    if config.log_file:
        Path(config.log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.log_file))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
