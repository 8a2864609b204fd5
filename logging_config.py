"""Centralized logging configuration."""
import logging

LOG_FORMAT = "%(levelname)s: %(message)s"

# Libraries that are excessively noisy at INFO level
QUIET_LOGGERS = [
    "httpx",
    "httpcore",
    "urllib3",
    "multipart",
]


def setup_logging(level: int | str = logging.INFO) -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
