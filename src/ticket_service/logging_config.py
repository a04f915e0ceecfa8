"""Logging setup shared by every layer."""

from __future__ import annotations

import sys

from loguru import logger as loguru_logger

LAYER = "layer"

log_format = " | ".join(
    (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</>",
        "<lvl>{level:<8}</>",
        f"<m>{{extra[{LAYER}]:<8}}</>",
        "<c>{name}:{function}:{line}</>",
        "{message}",
    )
)

logger = loguru_logger.bind(**{LAYER: ""})


def configure_logging(level: str = "INFO") -> None:
    # drop loguru's default sink so records are not printed twice
    loguru_logger.remove()
    loguru_logger.add(sys.stderr, format=log_format, level=level.upper())
