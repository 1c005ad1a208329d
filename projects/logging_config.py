"""
Logging configuration for Projects.

Log records go to stderr so they never land between menu prompts on stdout.
Text lines are colored by level when stderr is a terminal; JSON lines are
available for piping into a log collector.
"""

import json
import logging
import sys
from typing import Optional

from projects.config import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

RESET = "\x1b[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\x1b[38;20m",
    logging.INFO: "\x1b[32;20m",
    logging.WARNING: "\x1b[33;20m",
    logging.ERROR: "\x1b[31;20m",
    logging.CRITICAL: "\x1b[31;1m",
}


class ColoredFormatter(logging.Formatter):
    """Wraps each formatted line in the ANSI color of its level."""

    def __init__(self, use_color: bool = True):
        super().__init__(LOG_FORMAT, datefmt=DATE_FORMAT)
        self.use_color = use_color

    def format(self, record):
        line = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if not self.use_color or color is None:
            return line
        return f"{color}{line}{RESET}"


class JsonFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record):
        log_record = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_record)


def setup_logging(
    level: Optional[str] = None,
    json_format: bool = False,
) -> None:
    """
    Point the root logger at stderr.

    ``level`` wins over settings; without it, ``debug`` selects DEBUG and
    otherwise ``log_level`` applies.
    """
    settings = get_settings()

    log_level = level or ("DEBUG" if settings.debug else settings.log_level)
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(ColoredFormatter(use_color=sys.stderr.isatty()))
    root_logger.addHandler(handler)

    # SQL echo is controlled by the engine, keep the logger itself quiet
    if not settings.debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logging.getLogger("projects").setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``projects`` namespace, e.g. ``get_logger("menu")``."""
    if not name.startswith("projects"):
        name = f"projects.{name}"
    return logging.getLogger(name)
