#!/usr/bin/env python3
"""
Logging Utilities
Console loggers for the web routes and the Spotify accounts client.
Colors are applied only when the target stream is a terminal, so gunicorn
log files and captured output stay plain.
"""
import sys
import logging
from typing import Optional, TextIO

from spotify_token_app.config import Config

LOG_FORMATS = {
    'simple': '%(levelname)s - %(message)s',
    'detailed': '%(asctime)s | %(name)-8s | %(levelname)-8s | %(message)s',
}


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name for terminal output"""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',      # Cyan
        logging.INFO: '\033[32m',       # Green
        logging.WARNING: '\033[33m',    # Yellow
        logging.ERROR: '\033[31m',      # Red
        logging.CRITICAL: '\033[35m',   # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, fmt: str, use_color: bool = True):
        super().__init__(fmt=fmt, datefmt='%Y-%m-%d %H:%M:%S')
        self.use_color = use_color

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno) if self.use_color else None
        if not color:
            return super().format(record)
        # Color a copy so other handlers keep the plain level name
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


def setup_logger(name: str, level: str = 'INFO', log_format: str = 'detailed',
                 stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Set up a console logger once; later calls return the existing logger

    Args:
        name: Logger name ('server', 'auth')
        level: Logging level name, case-insensitive
        log_format: 'simple' or 'detailed'
        stream: Output stream, stdout by default
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False

    stream = stream or sys.stdout
    handler = logging.StreamHandler(stream)
    use_color = hasattr(stream, 'isatty') and stream.isatty()
    handler.setFormatter(ColoredFormatter(LOG_FORMATS.get(log_format, LOG_FORMATS['detailed']), use_color))
    logger.addHandler(handler)

    return logger


def mask(value: str, visible: int = 6) -> str:
    """Shorten an identifier for log output."""
    if not value:
        return '<empty>'
    if len(value) <= visible:
        return value
    return value[:visible] + '...'


# =============================================================================
# PRE-CONFIGURED LOGGERS
# =============================================================================

# Routes and views
server_logger = setup_logger('server', level=Config.LOG_LEVEL, log_format=Config.LOG_FORMAT)

# Spotify accounts service calls
auth_logger = setup_logger('auth', level=Config.LOG_LEVEL, log_format=Config.LOG_FORMAT)
