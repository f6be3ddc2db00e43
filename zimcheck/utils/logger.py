#!/usr/bin/env python3
"""UTF-8-safe logging setup for zimcheck.

Standard output carries the check report, so log records go to stderr.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


class UTF8StreamHandler(logging.StreamHandler):
    """Stream handler that never fails on characters the console cannot encode.

    Without an explicit stream it follows whatever ``sys.stderr`` currently
    is, so redirections made after setup are honoured.
    """
    def __init__(self, stream=None):
        super().__init__(stream)
        self._follow_stderr = stream is None

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        encoding = getattr(self.stream, 'encoding', None) or 'utf-8'
        return message.encode(encoding, errors='replace').decode(encoding, errors='replace')

    def emit(self, record: logging.LogRecord) -> None:
        if self._follow_stderr:
            self.stream = sys.stderr
        super().emit(record)


def setup_logger(name: str = "zimcheck",
                 log_level: str = "WARNING",
                 log_file: Optional[str] = None) -> logging.Logger:
    """Setup a UTF-8-safe logger with console and optional file output."""

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []  # Clear existing handlers
    logger.propagate = False

    # Console handler
    console_handler = UTF8StreamHandler()
    console_format = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    # File handler (optional)
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8', errors='replace')
        file_format = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    return logger


# Global logger instance shared by all zimcheck modules
logger = setup_logger()
