# nodekit/core/logging.py

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional


class Logger:
    """
    Package logging system.
    Console output always, timestamped file output when a log directory is given.
    """

    def __init__(self, name: str = "NodeKit", log_dir: Optional[str] = None, level: str = "INFO"):
        self.name = name
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)

        # Prevent duplicate handlers
        if not self.logger.handlers:
            self._setup_handlers(level)

    def _setup_handlers(self, level: str):
        """Setup console and file handlers."""
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(getattr(logging, level.upper(), logging.INFO))
        console_formatter = logging.Formatter(
            '%(levelname)-8s [%(name)s] %(message)s'
        )
        console_handler.setFormatter(console_formatter)
        self.logger.addHandler(console_handler)

        if self.log_dir is None:
            return

        # File handler (DEBUG and above)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = self.log_dir / f"nodekit_{timestamp}.log"

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            '%(asctime)s - %(levelname)-8s [%(name)s:%(funcName)s:%(lineno)d] %(message)s'
        )
        file_handler.setFormatter(file_formatter)
        self.logger.addHandler(file_handler)

    def close(self):
        """Detach and close all handlers."""
        for handler in self.logger.handlers[:]:
            handler.close()
            self.logger.removeHandler(handler)

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False):
        self.logger.error(message, exc_info=exc_info)

    def exception(self, message: str):
        """Log at error level with the active exception's traceback."""
        self.logger.exception(message)

    def set_level(self, level: str):
        """Change the console threshold. File output stays at DEBUG."""
        console_level = getattr(logging, level.upper(), logging.INFO)
        for handler in self.logger.handlers:
            if not isinstance(handler, logging.FileHandler):
                handler.setLevel(console_level)


# Global logger instance
_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Get global package logger."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def init_logger(name: str = "NodeKit", log_dir: Optional[str] = None, level: str = "INFO") -> Logger:
    """
    Re-initialize the global logger.
    Existing handlers are closed so the new level and log directory take effect.
    """
    global _logger
    if _logger is not None:
        _logger.close()
    _logger = Logger(name, log_dir, level)
    return _logger
