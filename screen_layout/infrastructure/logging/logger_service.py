# screen_layout/infrastructure/logging/logger_service.py
"""
Logger service backed by Python's logging module.
"""
import logging
import os
import sys
from datetime import datetime
from typing import Any, Dict

from screen_layout.domain.services.i_logger_service import ILoggerService

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ConsoleLoggerService(ILoggerService):
    """
    Logs to stdout through a named stdlib logger.

    Context keyword arguments are appended as ``[key=value ...]``.
    """

    def __init__(self, level: int = logging.INFO, name: str = "ScreenLayout"):
        """
        Args:
            level: Initial log level (default: INFO)
            name: Logger name
        """
        self.logger = logging.getLogger(name)
        self.set_level(level)

        # Loggers are process-wide; only the first service attaches a handler
        if not self.logger.handlers:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(console_handler)

    def debug(self, message: str, **kwargs) -> None:
        self.logger.debug(self._with_context(message, kwargs))

    def info(self, message: str, **kwargs) -> None:
        self.logger.info(self._with_context(message, kwargs))

    def warning(self, message: str, **kwargs) -> None:
        self.logger.warning(self._with_context(message, kwargs))

    def error(self, message: str, **kwargs) -> None:
        self.logger.error(self._with_context(message, kwargs))

    def critical(self, message: str, **kwargs) -> None:
        self.logger.critical(self._with_context(message, kwargs))

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def _with_context(self, message: str, extra: Dict[str, Any]) -> str:
        formatted = self._format_extra(extra)
        if formatted:
            return f"{message} {formatted}"
        return message

    def _format_extra(self, extra: Dict[str, Any]) -> str:
        if not extra:
            return ""
        return f"[{' '.join(f'{key}={value}' for key, value in extra.items())}]"


class FileLoggerService(ConsoleLoggerService):
    """ConsoleLoggerService that also writes a dated log file."""

    def __init__(self, level: int = logging.INFO, name: str = "ScreenLayout",
                 log_dir: str = "logs"):
        """
        Args:
            level: Initial log level (default: INFO)
            name: Logger name
            log_dir: Directory to store log files
        """
        super().__init__(level, name)

        os.makedirs(log_dir, exist_ok=True)

        current_date = datetime.now().strftime("%Y-%m-%d")
        self.log_file = os.path.join(log_dir, f"{name}_{current_date}.log")

        # Another service for the same logger may already write this file
        log_path = os.path.abspath(self.log_file)
        for handler in self.logger.handlers:
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == log_path:
                self.file_handler = handler
                return

        self.file_handler = logging.FileHandler(self.log_file)
        self.file_handler.setLevel(level)
        self.file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.addHandler(self.file_handler)
