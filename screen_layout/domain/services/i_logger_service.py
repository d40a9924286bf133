# screen_layout/domain/services/i_logger_service.py
"""
Logger service interface shared by all services.
"""
from abc import ABC, abstractmethod


class ILoggerService(ABC):
    """
    Interface for logging services.

    Keyword arguments passed to any log method are context information that
    implementations append to the message.
    """

    @abstractmethod
    def debug(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def set_level(self, level: int) -> None:
        """
        Set the minimum log level to display.

        Args:
            level: Minimum log level (e.g., logging.INFO, logging.DEBUG)
        """
        pass
