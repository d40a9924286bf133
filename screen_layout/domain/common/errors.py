# screen_layout/domain/common/errors.py

"""
Error types returned inside failed Results.

Each error carries a category and severity so callers can log and report
failures consistently without inspecting message text.
"""
from enum import Enum
from typing import Optional, Dict, Any


class ErrorCategory(Enum):
    """Categories of errors in the library."""
    VALIDATION = "Validation"
    CONFIGURATION = "Configuration"
    RESOURCE = "Resource"
    UNKNOWN = "Unknown"


class ErrorSeverity(Enum):
    """Severity levels for errors."""
    INFO = "Info"
    WARNING = "Warning"
    ERROR = "Error"
    CRITICAL = "Critical"


class DomainError:
    """
    Structured error information attached to a failed Result.

    Args:
        message: Human-readable error message
        category: Error category
        severity: Error severity
        code: Optional error code for programmatic handling
        details: Optional context such as offending keys or file paths
        inner_error: Optional original exception
    """

    def __init__(self,
                 message: str,
                 category: ErrorCategory = ErrorCategory.UNKNOWN,
                 severity: ErrorSeverity = ErrorSeverity.ERROR,
                 code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None,
                 inner_error: Optional[Exception] = None):
        self.message = message
        self.category = category
        self.severity = severity
        self.code = code
        self.details = details or {}
        self.inner_error = inner_error

    @staticmethod
    def from_exception(ex: Exception,
                       category: ErrorCategory = ErrorCategory.UNKNOWN,
                       severity: ErrorSeverity = ErrorSeverity.ERROR) -> 'DomainError':
        """Wrap an exception, using its text as the message."""
        return DomainError(
            message=str(ex),
            category=category,
            severity=severity,
            inner_error=ex
        )

    def __str__(self) -> str:
        return f"{self.category.value} Error: {self.message}"


class ValidationError(DomainError):
    """Input data does not match the expected layout shape."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, inner_error: Optional[Exception] = None):
        super().__init__(
            message=message,
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.WARNING,
            details=details,
            inner_error=inner_error
        )


class ConfigurationError(DomainError):
    """Layout configuration file is missing or unusable."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, inner_error: Optional[Exception] = None):
        super().__init__(
            message=message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.ERROR,
            details=details,
            inner_error=inner_error
        )


class ResourceError(DomainError):
    """Image or file operation failed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, inner_error: Optional[Exception] = None):
        super().__init__(
            message=message,
            category=ErrorCategory.RESOURCE,
            severity=ErrorSeverity.ERROR,
            details=details,
            inner_error=inner_error
        )
