# screen_layout/domain/common/result.py

"""
Result type used by every service in the library.

Expected failures (bad layout data, missing config, failed crops) are
returned as failed Results carrying a DomainError instead of being raised.
"""
from typing import TypeVar, Generic, Optional, Union, Callable

from screen_layout.domain.common.errors import DomainError, ErrorCategory

T = TypeVar('T')
U = TypeVar('U')


class Result(Generic[T]):
    """
    Either a success value or a DomainError.

    String errors passed to ``fail`` are wrapped into a DomainError of
    category UNKNOWN.
    """

    def __init__(self, value: Optional[T], error: Optional[Union[str, DomainError]]):
        self._value = value
        if isinstance(error, str):
            self._error = DomainError(message=error, category=ErrorCategory.UNKNOWN)
        else:
            self._error = error

    @classmethod
    def ok(cls, value: T) -> 'Result[T]':
        return cls(value, None)

    @classmethod
    def fail(cls, error: Union[str, DomainError]) -> 'Result[T]':
        return cls(None, error)

    @property
    def is_success(self) -> bool:
        return self._error is None

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @property
    def value(self) -> T:
        """
        The success value.

        Raises:
            ValueError: If the result is a failure
        """
        if self.is_failure:
            raise ValueError(f"Cannot access value of a failed result: {self._error}")
        return self._value

    @property
    def error(self) -> DomainError:
        """
        The failure error.

        Raises:
            ValueError: If the result is a success
        """
        if self.is_success:
            raise ValueError("Cannot access error of a successful result")
        return self._error

    def map(self, func: Callable[[T], U]) -> 'Result[U]':
        """Apply func to the value; exceptions it raises become a failed Result."""
        if self.is_failure:
            return Result.fail(self._error)
        try:
            return Result.ok(func(self._value))
        except Exception as e:
            return Result.fail(DomainError.from_exception(e))

    def and_then(self, func: Callable[[T], 'Result[U]']) -> 'Result[U]':
        """Chain another Result-returning step."""
        if self.is_failure:
            return Result.fail(self._error)
        return func(self._value)

    def match(self, success_func: Callable[[T], U], failure_func: Callable[[DomainError], U]) -> U:
        if self.is_success:
            return success_func(self._value)
        return failure_func(self._error)

    def on_success(self, action: Callable[[T], None]) -> 'Result[T]':
        if self.is_success:
            action(self._value)
        return self

    def on_failure(self, action: Callable[[DomainError], None]) -> 'Result[T]':
        if self.is_failure:
            action(self._error)
        return self

    @classmethod
    def from_operation(cls, operation_func, logger, error_type, error_message, **kwargs):
        """
        Run an operation and wrap its outcome.

        Args:
            operation_func: Zero-argument callable to execute
            logger: Logger used to report the failure
            error_type: DomainError subclass to build on exception
            error_message: Message prefix for the error
            **kwargs: Context stored in the error details

        Returns:
            The operation's own Result if it returned one, otherwise its value
            wrapped in a successful Result, or a failure built from the exception
        """
        try:
            result = operation_func()
            if isinstance(result, Result):
                return result
            return cls.ok(result)
        except Exception as e:
            error = error_type(
                message=f"{error_message}: {e}",
                details=kwargs,
                inner_error=e
            )
            logger.error(str(error))
            return cls.fail(error)
