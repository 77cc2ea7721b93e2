"""Success/failure values."""

from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar, Union

from .terminate import DEFAULT_EXIT_CODE, terminate_with_message_and_code

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful result carrying ``value``."""

    value: T

    def unwrap_or_die(self, message: Any, *, show_error: bool = False) -> T:
        """Return the payload; ``message`` is unused."""
        return self.value

    def unwrap_or_die_with_code(
        self,
        message: Any,
        exit_code: int,
        *,
        show_error: bool = False,
    ) -> T:
        """Return the payload; ``message`` and ``exit_code`` are unused."""
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failed result carrying ``error``."""

    error: E

    def unwrap_or_die(self, message: Any, *, show_error: bool = False) -> NoReturn:
        """Print ``message`` to stderr and exit with code 1.

        The error payload is dropped unless ``show_error`` is set, in which
        case the line reads ``"{message}: {error}"``.
        """
        self.unwrap_or_die_with_code(message, DEFAULT_EXIT_CODE, show_error=show_error)

    def unwrap_or_die_with_code(
        self,
        message: Any,
        exit_code: int,
        *,
        show_error: bool = False,
    ) -> NoReturn:
        if show_error:
            message = f"{message}: {self.error}"
        terminate_with_message_and_code(message, exit_code)


Result = Union[Ok[T], Err[E]]
