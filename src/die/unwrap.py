"""Unwrap a result or optional value, or print a message and exit."""

from typing import Any, Callable, Optional, TypeVar, Union

from .models import Err, Ok
from .terminate import DEFAULT_EXIT_CODE, terminate_with_message_and_code

T = TypeVar("T")


def unwrap_or_die(
    value: Union[Ok[T], Err[Any], Optional[T]],
    message: Any,
    *,
    show_error: bool = False,
) -> T:
    """Return the payload of ``value`` or exit with code 1.

    ``value`` may be an :class:`Ok`/:class:`Err` or an optional value, where
    ``None`` means absent and anything else is returned as is. On failure
    only ``message`` is printed; the error is discarded unless
    ``show_error`` is passed.
    """
    return unwrap_or_die_with_code(value, message, DEFAULT_EXIT_CODE, show_error=show_error)


def unwrap_or_die_with_code(
    value: Union[Ok[T], Err[Any], Optional[T]],
    message: Any,
    exit_code: int,
    *,
    show_error: bool = False,
) -> T:
    """Same as :func:`unwrap_or_die` but exits with ``exit_code``."""
    if isinstance(value, (Ok, Err)):
        return value.unwrap_or_die_with_code(message, exit_code, show_error=show_error)
    if value is None:
        terminate_with_message_and_code(message, exit_code)
    return value


def attempt(
    func: Callable[..., T],
    *args: Any,
    catch: Union[type[BaseException], tuple[type[BaseException], ...]] = Exception,
    **kwargs: Any,
) -> Union[Ok[T], Err[BaseException]]:
    """Call ``func`` and wrap the outcome.

    Returns ``Ok(result)``, or ``Err(exc)`` when ``func`` raises one of
    ``catch``. Anything else propagates.
    """
    try:
        return Ok(func(*args, **kwargs))
    except catch as exc:
        return Err(exc)
