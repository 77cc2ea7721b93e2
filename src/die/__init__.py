"""die: print a message to stderr and exit the process."""

from .models import Err, Ok, Result
from .terminate import (
    DEFAULT_EXIT_CODE,
    terminate,
    terminate_formatted,
    terminate_formatted_with_code,
    terminate_with_code,
    terminate_with_code_and_message,
    terminate_with_message,
    terminate_with_message_and_code,
)
from .unwrap import attempt, unwrap_or_die, unwrap_or_die_with_code

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_EXIT_CODE",
    "Err",
    "Ok",
    "Result",
    "attempt",
    "terminate",
    "terminate_formatted",
    "terminate_formatted_with_code",
    "terminate_with_code",
    "terminate_with_code_and_message",
    "terminate_with_message",
    "terminate_with_message_and_code",
    "unwrap_or_die",
    "unwrap_or_die_with_code",
]
