"""Print a message to stderr and exit.

Every function here ends the process and never returns. They all
bottom out in :func:`_print_exit`. Pick the one matching the shape of what
you have at hand:

====================================================  =========  =========
Call                                                  Prints     Exits
====================================================  =========  =========
``terminate()``                                       nothing    1
``terminate_with_code(code)``                         nothing    ``code``
``terminate_with_message(msg)``                       ``msg``    1
``terminate_with_message_and_code(msg, code)``        ``msg``    ``code``
``terminate_with_code_and_message(code, msg)``        ``msg``    ``code``
``terminate_formatted(tpl, *args, code=1)``           formatted  ``code``
``terminate_formatted_with_code(code, tpl, *args)``   formatted  ``code``
====================================================  =========  =========

Code after any of these calls does not run. On the main thread the exit is
``sys.exit(code)``. From any other thread, stdout and stderr are flushed and
the whole process ends through ``os._exit(code)``.

A message of ``None`` counts as no message, so nothing is printed.
"""

import os
import sys
import threading
from typing import Any, NoReturn

import click

DEFAULT_EXIT_CODE = 1


def _print_exit(message: Any = None, code: int = DEFAULT_EXIT_CODE) -> NoReturn:
    if message is not None:
        # color=True keeps escape sequences when stderr is not a terminal
        click.echo(str(message), err=True, color=True)
    if threading.current_thread() is threading.main_thread():
        sys.exit(code)
    # SystemExit would only end this thread
    sys.stdout.flush()
    sys.stderr.flush()
    os._exit(code)


def terminate() -> NoReturn:
    """Exit with the default code without printing anything."""
    _print_exit()


def terminate_with_code(code: int) -> NoReturn:
    """Exit with ``code`` without printing anything."""
    _print_exit(code=code)


def terminate_with_message(message: Any) -> NoReturn:
    """Print ``message`` to stderr and exit with the default code.

    ``None`` prints nothing, like :func:`terminate`.
    """
    _print_exit(message)


def terminate_with_message_and_code(message: Any, code: int) -> NoReturn:
    """Print ``message`` to stderr and exit with ``code``."""
    _print_exit(message, code)


def terminate_with_code_and_message(code: int, message: Any) -> NoReturn:
    """Same as :func:`terminate_with_message_and_code`, code first."""
    _print_exit(message, code)


def terminate_formatted(
    template: str,
    *args: Any,
    code: int = DEFAULT_EXIT_CODE,
    **kwargs: Any,
) -> NoReturn:
    """Format ``template`` with :meth:`str.format`, print it and exit.

    ``code`` is keyword-only so a positional format argument can never be
    taken for the exit code::

        terminate_formatted("argument {} must be {}", "-e", 1, code=4)

    prints ``argument -e must be 1`` and exits with 4.
    """
    _print_exit(template.format(*args, **kwargs), code)


def terminate_formatted_with_code(
    code: int,
    template: str,
    *args: Any,
    **kwargs: Any,
) -> NoReturn:
    """Like :func:`terminate_formatted`, with the exit code given first."""
    _print_exit(template.format(*args, **kwargs), code)
