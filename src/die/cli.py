"""Command-line interface for die."""

import click

from .terminate import DEFAULT_EXIT_CODE, terminate_with_code, terminate_with_message_and_code


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("message", metavar="[MESSAGE ...]", nargs=-1)
@click.option(
    "--code", "-c",
    type=int, default=DEFAULT_EXIT_CODE, show_default=True, metavar="N",
    help="Exit status to terminate with.",
)
@click.version_option(package_name="die")
def main(message: tuple[str, ...], code: int) -> None:
    """Print MESSAGE to stderr and exit with a chosen status.

    Words of MESSAGE are joined with single spaces. With no MESSAGE nothing
    is printed.

    \b
    Examples
    --------
    Fail a shell script with status 1:

        die "config file missing"

    Usage error:

        die -c 2 "expected one argument"

    Just exit:

        die -c 3
    """
    if not message:
        terminate_with_code(code)
    terminate_with_message_and_code(" ".join(message), code)


if __name__ == "__main__":
    main()
