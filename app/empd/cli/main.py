"""Main CLI application entry point.

Parses arguments, sets up logging, runs one inspection, and turns its
outcome into the process exit code.
"""

import logging
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.logging import RichHandler
from rich.markup import escape

from empd import __version__
from empd.cli.reporter import ConsoleReporter
from empd.inspector.classifier import PathInspector
from empd.inspector.config import InspectionRequest
from empd.inspector.errors import EmpdError
from empd.inspector.models import ExitCode
from empd.utils.formatting import err_console, print_error

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="empd",
    help="Check if a path is empty, and optionally delete it.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"empd version {__version__}")
        raise typer.Exit()


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    package_logger = logging.getLogger("empd")
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)
    package_logger.addHandler(
        RichHandler(console=err_console, show_time=False, show_path=False, rich_tracebacks=True)
    )


@app.command()
def main(
    path: Annotated[
        str,
        typer.Argument(help="Path to test.", show_default=False),
    ],
    delete_if_empty: Annotated[
        bool,
        typer.Option(
            "--delete-if-empty",
            "-d",
            help="Delete the file or directory if it is empty (asks for confirmation).",
        ),
    ] = False,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            help="Increase verbosity (-v info, -vv debug).",
        ),
    ] = 0,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Check if a directory or file is empty, or if a symbolic link points to a path
    that does not exist.

    Only supports UTF-8 paths.
    """
    _setup_logging(verbose)

    try:
        request = InspectionRequest(target_path=path, delete_if_empty=delete_if_empty)
    except ValidationError as e:
        reason = e.errors()[0]["msg"] if e.errors() else str(e)
        logger.debug("Invalid invocation for path %r: %s", path, e)
        print_error(escape(reason))
        raise typer.Exit(code=int(ExitCode.FATAL)) from e

    inspector = PathInspector(ConsoleReporter())
    try:
        outcome = inspector.classify_and_act(
            request.target_path,
            delete_if_empty=request.delete_if_empty,
        )
    except EmpdError as e:
        logger.debug("Inspection of %r failed", request.target_path, exc_info=True)
        print_error(escape(str(e)))
        raise typer.Exit(code=int(ExitCode.FATAL)) from e

    if not outcome.success:
        err_console.print(
            f"Exiting with non-zero exit code [count]{int(outcome.exit_code)}[/]",
            highlight=False,
        )
        raise typer.Exit(code=int(outcome.exit_code))


if __name__ == "__main__":
    app()
