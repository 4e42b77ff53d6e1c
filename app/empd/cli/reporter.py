"""Rich console implementation of the inspector Reporter.

Classification results and deletion results go to stdout. Diagnostics,
canonicalization notes, and the deletion prompt go to stderr. The
confirmation answer is read from stdin.
"""

import sys
from typing import TextIO

from rich.markup import escape

from empd.inspector.deletion import DeletionRequest
from empd.inspector.models import (
    Category,
    DanglingSymlink,
    EmptyDirectory,
    EmptyFile,
    LiveSymlink,
    NonEmptyDirectory,
    NonEmptyFile,
)
from empd.inspector.reporter import Reporter
from empd.utils.formatting import console, err_console, format_count

CHECK_MARK = "✔"
CROSS_MARK = "✘"


def _quoted(path: str) -> str:
    """Render a path in bold quotes, safe for Rich markup."""
    return f'"[path]{escape(path)}[/]"'


class ConsoleReporter(Reporter):
    """Reports inspection events to the terminal.

    Attributes:
        _stdin: Stream the confirmation answer is read from. Defaults to
            the current sys.stdin at prompt time.
    """

    def __init__(self, stdin: TextIO | None = None) -> None:
        self._stdin = stdin

    def missing(self, path: str) -> None:
        err_console.print(f"Path {_quoted(path)} does not exist", soft_wrap=True, highlight=False)

    def inaccessible(self, path: str) -> None:
        err_console.print(
            f"Permission to path {_quoted(path)} was denied", soft_wrap=True, highlight=False
        )

    def canonicalized(self, path: str, canonical: str) -> None:
        err_console.print(
            f"Canonicalized input path {_quoted(path)} to {_quoted(canonical)}",
            soft_wrap=True,
            highlight=False,
        )

    def not_canonicalized(self, path: str) -> None:
        err_console.print(
            f"Could not canonicalize input path {_quoted(path)} because it or the file it "
            "resolves to does not exist",
            soft_wrap=True,
            highlight=False,
        )

    def category(self, category: Category) -> None:
        console.print(self._describe(category), soft_wrap=True, highlight=False)

    def prompt_deletion(self, request: DeletionRequest) -> str:
        if request.target is not None:
            subject = (
                f"{request.subject} {_quoted(request.display)} (non-canonicalized) pointing to "
                f"non-existent file {_quoted(request.target)} (non-canonicalized)"
            )
        else:
            subject = f"{request.subject} {_quoted(request.display)}"
        err_console.print(
            f'Are you sure you want to delete {subject}? ("y")\n'
            f"[warning](Note that no file locking or revalidation is performed, and "
            f"{request.hazard} by the time you respond to this prompt!)[/]",
            soft_wrap=True,
            highlight=False,
        )
        stream = self._stdin if self._stdin is not None else sys.stdin
        return stream.readline()

    def deleted(self, request: DeletionRequest) -> None:
        suffix = " (non-canonicalized)" if request.target is not None else ""
        console.print(
            f"[success]Deleted {request.subject}[/] {_quoted(request.display)}{suffix}",
            soft_wrap=True,
            highlight=False,
        )

    def declined(self, request: DeletionRequest) -> None:
        console.print(
            f'Input was not "y", not deleting {request.subject}', soft_wrap=True, highlight=False
        )

    # === Private helpers ===

    def _describe(self, category: Category) -> str:
        """Build the one-line classification report for a category."""
        if category.is_empty:
            mark = f"[mark.ok]{CHECK_MARK}[/]"
            label = f"[empty]{category.label}[/]"
        else:
            mark = f"[mark.fail]{CROSS_MARK}[/]"
            label = f"[not_empty]{category.label}[/]"
        article = "an" if category.label[0] in "aeiou" else "a"

        if isinstance(category, NonEmptyDirectory):
            census = category.census
            return (
                f" {mark}  Path {_quoted(category.canonical)} is {article} {label} "
                f"(directories: {format_count(census.directories)}, "
                f"files: {format_count(census.files)}, "
                f"symlinks: {format_count(census.symlinks)}, "
                f"total items: {format_count(census.total)})"
            )
        if isinstance(category, NonEmptyFile):
            return (
                f" {mark}  Path {_quoted(category.canonical)} is {article} {label} "
                f"(bytes: [count]{category.size}[/])"
            )
        if isinstance(category, EmptyDirectory | EmptyFile):
            return f" {mark}  Path {_quoted(category.canonical)} is {article} {label}"
        if isinstance(category, LiveSymlink):
            return (
                f" {mark}  Path {_quoted(category.path)} (non-canonicalized) is {article} {label} "
                f"to {_quoted(category.target)} (resolves to {_quoted(category.resolved)})"
            )
        if isinstance(category, DanglingSymlink):
            return (
                f" {mark}  Path {_quoted(category.path)} (non-canonicalized) is {article} {label} "
                f"{_quoted(category.target)} (non-canonicalized)"
            )
        msg = f"Unknown category: {type(category).__name__}"
        raise TypeError(msg)
