"""Abstract reporting collaborator for the inspector.

The inspector never prints, reads stdin, or configures logging itself.
All user-facing messages and the confirmation prompt go through a
Reporter injected by the caller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from empd.inspector.deletion import DeletionRequest
    from empd.inspector.models import Category


class Reporter(ABC):
    """Receives inspection events and answers the deletion prompt.

    Example:
        >>> inspector = PathInspector(ConsoleReporter())
        >>> outcome = inspector.classify_and_act("/tmp/maybe-empty")
    """

    @abstractmethod
    def missing(self, path: str) -> None:
        """Report that the path does not exist."""

    @abstractmethod
    def inaccessible(self, path: str) -> None:
        """Report that probing the path was denied."""

    @abstractmethod
    def canonicalized(self, path: str, canonical: str) -> None:
        """Report the mapping from an input path to its canonical form."""

    @abstractmethod
    def not_canonicalized(self, path: str) -> None:
        """Report that the path, or the file it resolves to, does not exist."""

    @abstractmethod
    def category(self, category: Category) -> None:
        """Report the classification of the path."""

    @abstractmethod
    def prompt_deletion(self, request: DeletionRequest) -> str:
        """Show the deletion prompt and return one raw line of input.

        The returned line keeps its trailing newline, if any, so the
        caller can compare it against the exact confirmation token.
        An empty string means end of input.
        """

    @abstractmethod
    def deleted(self, request: DeletionRequest) -> None:
        """Report that the path was deleted."""

    @abstractmethod
    def declined(self, request: DeletionRequest) -> None:
        """Report that deletion was declined."""
