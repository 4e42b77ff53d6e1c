"""Path inspection and confirmation-gated deletion.

This module provides the classifier for a single filesystem path, the
canonicalizer, the shared deletion protocol, and the reporter interface
the caller injects.
"""

from empd.inspector.canonical import canonicalize
from empd.inspector.classifier import PathInspector
from empd.inspector.config import InspectionRequest
from empd.inspector.deletion import (
    CONFIRMATION_TOKEN,
    DeletionRequest,
    DeletionState,
    confirm_and_remove,
)
from empd.inspector.errors import EmpdError
from empd.inspector.models import (
    Category,
    DanglingSymlink,
    DirectoryCensus,
    EmptyDirectory,
    EmptyFile,
    ExitCode,
    LiveSymlink,
    NonEmptyDirectory,
    NonEmptyFile,
    Outcome,
    PathKind,
)
from empd.inspector.reporter import Reporter

__all__ = [
    "CONFIRMATION_TOKEN",
    "Category",
    "DanglingSymlink",
    "DeletionRequest",
    "DeletionState",
    "DirectoryCensus",
    "EmpdError",
    "EmptyDirectory",
    "EmptyFile",
    "ExitCode",
    "InspectionRequest",
    "LiveSymlink",
    "NonEmptyDirectory",
    "NonEmptyFile",
    "Outcome",
    "PathInspector",
    "PathKind",
    "Reporter",
    "canonicalize",
    "confirm_and_remove",
]
