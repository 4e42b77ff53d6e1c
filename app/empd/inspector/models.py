"""Domain models for path inspection.

This module defines the data structures produced while inspecting a
single path: the metadata probe result, the directory census, the
closed set of classification categories, and the final outcome with
its process exit code.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import ClassVar


class PathKind(str, Enum):
    """Kind of a filesystem object, observed without following symlinks.

    Attributes:
        DIRECTORY: Directory.
        FILE: Regular file.
        SYMLINK: Symbolic link (the link itself, not its target).
        OTHER: Anything else (device, socket, FIFO, ...). Unsupported.
    """

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    OTHER = "other"


class ExitCode(IntEnum):
    """Process exit codes, one per inspection outcome."""

    SUCCESS = 0
    FATAL = 1
    NOT_FOUND = 11
    PERMISSION_DENIED = 12
    FILE_NOT_EMPTY = 21
    FILE_DELETION_DECLINED = 22
    DIRECTORY_NOT_EMPTY = 31
    DIRECTORY_DELETION_DECLINED = 32
    SYMLINK_RESOLVES = 41
    SYMLINK_DELETION_DECLINED = 42


# === Metadata probe results ===


@dataclass(frozen=True, slots=True)
class Absent:
    """The probe failed because the path does not exist."""

    path: str


@dataclass(frozen=True, slots=True)
class Inaccessible:
    """The probe failed because permission was denied."""

    path: str


@dataclass(frozen=True, slots=True)
class Present:
    """The probe succeeded.

    Attributes:
        path: Path that was probed.
        kind: Kind of the object at the path (symlinks are not followed).
        size: Size in bytes as reported by lstat.
    """

    path: str
    kind: PathKind
    size: int


Metadata = Absent | Inaccessible | Present


@dataclass(frozen=True, slots=True)
class DirectoryCensus:
    """Counts of the immediate children of a directory, by kind.

    Attributes:
        directories: Number of child directories.
        files: Number of child regular files.
        symlinks: Number of child symbolic links.
    """

    directories: int = 0
    files: int = 0
    symlinks: int = 0

    def __post_init__(self) -> None:
        """Validate census counts after initialization."""
        if min(self.directories, self.files, self.symlinks) < 0:
            msg = "Census counts cannot be negative"
            raise ValueError(msg)

    @property
    def total(self) -> int:
        """Total number of immediate children."""
        return self.directories + self.files + self.symlinks

    @property
    def is_empty(self) -> bool:
        """Check if the directory has no immediate children."""
        return self.total == 0


# === Classification categories ===


@dataclass(frozen=True, slots=True)
class Category:
    """Base class for the closed set of classification results.

    Attributes:
        label: Human-readable name of the category.
        is_empty: Whether the category counts as "empty" (deletable).
    """

    label: ClassVar[str] = ""
    is_empty: ClassVar[bool] = False


@dataclass(frozen=True, slots=True)
class EmptyDirectory(Category):
    """Directory with no immediate children."""

    label: ClassVar[str] = "empty directory"
    is_empty: ClassVar[bool] = True

    canonical: str


@dataclass(frozen=True, slots=True)
class NonEmptyDirectory(Category):
    """Directory with at least one immediate child."""

    label: ClassVar[str] = "non-empty directory"

    canonical: str
    census: DirectoryCensus


@dataclass(frozen=True, slots=True)
class EmptyFile(Category):
    """Regular file of length zero."""

    label: ClassVar[str] = "empty file"
    is_empty: ClassVar[bool] = True

    canonical: str


@dataclass(frozen=True, slots=True)
class NonEmptyFile(Category):
    """Regular file with at least one byte."""

    label: ClassVar[str] = "non-empty file"

    canonical: str
    size: int


@dataclass(frozen=True, slots=True)
class DanglingSymlink(Category):
    """Symbolic link whose target chain does not resolve.

    Attributes:
        path: The link path as given (not canonicalized).
        target: The immediate link target, one hop, as stored in the link.
    """

    label: ClassVar[str] = "symbolic link to non-existent file"
    is_empty: ClassVar[bool] = True

    path: str
    target: str


@dataclass(frozen=True, slots=True)
class LiveSymlink(Category):
    """Symbolic link whose target chain resolves to an existing object.

    Attributes:
        path: The link path as given (not canonicalized).
        target: The immediate link target, one hop, as stored in the link.
        resolved: Canonical form of the fully resolved chain.
    """

    label: ClassVar[str] = "symbolic link"

    path: str
    target: str
    resolved: str


@dataclass(frozen=True, slots=True)
class Outcome:
    """Terminal result of one inspection.

    Attributes:
        path: The path that was inspected, as given.
        exit_code: Exit code the process should terminate with.
        category: Classification, or None if the path could not be probed.
        deleted: Whether the path was deleted after confirmation.
    """

    path: str
    exit_code: ExitCode
    category: Category | None = None
    deleted: bool = False

    @property
    def success(self) -> bool:
        """Check if the outcome maps to a zero exit code."""
        return self.exit_code == ExitCode.SUCCESS
