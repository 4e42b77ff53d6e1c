"""Filesystem probes used by the inspector.

All probes observe symbolic links as links: nothing here follows a
terminal symlink. Canonical resolution lives in ``canonical``.
"""

import logging
import os
import stat

from empd.inspector.errors import (
    CensusError,
    LinkReadError,
    NonUtf8PathError,
    ProbeError,
    UnsupportedPathKindError,
)
from empd.inspector.models import (
    Absent,
    DirectoryCensus,
    Inaccessible,
    Metadata,
    PathKind,
    Present,
)

logger = logging.getLogger(__name__)


def ensure_utf8(path: str, operation: str = "Could not convert path to a UTF-8 string") -> str:
    """Check that a path string is representable as UTF-8.

    Python decodes undecodable filesystem bytes to lone surrogates, which
    fail to encode.

    Args:
        path: Path string to check.
        operation: Description used in the error message.

    Returns:
        The unchanged path.

    Raises:
        NonUtf8PathError: If the path is not valid UTF-8.
    """
    try:
        path.encode("utf-8")
    except UnicodeEncodeError as e:
        raise NonUtf8PathError(path, operation, str(e)) from e
    return path


def kind_from_mode(mode: int) -> PathKind:
    """Map an lstat mode to a PathKind."""
    if stat.S_ISDIR(mode):
        return PathKind.DIRECTORY
    if stat.S_ISREG(mode):
        return PathKind.FILE
    if stat.S_ISLNK(mode):
        return PathKind.SYMLINK
    return PathKind.OTHER


def probe_metadata(path: str) -> Metadata:
    """Probe a path without following a terminal symlink.

    Args:
        path: Path to probe.

    Returns:
        Absent if the path does not exist, Inaccessible if permission was
        denied, Present with the observed kind and size otherwise.

    Raises:
        ProbeError: If lstat fails for any other reason, including a path
            with an embedded NUL byte.
    """
    try:
        st = os.lstat(path)
    except FileNotFoundError:
        logger.debug("Probe of %s: not found", path)
        return Absent(path)
    except PermissionError:
        logger.debug("Probe of %s: permission denied", path)
        return Inaccessible(path)
    except (OSError, ValueError) as e:
        # ValueError: embedded NUL byte
        raise ProbeError(path, "Could not get metadata", str(e)) from e

    kind = kind_from_mode(st.st_mode)
    logger.debug("Probe of %s: %s (%d bytes)", path, kind.value, st.st_size)
    return Present(path=path, kind=kind, size=st.st_size)


def take_census(path: str) -> DirectoryCensus:
    """Count the immediate children of a directory by kind.

    Only one level is enumerated. Child kinds are read without following
    symlinks, so a link to a directory counts as a symlink.

    Args:
        path: Directory to enumerate.

    Returns:
        DirectoryCensus with per-kind counts.

    Raises:
        CensusError: If the directory or one of its entries cannot be read.
        UnsupportedPathKindError: If a child is not a directory, file, or symlink.
    """
    directories = files = symlinks = 0

    try:
        with os.scandir(path) as entries:
            for entry in entries:
                try:
                    if entry.is_symlink():
                        symlinks += 1
                    elif entry.is_dir(follow_symlinks=False):
                        directories += 1
                    elif entry.is_file(follow_symlinks=False):
                        files += 1
                    else:
                        raise UnsupportedPathKindError(
                            entry.path,
                            "Encountered directory entry that is not a directory, file, or symlink",
                        )
                except OSError as e:
                    raise CensusError(
                        entry.path, "Could not get the directory entry's file type", str(e)
                    ) from e
    except OSError as e:
        raise CensusError(path, "Could not read directory", str(e)) from e

    census = DirectoryCensus(directories=directories, files=files, symlinks=symlinks)
    logger.debug(
        "Census of %s: %d directories, %d files, %d symlinks",
        path,
        census.directories,
        census.files,
        census.symlinks,
    )
    return census


def read_link_target(path: str) -> str:
    """Read the immediate target of a symbolic link (one hop).

    Args:
        path: Symbolic link to read.

    Returns:
        The target string stored in the link.

    Raises:
        LinkReadError: If the link cannot be read.
        NonUtf8PathError: If the target is not valid UTF-8.
    """
    try:
        target = os.readlink(path)
    except OSError as e:
        raise LinkReadError(path, "Could not read symbolic link", str(e)) from e
    return ensure_utf8(target, "Could not convert symbolic link path to a UTF-8 string")
