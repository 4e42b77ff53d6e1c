"""Path classification and the decision state machine.

PathInspector probes one path, dispatches on the observed kind, reports
the resulting category, and for empty categories optionally runs the
deletion protocol.
"""

import logging
import os

from empd.inspector.canonical import canonicalize
from empd.inspector.deletion import DeletionRequest, DeletionState, confirm_and_remove
from empd.inspector.errors import CanonicalizationError, UnsupportedPathKindError
from empd.inspector.models import (
    Absent,
    DanglingSymlink,
    EmptyDirectory,
    EmptyFile,
    ExitCode,
    Inaccessible,
    LiveSymlink,
    NonEmptyDirectory,
    NonEmptyFile,
    Outcome,
    PathKind,
    Present,
)
from empd.inspector.probe import ensure_utf8, probe_metadata, read_link_target, take_census
from empd.inspector.reporter import Reporter

logger = logging.getLogger(__name__)


class PathInspector:
    """Classifies a single path and acts on empty ones.

    Attributes:
        _reporter: Receives every user-facing event and answers prompts.
    """

    def __init__(self, reporter: Reporter) -> None:
        """Initialize the PathInspector.

        Args:
            reporter: Reporting and prompting collaborator.
        """
        self._reporter = reporter

    def classify_and_act(self, target_path: str, *, delete_if_empty: bool = False) -> Outcome:
        """Classify a path and, if requested, offer to delete it when empty.

        Args:
            target_path: Path to inspect, as given by the user.
            delete_if_empty: Run the deletion protocol for empty categories.

        Returns:
            Outcome carrying the category and exit code.

        Raises:
            EmpdError: On any fatal error (encoding, unsupported kind,
                unexpected I/O failure, failed removal).
        """
        ensure_utf8(target_path)
        metadata = probe_metadata(target_path)

        if isinstance(metadata, Absent):
            self._reporter.missing(target_path)
            return Outcome(path=target_path, exit_code=ExitCode.NOT_FOUND)

        if isinstance(metadata, Inaccessible):
            self._reporter.inaccessible(target_path)
            return Outcome(path=target_path, exit_code=ExitCode.PERMISSION_DENIED)

        if metadata.kind == PathKind.DIRECTORY:
            return self._handle_directory(metadata, delete_if_empty)
        if metadata.kind == PathKind.FILE:
            return self._handle_file(metadata, delete_if_empty)
        if metadata.kind == PathKind.SYMLINK:
            return self._handle_symlink(metadata, delete_if_empty)

        raise UnsupportedPathKindError(target_path, "Path is not a directory, file, or symlink")

    # === Category handlers ===

    def _handle_directory(self, metadata: Present, delete_if_empty: bool) -> Outcome:
        path = metadata.path
        canonical = self._require_canonical(path, "Could not canonicalize directory path")
        census = take_census(path)

        if not census.is_empty:
            category = NonEmptyDirectory(canonical=canonical, census=census)
            self._reporter.category(category)
            return Outcome(path=path, exit_code=ExitCode.DIRECTORY_NOT_EMPTY, category=category)

        empty = EmptyDirectory(canonical=canonical)
        self._reporter.category(empty)
        if not delete_if_empty:
            return Outcome(path=path, exit_code=ExitCode.SUCCESS, category=empty)

        request = DeletionRequest(
            path=path,
            display=canonical,
            subject="empty directory",
            hazard="the directory may be non-empty",
            remove=os.rmdir,
        )
        return self._delete(request, empty, ExitCode.DIRECTORY_DELETION_DECLINED)

    def _handle_file(self, metadata: Present, delete_if_empty: bool) -> Outcome:
        path = metadata.path
        canonical = self._require_canonical(path, "Could not canonicalize file path")

        if metadata.size > 0:
            category = NonEmptyFile(canonical=canonical, size=metadata.size)
            self._reporter.category(category)
            return Outcome(path=path, exit_code=ExitCode.FILE_NOT_EMPTY, category=category)

        empty = EmptyFile(canonical=canonical)
        self._reporter.category(empty)
        if not delete_if_empty:
            return Outcome(path=path, exit_code=ExitCode.SUCCESS, category=empty)

        request = DeletionRequest(
            path=path,
            display=canonical,
            subject="empty file",
            hazard="the file may be non-empty",
            remove=os.unlink,
        )
        return self._delete(request, empty, ExitCode.FILE_DELETION_DECLINED)

    def _handle_symlink(self, metadata: Present, delete_if_empty: bool) -> Outcome:
        path = metadata.path
        target = read_link_target(path)
        # Follows the whole chain; None means the link dangles
        resolved = canonicalize(path, self._reporter)

        if resolved is not None:
            live = LiveSymlink(path=path, target=target, resolved=resolved)
            self._reporter.category(live)
            return Outcome(path=path, exit_code=ExitCode.SYMLINK_RESOLVES, category=live)

        dangling = DanglingSymlink(path=path, target=target)
        self._reporter.category(dangling)
        if not delete_if_empty:
            return Outcome(path=path, exit_code=ExitCode.SUCCESS, category=dangling)

        request = DeletionRequest(
            path=path,
            display=path,
            subject="symbolic link",
            hazard="the symbolic link destination may exist",
            remove=os.unlink,
            target=target,
        )
        return self._delete(request, dangling, ExitCode.SYMLINK_DELETION_DECLINED)

    # === Private helpers ===

    def _require_canonical(self, path: str, operation: str) -> str:
        """Canonicalize a path that was just observed to exist.

        Not-found at this point means the path vanished after the probe.
        """
        canonical = canonicalize(path, self._reporter)
        if canonical is None:
            raise CanonicalizationError(path, operation, "path no longer exists")
        return canonical

    def _delete(
        self,
        request: DeletionRequest,
        category: EmptyDirectory | EmptyFile | DanglingSymlink,
        declined_code: ExitCode,
    ) -> Outcome:
        state = confirm_and_remove(request, self._reporter)
        if state == DeletionState.CONFIRMED:
            return Outcome(
                path=request.path,
                exit_code=ExitCode.SUCCESS,
                category=category,
                deleted=True,
            )
        return Outcome(path=request.path, exit_code=declined_code, category=category)
