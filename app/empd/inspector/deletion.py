"""Confirmation-gated deletion of an empty path.

One routine serves every deletable category. The caller supplies what
to show and how to remove; this module asks once and removes once.
Nothing is locked or re-probed, so the object may change
between inspection and removal, and the prompt says so.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from empd.inspector.errors import PromptError, RemovalError
from empd.inspector.reporter import Reporter

logger = logging.getLogger(__name__)

CONFIRMATION_TOKEN = "y\n"


class DeletionState(str, Enum):
    """States of the deletion protocol.

    PROPOSED and AWAITING_CONFIRMATION are transient: they appear only in
    the debug transition log. confirm_and_remove returns one of the two
    terminal states.

    Attributes:
        PROPOSED: Deletion has been requested for an empty path.
        AWAITING_CONFIRMATION: The prompt is shown, waiting for one line.
        CONFIRMED: The exact token was read and the path was removed.
        DECLINED: Anything other than the exact token was read.
    """

    PROPOSED = "proposed"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    CONFIRMED = "confirmed"
    DECLINED = "declined"


@dataclass(frozen=True, slots=True)
class DeletionRequest:
    """Everything needed to prompt for and perform one deletion.

    Attributes:
        path: Filesystem path to remove, as given.
        display: Path shown to the user (canonical form where one exists).
        subject: What is being deleted, e.g. "empty directory".
        hazard: What may have changed by the time the answer is read.
        remove: Non-recursive removal call (os.rmdir or os.unlink).
        target: Immediate link target, for symbolic links only.
    """

    path: str
    display: str
    subject: str
    hazard: str
    remove: Callable[[str], None]
    target: str | None = None


def _transition(request: DeletionRequest, old: DeletionState, new: DeletionState) -> None:
    logger.debug("Deletion of %s %s: %s -> %s", request.subject, request.path, old.value, new.value)


def confirm_and_remove(request: DeletionRequest, reporter: Reporter) -> DeletionState:
    """Prompt once and, on exact confirmation, remove the path.

    Args:
        request: Description of the deletion and the removal operation.
        reporter: Shows the prompt and reads the answer.

    Returns:
        DeletionState.CONFIRMED if the path was removed,
        DeletionState.DECLINED otherwise.

    Raises:
        PromptError: If the answer cannot be read or is not valid UTF-8.
        RemovalError: If the removal fails.
    """
    _transition(request, DeletionState.PROPOSED, DeletionState.AWAITING_CONFIRMATION)
    try:
        answer = reporter.prompt_deletion(request)
    except (OSError, UnicodeDecodeError) as e:
        raise PromptError(request.path, "Could not read confirmation", str(e)) from e

    if answer != CONFIRMATION_TOKEN:
        logger.debug("Confirmation input for %s: %r", request.path, answer)
        _transition(request, DeletionState.AWAITING_CONFIRMATION, DeletionState.DECLINED)
        reporter.declined(request)
        return DeletionState.DECLINED

    try:
        request.remove(request.path)
    except OSError as e:
        raise RemovalError(request.path, f"Could not delete {request.subject}", str(e)) from e

    _transition(request, DeletionState.AWAITING_CONFIRMATION, DeletionState.CONFIRMED)
    logger.info("Deleted %s %s", request.subject, request.path)
    reporter.deleted(request)
    return DeletionState.CONFIRMED
