"""Canonical path resolution for display."""

import logging
from pathlib import Path

from empd.inspector.errors import CanonicalizationError
from empd.inspector.probe import ensure_utf8
from empd.inspector.reporter import Reporter

logger = logging.getLogger(__name__)


def canonicalize(path: str, reporter: Reporter) -> str | None:
    """Resolve a path to its absolute, symlink-free canonical form.

    Every symlink on the chain is resolved and ``.``/``..`` segments are
    removed. Non-existence is not an error: it is reported and yields None.

    Args:
        path: Path to resolve.
        reporter: Receives the canonicalization notice.

    Returns:
        The canonical path, or None if the path (or a link it traverses)
        does not exist.

    Raises:
        CanonicalizationError: On any failure other than not-found.
        NonUtf8PathError: If the canonical path is not valid UTF-8.
    """
    try:
        resolved = Path(path).resolve(strict=True)
    except FileNotFoundError:
        logger.debug("Canonicalization of %s: not found", path)
        reporter.not_canonicalized(path)
        return None
    except (OSError, RuntimeError) as e:
        # RuntimeError: symlink loop on Python < 3.13
        raise CanonicalizationError(path, "Could not canonicalize path", str(e)) from e

    canonical = ensure_utf8(str(resolved))
    logger.debug("Canonicalized %s to %s", path, canonical)
    reporter.canonicalized(path, canonical)
    return canonical
