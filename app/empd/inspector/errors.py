"""Fatal errors raised during path inspection.

Expected classification results (not found, permission denied,
non-empty, declined deletion) are returned as outcomes, not raised.
Everything here aborts the inspection and maps to the generic fatal
exit code.
"""


class EmpdError(Exception):
    """Base exception for fatal inspection errors.

    Attributes:
        path: Path the failed operation was acting on.
        operation: Short description of the failed operation.
    """

    def __init__(self, path: str, operation: str, detail: str | None = None) -> None:
        self.path = path
        self.operation = operation
        self.detail = detail
        message = f"{operation} for path {path!r}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class NonUtf8PathError(EmpdError):
    """Raised when a path cannot be represented as UTF-8."""


class ProbeError(EmpdError):
    """Raised when the metadata probe fails for a reason other than not-found or permission."""


class UnsupportedPathKindError(EmpdError):
    """Raised for objects that are not a directory, regular file, or symlink."""


class CanonicalizationError(EmpdError):
    """Raised when a path cannot be canonicalized."""


class CensusError(EmpdError):
    """Raised when the children of a directory cannot be enumerated."""


class LinkReadError(EmpdError):
    """Raised when a symbolic link target cannot be read."""


class RemovalError(EmpdError):
    """Raised when a confirmed deletion fails.

    The path may have changed between inspection and removal; no
    re-validation is performed.
    """


class PromptError(EmpdError):
    """Raised when the confirmation answer cannot be read."""
