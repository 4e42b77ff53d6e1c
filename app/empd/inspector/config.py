"""Inspection request configuration.

The CLI resolves its arguments into an InspectionRequest; the
inspector consumes nothing else.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator


class InspectionRequest(BaseModel):
    """Resolved configuration for one inspection.

    Attributes:
        target_path: Path to inspect. Must be valid UTF-8. An empty path is
            accepted and classified as not found.
        delete_if_empty: Offer to delete the path if it is classified empty.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    target_path: Annotated[
        str,
        Field(description="Path to inspect"),
    ]
    delete_if_empty: Annotated[
        bool,
        Field(description="Offer deletion of empty paths"),
    ] = False

    @field_validator("target_path")
    @classmethod
    def validate_utf8(cls, v: str) -> str:
        """Reject paths holding undecodable bytes (surrogate escapes)."""
        try:
            v.encode("utf-8")
        except UnicodeEncodeError:
            msg = "Could not convert path to a UTF-8 string"
            raise ValueError(msg) from None
        return v
