"""Tests for InspectionRequest validation."""

import pytest
from empd.inspector.config import InspectionRequest
from pydantic import ValidationError


class TestInspectionRequest:
    """Tests for InspectionRequest pydantic model."""

    def test_defaults(self) -> None:
        """Deletion is off unless requested."""
        request = InspectionRequest(target_path="/tmp/x")
        assert request.target_path == "/tmp/x"
        assert request.delete_if_empty is False

    def test_empty_path_accepted(self) -> None:
        """An empty path is left for the probe to classify as not found."""
        request = InspectionRequest(target_path="")
        assert request.target_path == ""

    def test_non_utf8_path_rejected(self) -> None:
        """Paths with undecodable bytes are rejected."""
        with pytest.raises(ValidationError, match="UTF-8"):
            InspectionRequest(target_path="/tmp/bad\udcff")

    def test_extra_fields_forbidden(self) -> None:
        """Unknown configuration keys are rejected."""
        with pytest.raises(ValidationError):
            InspectionRequest(target_path="/tmp/x", recursive=True)  # type: ignore[call-arg]

    def test_frozen(self) -> None:
        """A request cannot be changed once built."""
        request = InspectionRequest(target_path="/tmp/x")
        with pytest.raises(ValidationError):
            request.delete_if_empty = True  # type: ignore[misc]
