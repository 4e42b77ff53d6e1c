"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from recording import RecordingReporter


@pytest.fixture
def reporter() -> RecordingReporter:
    """Fresh recording reporter with no scripted answers."""
    return RecordingReporter()


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """An empty directory."""
    path = tmp_path / "empty_dir"
    path.mkdir()
    return path


@pytest.fixture
def empty_file(tmp_path: Path) -> Path:
    """A zero-length regular file."""
    path = tmp_path / "empty_file"
    path.touch()
    return path


@pytest.fixture
def dangling_link(tmp_path: Path) -> Path:
    """A symbolic link whose target does not exist."""
    path = tmp_path / "dangling"
    path.symlink_to(tmp_path / "missing_target")
    return path
