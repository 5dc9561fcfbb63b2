"""Shared pytest fixtures for all tests."""

from pathlib import Path

import pytest

from guidebook.config import reset_settings
from guidebook.core.guidelines.parser import GuidelinesParser
from guidebook.core.guidelines.store import GuidelineStore


BUILTIN_GUIDELINES = (
    Path(__file__).parent.parent / "src" / "guidebook" / "data" / "guidelines.md"
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from GUIDEBOOK_* variables and cached settings."""
    for name in ("GUIDEBOOK_SOURCE", "GUIDEBOOK_PROJECT_DIR", "GUIDEBOOK_OUTPUT"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def parser():
    """Create a GuidelinesParser instance."""
    return GuidelinesParser()


@pytest.fixture
def data_dir():
    """Get the path to the test data directory."""
    return Path(__file__).parent / "guidelines" / "data"


@pytest.fixture(scope="session")
def builtin_text():
    """Text of the guidelines document shipped with the package."""
    return BUILTIN_GUIDELINES.read_text(encoding="utf-8")


@pytest.fixture
def builtin_store(builtin_text):
    """Store built from the shipped guidelines document."""
    return GuidelineStore.load(builtin_text)


@pytest.fixture
def temp_md_file(tmp_path):
    """Create a temporary guidelines markdown file."""
    def _create_file(content: str, name: str = "guidelines.md"):
        """
        Write content to a markdown file under tmp_path.

        Args:
            content: Markdown content to write
            name: File name

        Returns:
            Path to the created file
        """
        filepath = tmp_path / name
        filepath.write_text(content, encoding="utf-8")
        return filepath

    return _create_file


@pytest.fixture
def temp_project_dir(tmp_path):
    """Create a temporary project directory with a .guidebook/ subdirectory."""
    project_dir = tmp_path / "project"
    (project_dir / ".guidebook").mkdir(parents=True)
    return project_dir
