"""
Guidelines source resolution and loading.

Decides which guideline document to load and builds the store from it.
"""

from pathlib import Path
from typing import Optional, Union

from ..config import Settings, get_settings
from ..core.guidelines import GuidelineStore
from ..domain.exceptions import GuidelinesLoadError
from ..protocols import ProgressReporter
from ..ui import NullProgressReporter

GUIDELINES_FILENAME = "guidelines.md"


class GuidelinesProvider:
    """
    Loads a GuidelineStore from the most specific available source.

    Resolution order:
    1. Path passed to load_store()
    2. GUIDEBOOK_SOURCE setting
    3. <cwd>/<GUIDEBOOK_PROJECT_DIR>/guidelines.md
    4. Built-in guidelines shipped with the package

    The provider holds no store itself: every call builds a fresh one and the
    caller owns the returned handle.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        progress: Optional[ProgressReporter] = None,
    ):
        self.settings = settings or get_settings()
        self.progress = progress or NullProgressReporter()

    def load_store(self, path: Optional[Union[str, Path]] = None) -> GuidelineStore:
        """
        Resolve the guidelines source and build a store from it.

        Raises:
            GuidelinesLoadError: If the source is missing, unreadable or malformed
        """
        source = self.resolve_source(path)
        self.progress.info(f"Loading guidelines from {source}...")

        store = GuidelineStore.from_file(source)

        categories = len(store.all_categories())
        self.progress.success(
            f"Loaded {len(store)} guidelines across {categories} categories"
        )
        return store

    def resolve_source(self, path: Optional[Union[str, Path]] = None) -> Path:
        """
        Pick the guidelines file to load.

        Explicitly requested files must exist; project and built-in files are
        only used when present.

        Raises:
            GuidelinesLoadError: If an explicitly requested file does not exist
        """
        if path and self.settings.GUIDEBOOK_SOURCE:
            self.progress.warning(
                f"Ignoring GUIDEBOOK_SOURCE={self.settings.GUIDEBOOK_SOURCE}, loading {path} instead"
            )
        explicit = path or self.settings.GUIDEBOOK_SOURCE
        if explicit:
            explicit_path = Path(explicit).expanduser()
            if not explicit_path.is_file():
                raise GuidelinesLoadError(f"Guidelines file not found: {explicit_path}")
            return explicit_path

        project_file = self._project_guidelines_path()
        if project_file.is_file():
            return project_file

        self.progress.info(
            f"No project guidelines found in {project_file.parent}, using built-in set"
        )
        return self._builtin_guidelines_path()

    def _project_guidelines_path(self) -> Path:
        return Path.cwd() / self.settings.GUIDEBOOK_PROJECT_DIR / GUIDELINES_FILENAME

    def _builtin_guidelines_path(self) -> Path:
        """
        Path to the guidelines document shipped with the package.

        Raises:
            GuidelinesLoadError: If the built-in file is missing from the install
        """
        builtin = Path(__file__).resolve().parent.parent / "data" / GUIDELINES_FILENAME
        if not builtin.is_file():
            raise GuidelinesLoadError(
                "Built-in guidelines not found. Package may be incorrectly installed."
            )
        return builtin
