"""Tests for GuidelineStore."""

import pytest
from pydantic import ValidationError

from guidebook import load
from guidebook.core.guidelines.store import GuidelineStore
from guidebook.domain.exceptions import (
    GuidelineNotFoundError,
    GuidelinesLoadError,
    InvalidCategoryError,
    MalformedSourceError,
    UnknownContextError,
)
from guidebook.domain.models import GuidelineCategory


class TestLoad:
    """Tests for building a store."""

    def test_load_from_text(self, data_dir):
        """Test that load() builds a store from markdown text."""
        store = GuidelineStore.load((data_dir / "simple.md").read_text(encoding="utf-8"))

        assert len(store) == 3

    def test_module_level_load(self, data_dir):
        """Test the module-level load shortcut."""
        store = load((data_dir / "simple.md").read_text(encoding="utf-8"))

        assert isinstance(store, GuidelineStore)
        assert len(store) == 3

    def test_from_file(self, data_dir):
        """Test building a store directly from a file path."""
        store = GuidelineStore.from_file(data_dir / "simple.md")

        assert [e.title for e in store] == ["Early returns", "No magic values", "Docstrings"]

    def test_from_missing_file(self, tmp_path):
        """Test that a missing file raises GuidelinesLoadError."""
        with pytest.raises(GuidelinesLoadError):
            GuidelineStore.from_file(tmp_path / "missing.md")

    def test_malformed_source_is_fatal(self, data_dir):
        """Test that a malformed source produces no store at all."""
        with pytest.raises(MalformedSourceError):
            GuidelineStore.from_file(data_dir / "unknown-section.md")

    def test_malformed_is_a_load_error(self):
        """Test that MalformedSourceError can be handled as GuidelinesLoadError."""
        with pytest.raises(GuidelinesLoadError):
            GuidelineStore.load("no headings here")

    def test_repeated_titles_load(self):
        """Test that repeated titles load and stay reachable by category and search."""
        store = load("## Code Quality\n\n### Naming\n- a\n\n## Code Quality\n\n### Naming\n- b\n")

        assert len(store) == 2
        assert [e.body for e in store.get_by_category("code-quality")] == [("a",), ("b",)]
        assert store.get("code-quality/naming-2").body == ("b",)
        assert len(store.search("naming")) == 2


class TestGetByCategory:
    """Tests for category lookup."""

    def test_entries_match_category(self, builtin_store):
        """Test that every returned entry belongs to the requested category."""
        for category in GuidelineCategory:
            entries = builtin_store.get_by_category(category)
            assert all(e.category == category for e in entries)

    def test_entries_in_document_order(self, builtin_store):
        """Test that category results keep source order."""
        for category in GuidelineCategory:
            positions = [e.position for e in builtin_store.get_by_category(category)]
            assert positions == sorted(positions)

    def test_unit_test_style_entries(self, builtin_store):
        """Test the exact unit-test-style entries of the shipped document."""
        entries = builtin_store.get_by_category("unit-test-style")

        assert [e.title for e in entries] == [
            "Docstrings",
            "Arrange-Act-Assert",
            "Descriptive naming",
            "Fixtures over setup",
            "Parametrization",
            "Edge cases",
            "Output capture",
            "Avoid using class",
        ]

    def test_string_and_enum_are_equivalent(self, builtin_store):
        """Test that category strings and enum members give the same result."""
        assert builtin_store.get_by_category("code-quality") == builtin_store.get_by_category(
            GuidelineCategory.CODE_QUALITY
        )

    def test_valid_category_without_entries(self, data_dir):
        """Test that a valid but empty category returns an empty list."""
        store = GuidelineStore.from_file(data_dir / "simple.md")

        assert store.get_by_category("documentation") == []

    def test_invalid_category(self, builtin_store):
        """Test that an unknown category string raises InvalidCategoryError."""
        with pytest.raises(InvalidCategoryError, match="Unknown category 'deployment'"):
            builtin_store.get_by_category("deployment")

    def test_invalid_category_is_value_error(self, builtin_store):
        """Test that InvalidCategoryError can be caught as ValueError."""
        with pytest.raises(ValueError):
            builtin_store.get_by_category("Unit-test Styles")

    def test_result_is_a_copy(self, builtin_store):
        """Test that mutating a result does not affect the store."""
        entries = builtin_store.get_by_category("code-quality")
        entries.clear()

        assert len(builtin_store.get_by_category("code-quality")) > 0


class TestSearch:
    """Tests for keyword search."""

    def test_empty_keyword_returns_everything(self, builtin_store):
        """Test that search('') returns the full entry set in source order."""
        results = builtin_store.search("")

        assert results == list(builtin_store)
        assert [e.position for e in results] == list(range(len(builtin_store)))

    def test_search_is_idempotent(self, builtin_store):
        """Test that repeating a search yields identical results."""
        assert builtin_store.search("test") == builtin_store.search("test")

    def test_search_is_case_insensitive(self, builtin_store):
        """Test that keyword case does not matter."""
        upper = builtin_store.search("EARLY RETURN")

        assert upper == builtin_store.search("early return")
        assert [e.id for e in upper] == ["code-quality/early-returns"]

    def test_search_uv(self, builtin_store):
        """Test that the package-manager keyword only hits Python standards entries."""
        results = builtin_store.search("uv")

        assert results
        assert {e.category for e in results} == {GuidelineCategory.PYTHON_STANDARDS}
        assert "python-standards/package-management-with-uv" in [e.id for e in results]

    def test_search_matches_body(self, builtin_store):
        """Test that body text is searched, not only titles."""
        results = builtin_store.search("capsys")

        assert [e.title for e in results] == ["Output capture"]

    def test_search_ignores_examples(self, data_dir):
        """Test that example pairs are not part of the searchable text."""
        store = GuidelineStore.from_file(data_dir / "examples.md")

        assert store.search("reproduced") == []

    def test_search_no_match(self, builtin_store):
        """Test that an unmatched keyword returns an empty list."""
        assert builtin_store.search("kubernetes operator") == []

    def test_search_results_in_document_order(self, builtin_store):
        """Test that matches across categories come back in document order."""
        positions = [e.position for e in builtin_store.search("test")]

        assert positions == sorted(positions)


class TestCategoriesAndLookup:
    """Tests for all_categories, get and iteration."""

    def test_all_categories_builtin(self, builtin_store):
        """Test that the shipped document covers every category."""
        assert builtin_store.all_categories() == frozenset(GuidelineCategory)

    def test_all_categories_partial(self, data_dir):
        """Test that only categories present in the source are reported."""
        store = GuidelineStore.from_file(data_dir / "simple.md")

        assert store.all_categories() == {
            GuidelineCategory.CODE_QUALITY,
            GuidelineCategory.UNIT_TEST_STYLE,
        }

    def test_get_by_id(self, builtin_store):
        """Test looking up a single entry by ID."""
        entry = builtin_store.get("code-quality/early-returns")

        assert entry.title == "Early returns"
        assert entry.has_examples

    def test_get_unknown_id(self, builtin_store):
        """Test that an unknown ID raises GuidelineNotFoundError."""
        with pytest.raises(GuidelineNotFoundError):
            builtin_store.get("code-quality/does-not-exist")

    def test_ids_are_unique(self, builtin_store):
        """Test that no two entries share an ID."""
        ids = [e.id for e in builtin_store]

        assert len(ids) == len(set(ids))

    def test_entries_are_immutable(self, builtin_store):
        """Test that returned entries cannot be modified."""
        entry = builtin_store.get("code-quality/early-returns")

        with pytest.raises(ValidationError):
            entry.title = "Changed"


class TestForContext:
    """Tests for development context lookup."""

    def test_unit_test_context_order(self, builtin_store):
        """Test that context results are grouped by category priority."""
        entries = builtin_store.for_context("unit-test")
        categories = [e.category for e in entries]

        first_other = categories.index(GuidelineCategory.PYTHON_STANDARDS)
        assert set(categories[:first_other]) == {GuidelineCategory.UNIT_TEST_STYLE}
        assert GuidelineCategory.CODE_QUALITY in categories
        assert GuidelineCategory.DOCUMENTATION not in categories

    def test_context_includes_whole_categories(self, builtin_store):
        """Test that a context returns every entry of its categories."""
        entries = builtin_store.for_context("integration-test")

        expected = builtin_store.get_by_category(
            "integration-test-practice"
        ) + builtin_store.get_by_category("python-standards")
        assert entries == expected

    def test_unknown_context(self, builtin_store):
        """Test that an unknown context raises UnknownContextError."""
        with pytest.raises(UnknownContextError, match="Valid contexts"):
            builtin_store.for_context("deploying")
