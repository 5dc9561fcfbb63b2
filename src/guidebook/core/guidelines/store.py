"""
Guideline store.

Immutable in-memory index over parsed guideline entries. The store is built
once by ``load`` and only answers read-only queries afterwards, so a single
instance can be shared between readers without locking.
"""

from pathlib import Path
from typing import Dict, FrozenSet, Iterator, List, Tuple, Union

from ...domain.models import GuidelineCategory, GuidelineEntry, GuidelineSourceInfo
from ...domain.exceptions import GuidelineNotFoundError
from .categories import DevelopmentContext, categories_for_context, coerce_category
from .parser import GuidelinesParser


class GuidelineStore:
    """
    Read-only index over categorized guideline entries.

    Results are always returned in source document order. Entries are frozen
    models and every query returns a new list, so callers cannot affect the
    store through a result.
    """

    def __init__(self, source: GuidelineSourceInfo):
        self._entries: Tuple[GuidelineEntry, ...] = tuple(source.entries)
        self._categories: FrozenSet[GuidelineCategory] = frozenset(source.categories)
        self._by_id: Dict[str, GuidelineEntry] = {e.id: e for e in self._entries}
        by_category: Dict[GuidelineCategory, List[GuidelineEntry]] = {}
        for entry in self._entries:
            by_category.setdefault(entry.category, []).append(entry)
        self._by_category: Dict[GuidelineCategory, Tuple[GuidelineEntry, ...]] = {
            category: tuple(entries) for category, entries in by_category.items()
        }

    @classmethod
    def load(cls, source_text: str) -> "GuidelineStore":
        """
        Build a store from guideline markdown.

        Raises:
            MalformedSourceError: If the text cannot be partitioned into categories
        """
        return cls(GuidelinesParser().parse_text(source_text))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "GuidelineStore":
        """
        Build a store from a guideline markdown file.

        Raises:
            GuidelinesLoadError: If the file cannot be read or parsed
        """
        return cls(GuidelinesParser().parse_file(Path(path)))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[GuidelineEntry]:
        return iter(self._entries)

    def get_by_category(
        self, category: Union[GuidelineCategory, str]
    ) -> List[GuidelineEntry]:
        """
        Return all entries of a category in document order.

        A valid category with no entries yields an empty list.

        Raises:
            InvalidCategoryError: If the category is outside the fixed enumeration
        """
        return list(self._by_category.get(coerce_category(category), ()))

    def search(self, keyword: str) -> List[GuidelineEntry]:
        """
        Case-insensitive substring search over entry titles and bodies.

        An empty keyword returns every entry. There is no relevance ranking;
        matches come back in document order.
        """
        if not keyword:
            return list(self._entries)
        return [entry for entry in self._entries if entry.matches(keyword)]

    def all_categories(self) -> FrozenSet[GuidelineCategory]:
        """Return the categories whose sections appear in the loaded content."""
        return self._categories

    def get(self, entry_id: str) -> GuidelineEntry:
        """
        Return the entry with the given ID.

        Raises:
            GuidelineNotFoundError: If no entry has this ID
        """
        try:
            return self._by_id[entry_id]
        except KeyError:
            raise GuidelineNotFoundError(f"No guideline with ID '{entry_id}'") from None

    def for_context(
        self, context: Union[DevelopmentContext, str]
    ) -> List[GuidelineEntry]:
        """
        Return the entries relevant to a development context.

        Entries are grouped by the context's category priority and kept in
        document order within each group.

        Raises:
            UnknownContextError: If the context name is not known
        """
        entries: List[GuidelineEntry] = []
        for category in categories_for_context(context):
            entries.extend(self._by_category.get(category, ()))
        return entries


def load(source_text: str) -> GuidelineStore:
    """Build a GuidelineStore from guideline markdown."""
    return GuidelineStore.load(source_text)
