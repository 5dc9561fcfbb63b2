"""
Markdown parser for guideline source documents.

The source is loosely structured prose, so the parser is deliberately strict:
any heading that does not fit the expected pattern aborts the whole parse.

Expected layout:

    # Document title               (optional, preamble is ignored)

    ## Code Quality                (category boundary, must map to a category)

    ### Early returns              (one entry)
    - Body bullet
    Plain paragraph text
    Before: nested if/else
    After: guard clause
"""

import re
from pathlib import Path
from typing import List, Optional, Set

from pydantic import ValidationError

from ...domain.models import (
    GuidelineCategory,
    GuidelineEntry,
    GuidelineExample,
    GuidelineSourceInfo,
)
from ...domain.exceptions import GuidelinesLoadError, MalformedSourceError
from .categories import category_for_heading


_HEADING_RE = re.compile(r'^(#{1,6})\s+(.*?)(?:\s+#+)?\s*$')
_FENCE_RE = re.compile(r'^\s*(```|~~~)')
_RULE_RE = re.compile(r'^\s*([-*_])(\s*\1){2,}\s*$')
_BULLET_RE = re.compile(r'^\s*(?:[-*+]|\d+[.)])\s+(.*)$')
_EXAMPLE_RE = re.compile(
    r'^\s*(?:[-*+]\s+)?\*{0,2}(Before|After|Question|Response)\*{0,2}\s*:\s*\*{0,2}\s*(.*)$'
)

_OPENERS = {"Before": "before-after", "Question": "question-response"}
_CLOSERS = {"After": "before-after", "Response": "question-response"}


def slugify(title: str) -> str:
    """Turn an entry title into the label half of its ID ("Early returns" -> "early-returns")."""
    return re.sub(r'[^a-z0-9]+', '-', title.lower()).strip('-')


class _Text:
    """Lines collected for one body item or one half of an example."""

    def __init__(self, first_line: str = "", verbatim: bool = False, is_example: bool = False):
        self.lines: List[str] = [first_line] if first_line else []
        # Set once the text holds a fenced block; lines are then kept as-is
        self.verbatim = verbatim
        self.is_example = is_example

    def render(self) -> str:
        if self.verbatim:
            return "\n".join(self.lines).strip("\n")
        return " ".join(line.strip() for line in self.lines).strip()


class _ExampleDraft:
    def __init__(self, kind: str, label: str, line_number: int):
        self.kind = kind
        self.label = label
        self.line_number = line_number
        self.first = _Text(is_example=True)
        self.second: Optional[_Text] = None

    @property
    def complete(self) -> bool:
        return self.second is not None


class _EntryDraft:
    def __init__(self, title: str, category: GuidelineCategory, line_number: int):
        self.title = title
        self.category = category
        self.line_number = line_number
        self.body: List[_Text] = []
        self.examples: List[_ExampleDraft] = []


class GuidelinesParser:
    """
    Parses guideline markdown into GuidelineEntry records.

    A single linear pass tracks the current category as a cursor that moves
    on every '##' heading. Nothing is backtracked and nothing is nested
    deeper than category -> entry -> example pair.
    """

    def parse_file(self, path: Path) -> GuidelineSourceInfo:
        """
        Read and parse a guideline file.

        Raises:
            GuidelinesLoadError: If the file cannot be read
            MalformedSourceError: If the content does not fit the layout
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise GuidelinesLoadError(f"Guidelines file not found: {path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise GuidelinesLoadError(f"Cannot read guidelines file {path}: {e}") from e
        return self.parse_text(text)

    def parse_text(self, text: str) -> GuidelineSourceInfo:
        """
        Parse guideline source text.

        Returns:
            GuidelineSourceInfo with entries in document order

        Raises:
            MalformedSourceError: If the text cannot be partitioned into categories
        """
        if not text or not text.strip():
            raise MalformedSourceError("Guidelines source is empty or contains only whitespace")

        self._reset()

        for line_number, line in enumerate(text.splitlines(), start=1):
            self._feed(line, line_number)

        if self._fence is not None:
            raise MalformedSourceError(
                "Unterminated code fence", line_number=self._fence_line
            )
        self._close_entry()

        if not self._categories:
            raise MalformedSourceError(
                "No category headings found; expected '## <Category>' sections"
            )

        return GuidelineSourceInfo(entries=self._entries, categories=self._categories)

    # --- pass state ---

    def _reset(self) -> None:
        self._category: Optional[GuidelineCategory] = None
        self._categories: List[GuidelineCategory] = []
        self._entry: Optional[_EntryDraft] = None
        self._entries: List[GuidelineEntry] = []
        self._seen_ids: Set[str] = set()
        # Text receiving continuation lines, None after a blank line
        self._target: Optional[_Text] = None
        # Example half whose label line had no inline text yet
        self._awaiting: Optional[_Text] = None
        self._fence: Optional[str] = None
        self._fence_line = 0

    def _feed(self, line: str, line_number: int) -> None:
        if self._fence is not None:
            self._feed_fenced(line)
            return

        fence = _FENCE_RE.match(line)
        if fence:
            self._open_fence(fence.group(1), line, line_number)
            return

        heading = _HEADING_RE.match(line)
        if heading:
            self._handle_heading(len(heading.group(1)), heading.group(2), line_number)
            return

        if self._category is None:
            # Preamble before the first section
            return

        if not line.strip() or _RULE_RE.match(line):
            self._target = None
            return

        if self._entry is None:
            raise MalformedSourceError(
                f"Text outside of an entry under section '{self._category.value}'; "
                "expected a '### <Title>' heading first",
                line_number=line_number,
            )

        self._handle_content(line, line_number)

    # --- headings ---

    def _handle_heading(self, level: int, text: str, line_number: int) -> None:
        if level == 1:
            if self._category is not None:
                raise MalformedSourceError(
                    f"Unexpected document title '{text}' after sections started",
                    line_number=line_number,
                )
            return

        if level == 2:
            category = category_for_heading(text)
            if category is None:
                raise MalformedSourceError(
                    f"Section heading '{text}' does not map to a known category",
                    line_number=line_number,
                )
            self._close_entry()
            self._category = category
            if category not in self._categories:
                self._categories.append(category)
            return

        if level == 3:
            if self._category is None:
                raise MalformedSourceError(
                    f"Entry heading '{text}' appears before any category section",
                    line_number=line_number,
                )
            self._close_entry()
            self._entry = _EntryDraft(text, self._category, line_number)
            return

        raise MalformedSourceError(
            f"Heading level {level} is not supported ('{text}')",
            line_number=line_number,
        )

    # --- entry content ---

    def _handle_content(self, line: str, line_number: int) -> None:
        entry = self._entry
        example_match = _EXAMPLE_RE.match(line)
        if example_match:
            self._handle_example_label(example_match.group(1), example_match.group(2), line_number)
            return

        if self._awaiting is not None:
            self._awaiting.lines.append(line.strip())
            self._target = self._awaiting
            self._awaiting = None
            return

        bullet = _BULLET_RE.match(line)
        if bullet is None and self._target is not None:
            self._target.lines.append(line)
            return

        self._require_complete_example(line_number)
        item = _Text(bullet.group(1) if bullet else line)
        entry.body.append(item)
        self._target = item

    def _handle_example_label(self, label: str, text: str, line_number: int) -> None:
        entry = self._entry
        pending = entry.examples[-1] if entry.examples else None

        if self._awaiting is not None:
            raise MalformedSourceError(
                f"Example label before '{label}:' has no text", line_number=line_number
            )

        if label in _OPENERS:
            self._require_complete_example(line_number)
            draft = _ExampleDraft(_OPENERS[label], label, line_number)
            entry.examples.append(draft)
            part = draft.first
        else:
            if pending is None or pending.complete or pending.kind != _CLOSERS[label]:
                raise MalformedSourceError(
                    f"'{label}:' without a preceding "
                    f"'{'Before' if label == 'After' else 'Question'}:' line",
                    line_number=line_number,
                )
            pending.second = _Text(is_example=True)
            part = pending.second

        if text:
            part.lines.append(text)
            self._target = part
            self._awaiting = None
        else:
            self._target = part
            self._awaiting = part

    def _require_complete_example(self, line_number: int) -> None:
        entry = self._entry
        if entry is None or not entry.examples:
            return
        pending = entry.examples[-1]
        if not pending.complete:
            closer = "After" if pending.kind == "before-after" else "Response"
            raise MalformedSourceError(
                f"'{pending.label}:' at line {pending.line_number} has no matching '{closer}:'",
                line_number=line_number,
            )

    # --- fenced code ---

    def _open_fence(self, marker: str, line: str, line_number: int) -> None:
        self._fence = marker
        self._fence_line = line_number

        if self._category is None:
            # Fences in the preamble are skipped but still tracked
            self._target = None
            return
        if self._entry is None:
            raise MalformedSourceError(
                f"Code block outside of an entry under section '{self._category.value}'",
                line_number=line_number,
            )

        if self._awaiting is not None:
            target = self._awaiting
            self._awaiting = None
        elif self._target is not None and self._target.is_example:
            target = self._target
        else:
            self._require_complete_example(line_number)
            target = _Text(verbatim=True)
            self._entry.body.append(target)

        target.verbatim = True
        target.lines.append(line.rstrip())
        self._target = target

    def _feed_fenced(self, line: str) -> None:
        if self._target is not None:
            self._target.lines.append(line.rstrip())
        if line.strip().startswith(self._fence):
            self._fence = None
            self._target = None

    # --- finalization ---

    def _close_entry(self) -> None:
        draft = self._entry
        self._entry = None
        self._target = None
        if draft is None:
            return

        if draft.examples and not draft.examples[-1].complete:
            pending = draft.examples[-1]
            closer = "After" if pending.kind == "before-after" else "Response"
            raise MalformedSourceError(
                f"'{pending.label}:' in entry '{draft.title}' has no matching '{closer}:'",
                line_number=pending.line_number,
            )
        if self._awaiting is not None:
            raise MalformedSourceError(
                f"Example label in entry '{draft.title}' has no text",
                line_number=draft.line_number,
            )

        body = tuple(text for text in (item.render() for item in draft.body) if text)
        examples = tuple(
            GuidelineExample(kind=e.kind, first=e.first.render(), second=e.second.render())
            for e in draft.examples
        )
        if not body and not examples:
            raise MalformedSourceError(
                f"Entry '{draft.title}' has no content",
                line_number=draft.line_number,
            )

        entry_id = self._unique_id(draft.category, draft.title)
        self._seen_ids.add(entry_id)

        try:
            entry = GuidelineEntry(
                id=entry_id,
                position=len(self._entries),
                category=draft.category,
                title=draft.title,
                body=body,
                examples=examples,
            )
        except ValidationError as e:
            raise MalformedSourceError(
                f"Invalid entry '{draft.title}': {e}", line_number=draft.line_number
            ) from e
        self._entries.append(entry)

    def _unique_id(self, category: GuidelineCategory, title: str) -> str:
        """
        Build '<category>/<slug>' for a title, unique within this document.

        Titles without any ID characters fall back to 'entry-<position>'.
        Repeated slugs get '-2', '-3', ... suffixes in document order.
        """
        slug = slugify(title) or f"entry-{len(self._entries)}"
        entry_id = f"{category.value}/{slug}"
        suffix = 2
        while entry_id in self._seen_ids:
            entry_id = f"{category.value}/{slug}-{suffix}"
            suffix += 1
        return entry_id
