"""
Domain models for Guidebook.

Contains the core data structures for representing guideline entries.
"""

from enum import Enum
from typing import List, Literal, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
import re


class GuidelineCategory(str, Enum):
    """Fixed classification buckets for guidance."""
    DECISION_FRAMEWORK = "decision-framework"
    CRITICAL_THINKING = "critical-thinking"
    PYTHON_STANDARDS = "python-standards"
    CODE_QUALITY = "code-quality"
    UNIT_TEST_STYLE = "unit-test-style"
    DOCUMENTATION = "documentation"
    EXAMPLE_RESPONSE = "example-response"
    INTEGRATION_TEST_PRACTICE = "integration-test-practice"

    @classmethod
    def values(cls) -> Tuple[str, ...]:
        return tuple(c.value for c in cls)


class GuidelineExample(BaseModel):
    """
    One illustrative pair attached to a guideline entry.

    Either a before/after code pair or a question/response exchange.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["before-after", "question-response"]
    first: str = Field(..., description="The 'Before' or 'Question' text.")
    second: str = Field(..., description="The 'After' or 'Response' text.")

    @property
    def labels(self) -> Tuple[str, str]:
        if self.kind == "before-after":
            return ("Before", "After")
        return ("Question", "Response")


class GuidelineEntry(BaseModel):
    """
    A single piece of advisory content under a category.

    Examples:
    - "Early returns" under decision-framework
    - "Fixtures over setup" under unit-test-style
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique ID (e.g., 'code-quality/early-returns')")
    position: int = Field(..., ge=0, description="Zero-based position in the source document.")
    category: GuidelineCategory
    title: str = Field(..., description="Short label for the guideline.")
    body: Tuple[str, ...] = Field(default_factory=tuple)
    examples: Tuple[GuidelineExample, ...] = Field(default_factory=tuple)

    @field_validator('id')
    @classmethod
    def validate_id_format(cls, v: str) -> str:
        """Ensure ID follows convention: category/label (e.g., code-quality/early-returns)"""
        if not v or not isinstance(v, str):
            raise ValueError("ID must be a non-empty string")

        if not re.match(r'^[a-z0-9-]+/[a-z0-9-]+$', v):
            raise ValueError(
                f"ID '{v}' must follow format category/label (e.g., 'code-quality/early-returns')"
            )

        return v

    @field_validator('title')
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Title must be a non-empty string")
        return v.strip()

    @model_validator(mode='after')
    def check_id_matches_category(self) -> 'GuidelineEntry':
        """The ID prefix must be the entry's own category."""
        prefix = self.id.split('/', 1)[0]
        if prefix != self.category.value:
            raise ValueError(
                f"ID '{self.id}' does not belong to category '{self.category.value}'"
            )
        return self

    @property
    def has_examples(self) -> bool:
        """Returns True if this entry carries any illustrative pairs."""
        return len(self.examples) > 0

    def matches(self, keyword: str) -> bool:
        """Case-insensitive substring match against the title and body items."""
        needle = keyword.casefold()
        if needle in self.title.casefold():
            return True
        return any(needle in item.casefold() for item in self.body)


class GuidelineSourceInfo(BaseModel):
    """
    Result of parsing one guideline source document.

    Contains the entries in document order and the categories whose section
    headings appeared, in order of first appearance.
    """
    entries: List[GuidelineEntry]
    categories: List[GuidelineCategory]
