"""
Fixed mappings for the guideline knowledge base.

Section headings in the source document map onto GuidelineCategory values,
and named development contexts map onto ordered lists of categories.
The heading table is maintained by hand: if the document's headings change
wording, add the new wording here.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple, Union
import re

from ...domain.models import GuidelineCategory
from ...domain.exceptions import InvalidCategoryError, UnknownContextError


HEADING_ALIASES: Dict[str, GuidelineCategory] = {
    "decision framework": GuidelineCategory.DECISION_FRAMEWORK,
    "critical thinking": GuidelineCategory.CRITICAL_THINKING,
    "critical thinking checklist": GuidelineCategory.CRITICAL_THINKING,
    "python project standards": GuidelineCategory.PYTHON_STANDARDS,
    "python standards": GuidelineCategory.PYTHON_STANDARDS,
    "code quality": GuidelineCategory.CODE_QUALITY,
    "code quality rules": GuidelineCategory.CODE_QUALITY,
    "unit test styles": GuidelineCategory.UNIT_TEST_STYLE,
    "unit test style": GuidelineCategory.UNIT_TEST_STYLE,
    "documentation guidelines": GuidelineCategory.DOCUMENTATION,
    "documentation": GuidelineCategory.DOCUMENTATION,
    "example responses": GuidelineCategory.EXAMPLE_RESPONSE,
    "example response": GuidelineCategory.EXAMPLE_RESPONSE,
    "integration test practices": GuidelineCategory.INTEGRATION_TEST_PRACTICE,
    "integration test practice": GuidelineCategory.INTEGRATION_TEST_PRACTICE,
}


def normalize_heading(text: str) -> str:
    """
    Normalize heading text for alias lookup.

    Lowercases, turns hyphens and underscores into spaces, drops a trailing
    colon and collapses whitespace: "Unit-test Styles:" -> "unit test styles".
    """
    text = text.strip().rstrip(":").lower()
    text = re.sub(r"[-_]", " ", text)
    return re.sub(r"\s+", " ", text).strip()


def category_for_heading(text: str) -> Optional[GuidelineCategory]:
    """Return the category a section heading maps to, or None if unmapped."""
    return HEADING_ALIASES.get(normalize_heading(text))


def coerce_category(category: Union[GuidelineCategory, str]) -> GuidelineCategory:
    """
    Convert a category name into a GuidelineCategory.

    Raises:
        InvalidCategoryError: If the string is outside the fixed enumeration
    """
    if isinstance(category, GuidelineCategory):
        return category
    try:
        return GuidelineCategory(category)
    except ValueError:
        raise InvalidCategoryError(
            f"Unknown category '{category}'. "
            f"Valid categories: {', '.join(GuidelineCategory.values())}"
        ) from None


class DevelopmentContext(str, Enum):
    """Named development tasks that guidance can be surfaced for."""
    UNIT_TEST = "unit-test"
    INTEGRATION_TEST = "integration-test"
    CODE_REVIEW = "code-review"
    DOCUMENTATION = "documentation"
    IMPLEMENTATION = "implementation"
    GENERAL = "general"


CONTEXT_CATEGORIES: Dict[DevelopmentContext, Tuple[GuidelineCategory, ...]] = {
    DevelopmentContext.UNIT_TEST: (
        GuidelineCategory.UNIT_TEST_STYLE,
        GuidelineCategory.PYTHON_STANDARDS,
        GuidelineCategory.CODE_QUALITY,
    ),
    DevelopmentContext.INTEGRATION_TEST: (
        GuidelineCategory.INTEGRATION_TEST_PRACTICE,
        GuidelineCategory.PYTHON_STANDARDS,
    ),
    DevelopmentContext.CODE_REVIEW: (
        GuidelineCategory.CODE_QUALITY,
        GuidelineCategory.CRITICAL_THINKING,
        GuidelineCategory.DECISION_FRAMEWORK,
    ),
    DevelopmentContext.DOCUMENTATION: (
        GuidelineCategory.DOCUMENTATION,
        GuidelineCategory.EXAMPLE_RESPONSE,
    ),
    DevelopmentContext.IMPLEMENTATION: (
        GuidelineCategory.DECISION_FRAMEWORK,
        GuidelineCategory.PYTHON_STANDARDS,
        GuidelineCategory.CODE_QUALITY,
    ),
    DevelopmentContext.GENERAL: (
        GuidelineCategory.DECISION_FRAMEWORK,
        GuidelineCategory.CRITICAL_THINKING,
    ),
}


def categories_for_context(
    context: Union[DevelopmentContext, str]
) -> List[GuidelineCategory]:
    """
    Return the categories bound to a development context, in priority order.

    Raises:
        UnknownContextError: If the context name is not known
    """
    if not isinstance(context, DevelopmentContext):
        try:
            context = DevelopmentContext(context)
        except ValueError:
            valid = ", ".join(c.value for c in DevelopmentContext)
            raise UnknownContextError(
                f"Unknown development context '{context}'. Valid contexts: {valid}"
            ) from None
    return list(CONTEXT_CATEGORIES[context])
