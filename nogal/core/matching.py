"""Category filter matching."""

from __future__ import annotations

from typing import Optional

# Sentinel catver.ini appends to adult titles. Always compared case-sensitively.
MATURE_MARKER = "* Mature *"
MATURE_FILTER_TOKEN = "mature"


def is_mature_filter(category_filter: Optional[str]) -> bool:
    """True when the filter selects the default mature-content rule."""
    return not category_filter or category_filter.lower() == MATURE_FILTER_TOKEN


def matches(category: str, category_filter: Optional[str] = None, case_insensitive: bool = False) -> bool:
    """Decide whether ``category`` satisfies ``category_filter``.

    An absent filter and the ``mature`` token both select the mature marker
    rule, which ignores ``case_insensitive``. Any other filter is a substring
    test, lowercased on both sides when ``case_insensitive`` is set.
    """
    if is_mature_filter(category_filter):
        return MATURE_MARKER in category

    if case_insensitive:
        return category_filter.lower() in category.lower()
    return category_filter in category


def describe_filter(category_filter: Optional[str], case_insensitive: bool = False) -> str:
    if is_mature_filter(category_filter):
        return f"mature games ({MATURE_MARKER!r})"
    suffix = ", case-insensitive" if case_insensitive else ""
    return f"category containing {category_filter!r}{suffix}"
