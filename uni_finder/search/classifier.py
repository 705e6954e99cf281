"""Heuristic public/private classification from a university's name."""

from __future__ import annotations

from enum import Enum


class Classification(str, Enum):
    """Labels the name heuristic can assign."""

    PUBLIC = "public"
    PRIVATE = "private"
    UNKNOWN = "unknown"


PUBLIC_KEYWORDS = ("state", "public", "national", "government", "municipal", "federal")
PRIVATE_KEYWORDS = ("private", "institute", "college", "academy")


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    """Return True if any keyword occurs in *text* as a substring."""
    return any(keyword in text for keyword in keywords)


def classify(name: str) -> Classification:
    """Classify a university by keywords in its name.

    Matching is a case-insensitive substring test. Public keywords win
    over private ones, so "State Private Institute" is public.

    Args:
        name: The university name.

    Returns:
        The matching :class:`Classification`.
    """
    lowered = name.lower()
    if _contains_any(lowered, PUBLIC_KEYWORDS):
        return Classification.PUBLIC
    if _contains_any(lowered, PRIVATE_KEYWORDS):
        return Classification.PRIVATE
    return Classification.UNKNOWN
