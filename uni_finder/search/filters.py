"""Filter selection and its application to a result set.

The category rule here is deliberately coarser than
:func:`uni_finder.search.classifier.classify`: "private" means "no public
keyword in the name", not "has a private keyword".
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from uni_finder.data.models import UniversityRecord


class Category(str, Enum):
    """Public/private filter choices."""

    ALL = "all"
    PUBLIC = "public"
    PRIVATE = "private"


# Narrower than the classifier's public list: no "municipal" or "federal".
FILTER_PUBLIC_KEYWORDS = ("state", "public", "national", "government")


@dataclass(frozen=True)
class FilterSelection:
    """The user's current filter choices."""

    state_province: str | None = None
    category: Category = Category.ALL

    def is_default(self) -> bool:
        return self.state_province is None and self.category is Category.ALL


def _looks_public(name: str) -> bool:
    lowered = name.lower()
    return any(keyword in lowered for keyword in FILTER_PUBLIC_KEYWORDS)


def _matches_state(record: UniversityRecord, state: str) -> bool:
    return bool(record.state_province) and state.lower() in record.state_province.lower()


def apply(
    records: Iterable[UniversityRecord], selection: FilterSelection
) -> tuple[UniversityRecord, ...]:
    """Filter *records* by *selection*, preserving their order.

    1. A selected state keeps records whose state/province contains it
       as a case-insensitive substring.
    2. ``public`` keeps names with any public keyword; ``private`` keeps
       names with none; ``all`` keeps everything.

    Returns:
        The surviving records, never more than were given.
    """
    filtered = list(records)

    if selection.state_province:
        filtered = [r for r in filtered if _matches_state(r, selection.state_province)]

    if selection.category is Category.PUBLIC:
        filtered = [r for r in filtered if _looks_public(r.name)]
    elif selection.category is Category.PRIVATE:
        filtered = [r for r in filtered if not _looks_public(r.name)]

    return tuple(filtered)
