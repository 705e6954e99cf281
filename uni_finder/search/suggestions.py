"""Country name suggestions for the search prompt."""

from __future__ import annotations

POPULAR_COUNTRIES = (
    "India", "United States", "United Kingdom", "Canada", "Australia",
    "Germany", "France", "Japan", "China", "Brazil", "South Africa",
    "Pakistan", "Bangladesh", "Nepal", "Sri Lanka", "Netherlands",
    "Sweden", "Norway", "Denmark", "Switzerland",
)


def suggest(prefix: str, countries: tuple[str, ...] = POPULAR_COUNTRIES) -> list[str]:
    """Return countries containing *prefix* (case-insensitive), in list order.

    A blank prefix suggests nothing.
    """
    needle = prefix.strip().lower()
    if not needle:
        return []
    return [country for country in countries if needle in country.lower()]
