"""Facet derivation over a result set."""

from __future__ import annotations

from collections.abc import Iterable

from uni_finder.data.models import UniversityRecord


def derive_states(records: Iterable[UniversityRecord]) -> tuple[str, ...]:
    """Return the sorted, distinct states/provinces present in *records*.

    Absent and whitespace-only values are left out.
    """
    states = {
        record.state_province
        for record in records
        if record.state_province and record.state_province.strip()
    }
    return tuple(sorted(states))
