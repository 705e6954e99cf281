"""Shared fixtures for uni_finder tests."""

from __future__ import annotations

from typing import Any

import pytest

from uni_finder.data.models import UniversityRecord

INDIA_PAYLOAD: list[dict[str, Any]] = [
    {
        "name": "Delhi Technological University",
        "country": "India",
        "state-province": "Delhi",
        "domains": ["dtu.ac.in"],
        "web_pages": ["http://www.dtu.ac.in/"],
        "alpha_two_code": "IN",
    },
    {
        "name": "Indian Institute of Technology Bombay",
        "country": "India",
        "state-province": None,
        "domains": ["iitb.ac.in"],
        "web_pages": ["http://www.iitb.ac.in/"],
        "alpha_two_code": "IN",
    },
    {
        "name": "Gujarat National Law University",
        "country": "India",
        "state-province": "Gujarat",
        "domains": ["gnlu.ac.in"],
        "web_pages": ["http://www.gnlu.ac.in/"],
        "alpha_two_code": "IN",
    },
    {
        "name": "Karnataka State Open University",
        "country": "India",
        "state-province": "  ",
        "domains": [],
        "web_pages": [],
        "alpha_two_code": "IN",
    },
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    """Keep the developer's environment out of config-dependent tests."""
    for var in ("UNI_FINDER_API_URL", "UNI_FINDER_TIMEOUT", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture()
def india_payload() -> list[dict[str, Any]]:
    return [dict(entry) for entry in INDIA_PAYLOAD]


@pytest.fixture()
def india_records() -> tuple[UniversityRecord, ...]:
    return tuple(UniversityRecord.model_validate(entry) for entry in INDIA_PAYLOAD)

