"""Tests for uni_finder.data.models module."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from uni_finder.data.models import UniversityRecord


# ======================================================================
# Creation
# ======================================================================


class TestUniversityRecordCreation:
    """Test building records from upstream payloads."""

    def test_from_upstream_payload(self) -> None:
        record = UniversityRecord.model_validate(
            {
                "name": "University of Toronto",
                "country": "Canada",
                "state-province": "Ontario",
                "domains": ["utoronto.ca"],
                "web_pages": ["https://www.utoronto.ca/"],
            }
        )
        assert record.name == "University of Toronto"
        assert record.country == "Canada"
        assert record.state_province == "Ontario"
        assert record.domains == ("utoronto.ca",)
        assert record.web_pages == ("https://www.utoronto.ca/",)

    def test_by_field_name(self) -> None:
        record = UniversityRecord(name="MIT", state_province="Massachusetts")
        assert record.state_province == "Massachusetts"

    def test_defaults(self) -> None:
        record = UniversityRecord(name="Somewhere University")
        assert record.country is None
        assert record.state_province is None
        assert record.domains == ()
        assert record.web_pages == ()

    def test_unknown_fields_ignored(self) -> None:
        record = UniversityRecord.model_validate(
            {"name": "X University", "alpha_two_code": "XX"}
        )
        assert not hasattr(record, "alpha_two_code")


# ======================================================================
# Normalization
# ======================================================================


class TestUniversityRecordNormalization:
    """Test how blank and null upstream values are treated."""

    def test_empty_state_is_absent(self) -> None:
        record = UniversityRecord.model_validate({"name": "A", "state-province": ""})
        assert record.state_province is None

    def test_whitespace_state_is_absent(self) -> None:
        record = UniversityRecord.model_validate({"name": "A", "state-province": "   "})
        assert record.state_province is None

    def test_null_state_is_absent(self) -> None:
        record = UniversityRecord.model_validate({"name": "A", "state-province": None})
        assert record.state_province is None

    def test_null_lists_become_empty(self) -> None:
        record = UniversityRecord.model_validate(
            {"name": "A", "domains": None, "web_pages": None}
        )
        assert record.domains == ()
        assert record.web_pages == ()

    def test_country_not_rewritten(self) -> None:
        record = UniversityRecord.model_validate({"name": "A", "country": None})
        assert record.country is None


# ======================================================================
# Validation
# ======================================================================


class TestUniversityRecordValidation:
    """Test rejection of unusable entries."""

    def test_missing_name_raises(self) -> None:
        with pytest.raises(ValidationError):
            UniversityRecord.model_validate({"country": "India"})

    def test_blank_name_raises(self) -> None:
        with pytest.raises(ValidationError):
            UniversityRecord(name="   ")

    def test_frozen(self) -> None:
        record = UniversityRecord(name="A")
        with pytest.raises(ValidationError):
            record.name = "B"  # type: ignore[misc]

    def test_equal_records_compare_equal(self) -> None:
        assert UniversityRecord(name="A", country="X") == UniversityRecord(name="A", country="X")


# ======================================================================
# Derived properties
# ======================================================================


class TestUniversityRecordProperties:
    """Test the render-time helpers."""

    def test_display_country_present(self) -> None:
        assert UniversityRecord(name="A", country="Japan").display_country == "Japan"

    def test_display_country_missing(self) -> None:
        assert UniversityRecord(name="A").display_country == "Not specified"

    def test_display_country_empty_string(self) -> None:
        assert UniversityRecord(name="A", country="").display_country == "Not specified"

    def test_website_is_first_page(self) -> None:
        record = UniversityRecord(
            name="A", web_pages=("https://a.edu/", "https://www.a.edu/")
        )
        assert record.website == "https://a.edu/"

    def test_website_none_without_pages(self) -> None:
        assert UniversityRecord(name="A").website is None

    def test_primary_domain(self) -> None:
        record = UniversityRecord(name="A", domains=("a.edu", "a.org"))
        assert record.primary_domain == "a.edu"

    def test_primary_domain_none(self) -> None:
        assert UniversityRecord(name="A").primary_domain is None
