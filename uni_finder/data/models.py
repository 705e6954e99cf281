"""Pydantic models for directory data."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UniversityRecord(BaseModel):
    """One university as returned by the directory, normalized.

    The upstream payload uses a hyphenated ``state-province`` key; it is
    accepted as an alias of :attr:`state_province`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    country: str | None = None
    state_province: str | None = Field(default=None, alias="state-province")
    domains: tuple[str, ...] = ()
    web_pages: tuple[str, ...] = ()

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    @field_validator("state_province", mode="before")
    @classmethod
    def _blank_state_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("domains", "web_pages", mode="before")
    @classmethod
    def _null_list_is_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @property
    def display_country(self) -> str:
        return self.country or "Not specified"

    @property
    def website(self) -> str | None:
        """Canonical website: the first entry of :attr:`web_pages`."""
        return self.web_pages[0] if self.web_pages else None

    @property
    def primary_domain(self) -> str | None:
        return self.domains[0] if self.domains else None
