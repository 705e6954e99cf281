"""University directory client with country-to-name fallback."""

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import ValidationError

from uni_finder.data.models import UniversityRecord
from uni_finder.errors import NetworkError, UpstreamError
from uni_finder.net.http_client import HttpClient

logger = logging.getLogger("uni_finder")


class DirectoryClient:
    """Look up universities by country in the public Hipolabs directory.

    Every transport failure surfaces as :class:`NetworkError` and every
    bad HTTP status or malformed body as :class:`UpstreamError`, so
    callers only ever switch on :attr:`DirectoryError.kind`.

    Usage::

        with HttpClient(timeout=10) as http:
            client = DirectoryClient(http)
            records = client.lookup("India")
    """

    DEFAULT_URL = "https://universities.hipolabs.com/search"

    def __init__(self, http_client: HttpClient, api_url: str = DEFAULT_URL) -> None:
        self.http_client = http_client
        self.api_url = api_url

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def lookup(self, country: str) -> tuple[UniversityRecord, ...]:
        """Return the universities for *country*.

        Queries by ``country`` first. The directory indexes some entries
        by name rather than by strict country match, so an empty answer
        is retried once with the same text as ``name``.

        Returns:
            The first non-empty result, or an empty tuple when neither
            query matches anything.

        Raises:
            NetworkError: on timeouts and connection failures.
            UpstreamError: on non-2xx responses or an unusable body.
        """
        records = self._fetch({"country": country})
        if records:
            return records

        logger.info("No match by country, retrying by name", extra={"query": country})
        return self._fetch({"name": country})

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _fetch(self, params: dict[str, str]) -> tuple[UniversityRecord, ...]:
        logger.info("Directory lookup", extra={"params": params})
        try:
            response = self.http_client.get(self.api_url, params=params)
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.warning(
                "Directory returned an error status",
                extra={"params": params, "status_code": status},
            )
            raise UpstreamError(str(e), status_code=status) from e
        except requests.RequestException as e:
            logger.warning(
                "Directory request failed", extra={"params": params, "error": str(e)}
            )
            raise NetworkError(str(e)) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamError(
                "Directory response is not JSON", status_code=response.status_code
            ) from e

        if not isinstance(payload, list):
            raise UpstreamError(
                f"Expected a JSON list, got {type(payload).__name__}",
                status_code=response.status_code,
            )

        records = normalize_records(payload)
        logger.info(
            "Directory lookup complete",
            extra={"params": params, "count": len(records)},
        )
        return records


def normalize_records(payload: list[Any]) -> tuple[UniversityRecord, ...]:
    """Convert raw directory entries into :class:`UniversityRecord` objects.

    Entries that are not objects or that lack a usable name are skipped
    and logged; upstream order is preserved for everything else.
    """
    records: list[UniversityRecord] = []
    for index, entry in enumerate(payload):
        if not isinstance(entry, dict):
            logger.warning("Skipping non-object entry", extra={"index": index})
            continue
        try:
            records.append(UniversityRecord.model_validate(entry))
        except ValidationError as e:
            logger.warning(
                "Skipping malformed entry",
                extra={"index": index, "error": str(e)},
            )
    return tuple(records)
