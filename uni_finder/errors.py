"""Error taxonomy for directory lookups and session input."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds a search can end in."""

    INVALID_INPUT = "invalid_input"
    NETWORK = "network"
    UPSTREAM = "upstream"
    NOT_FOUND = "not_found"


class UniFinderError(Exception):
    """Base class for all uni_finder errors."""


class DirectoryError(UniFinderError):
    """A lookup against the university directory failed."""

    kind: ErrorKind = ErrorKind.UPSTREAM


class NetworkError(DirectoryError):
    """Transport-level failure: timeout, DNS, refused connection, etc."""

    kind = ErrorKind.NETWORK


class UpstreamError(DirectoryError):
    """The directory answered with a non-2xx status or an unusable body."""

    kind = ErrorKind.UPSTREAM

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class InvalidInput(UniFinderError, ValueError):
    """A blank country query."""

    kind = ErrorKind.INVALID_INPUT


class InvalidSelection(UniFinderError, ValueError):
    """A filter change that the current session state does not allow."""


def message_for(
    kind: ErrorKind, query: str = "", status_code: int | None = None
) -> str:
    """Return the user-facing message for a failed search.

    Args:
        kind: The failure kind.
        query: The country the user searched for.
        status_code: HTTP status for UPSTREAM failures, when known.

    Returns:
        Text suitable for showing directly to the user.
    """
    if kind is ErrorKind.INVALID_INPUT:
        return "Please enter a country name"
    if kind is ErrorKind.NETWORK:
        return "Please check your internet connection and try again."
    if kind is ErrorKind.NOT_FOUND:
        return (
            f'No universities found for "{query}". '
            "Please check the country name and try again."
        )
    if status_code == 404:
        return f'No universities found for "{query}". Please check the country name.'
    return (
        "Unable to fetch universities. The service might be temporarily "
        "unavailable. Please try again later."
    )
