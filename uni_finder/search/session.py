"""Search session: one country search at a time, observed by the UI."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from uni_finder.data.models import UniversityRecord
from uni_finder.directory.client import DirectoryClient
from uni_finder.errors import (
    DirectoryError,
    ErrorKind,
    InvalidSelection,
    UpstreamError,
    message_for,
)
from uni_finder.search import filters
from uni_finder.search.facets import derive_states
from uni_finder.search.filters import Category, FilterSelection

logger = logging.getLogger("uni_finder")

_UNSET = object()


class SessionState(str, Enum):
    """Lifecycle of a search session."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    EMPTY = "empty"
    ERROR = "error"


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a session handed to the presentation layer.

    ``facets`` is ``None`` until a search has produced a result set and
    an empty tuple when the result set has no state data.
    """

    state: SessionState
    query: str
    records: tuple[UniversityRecord, ...]
    total: int
    facets: tuple[str, ...] | None
    selection: FilterSelection
    message: str
    error_kind: ErrorKind | None
    generation: int


Listener = Callable[[SessionSnapshot], None]


class SearchSession:
    """Drive a directory search through its states and expose the result.

    States run ``IDLE -> LOADING -> {SUCCESS, EMPTY, ERROR}``; every new
    search re-enters ``LOADING``. Each search is tagged with a generation
    number and a completion whose generation is no longer current is
    discarded, so only the latest search ever lands in session state.

    Lookups run in a worker thread through :func:`asyncio.to_thread`;
    all session state is read and written on the event loop thread only.

    Usage::

        session = SearchSession(directory_client)
        session.subscribe(print)
        await session.search("India")
        session.change_filter(state_province="Delhi")
    """

    def __init__(self, client: DirectoryClient) -> None:
        self.client = client
        self._state = SessionState.IDLE
        self._generation = 0
        self._query = ""
        self._results: tuple[UniversityRecord, ...] = ()
        self._view: tuple[UniversityRecord, ...] = ()
        self._facets: tuple[str, ...] | None = None
        self._selection = FilterSelection()
        self._message = ""
        self._error_kind: ErrorKind | None = None
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def query(self) -> str:
        return self._query

    @property
    def results(self) -> tuple[UniversityRecord, ...]:
        """The full, unfiltered result set of the last completed search."""
        return self._results

    @property
    def records(self) -> tuple[UniversityRecord, ...]:
        """The filtered view over :attr:`results`."""
        return self._view

    @property
    def facets(self) -> tuple[str, ...] | None:
        return self._facets

    @property
    def selection(self) -> FilterSelection:
        return self._selection

    @property
    def message(self) -> str:
        return self._message

    @property
    def error_kind(self) -> ErrorKind | None:
        return self._error_kind

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener* for snapshots; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            state=self._state,
            query=self._query,
            records=self._view,
            total=len(self._results),
            facets=self._facets,
            selection=self._selection,
            message=self._message,
            error_kind=self._error_kind,
            generation=self._generation,
        )

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def search(self, country: str) -> SessionState:
        """Run a search for *country* and return the state it ends in.

        A blank query never reaches the network: the session keeps its
        current state and reports ``ErrorKind.INVALID_INPUT``. Lookup
        failures are turned into the ``ERROR`` state with a message;
        nothing raised by the directory escapes this method.

        If a newer search starts while this one is in flight, this one's
        outcome is dropped and the state at that moment is returned.
        """
        query = country.strip()
        if not query:
            logger.info("Rejected blank search query")
            self._error_kind = ErrorKind.INVALID_INPUT
            self._message = message_for(ErrorKind.INVALID_INPUT)
            self._notify()
            return self._state

        self._generation += 1
        generation = self._generation
        self._query = query
        self._message = ""
        self._error_kind = None
        self._selection = FilterSelection()
        self._results = ()
        self._view = ()
        self._facets = None
        self._state = SessionState.LOADING
        logger.debug(
            "Search started", extra={"query": query, "generation": generation}
        )
        self._notify()

        try:
            records = await asyncio.to_thread(self.client.lookup, query)
        except DirectoryError as e:
            if self._is_stale(generation):
                return self._state
            status = e.status_code if isinstance(e, UpstreamError) else None
            self._fail(e.kind, status)
            return self._state
        except Exception:
            if self._is_stale(generation):
                return self._state
            logger.exception("Unexpected lookup failure", extra={"query": query})
            self._fail(ErrorKind.UPSTREAM, None)
            return self._state

        if self._is_stale(generation):
            return self._state

        self._results = records
        self._facets = derive_states(records)
        self._view = filters.apply(records, self._selection)
        if records:
            self._state = SessionState.SUCCESS
            self._error_kind = None
            self._message = f"Found {len(records)} universities in {query}!"
        else:
            self._state = SessionState.EMPTY
            self._error_kind = ErrorKind.NOT_FOUND
            self._message = message_for(ErrorKind.NOT_FOUND, query)

        logger.info(
            "Search finished",
            extra={
                "query": query,
                "generation": generation,
                "state": self._state.value,
                "count": len(records),
            },
        )
        self._notify()
        return self._state

    def change_filter(
        self,
        selection: FilterSelection | None = None,
        *,
        state_province: str | None | object = _UNSET,
        category: Category | str | object = _UNSET,
    ) -> tuple[UniversityRecord, ...]:
        """Apply a new filter selection to the current result set.

        Pass either a whole :class:`FilterSelection` or the fields to
        change; unspecified fields keep their current value.

        Returns:
            The new filtered view.

        Raises:
            InvalidSelection: if the session is not in ``SUCCESS`` or the
                state/province is not one of the current facets, or the
                category is unknown.
        """
        if self._state is not SessionState.SUCCESS:
            raise InvalidSelection(
                f"Filters can only change after a successful search (state: {self._state.value})"
            )

        if selection is None:
            selection = FilterSelection(
                state_province=(
                    self._selection.state_province
                    if state_province is _UNSET
                    else state_province or None
                ),
                category=(
                    self._selection.category if category is _UNSET else _coerce_category(category)
                ),
            )

        if selection.state_province and selection.state_province not in (self._facets or ()):
            raise InvalidSelection(
                f"Unknown state/province: {selection.state_province!r}"
            )

        if self._error_kind is ErrorKind.INVALID_INPUT:
            self._error_kind = None
            self._message = ""
        self._selection = selection
        self._view = filters.apply(self._results, selection)
        logger.debug(
            "Filter changed",
            extra={
                "state_province": selection.state_province,
                "category": selection.category.value,
                "shown": len(self._view),
                "total": len(self._results),
            },
        )
        self._notify()
        return self._view

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _is_stale(self, generation: int) -> bool:
        if generation != self._generation:
            logger.debug(
                "Discarding stale search result",
                extra={"generation": generation, "current": self._generation},
            )
            return True
        return False

    def _fail(self, kind: ErrorKind, status_code: int | None) -> None:
        self._state = SessionState.ERROR
        self._error_kind = kind
        self._message = message_for(kind, self._query, status_code)
        self._results = ()
        self._view = ()
        self._facets = None
        logger.warning(
            "Search failed",
            extra={"query": self._query, "kind": kind.value, "status_code": status_code},
        )
        self._notify()


def _coerce_category(category: Category | str) -> Category:
    try:
        return Category(category)
    except ValueError:
        raise InvalidSelection(f"Unknown category: {category!r}") from None
