"""Orchestrator for one reconciliation pass and the fetch-and-compare session.

``run_pass`` is a pure function of an input snapshot and an optional remote
result. ``ReconciliationSession`` owns the published state and applies the
outcome of a fetch only if no newer fetch started meanwhile and the session is
still open.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from linkrecon.domain.model import EntrySource
from linkrecon.domain.ports.fetching import ConnectivityFetchFailure

from .analyze import analyze
from .contracts import EntryComparison, ReconcileOptions, ReconciliationSummary
from .merge import MergeReport, merge_remote
from .normalize import assign_lag_names, normalize_records
from .order import order_entries
from .select import filter_entries, select_by_index, select_records

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from linkrecon.domain.model import (
        ConnectionEntry,
        ConnectionKey,
        NetworkConfigRecord,
        RemoteFragment,
    )
    from linkrecon.domain.ports.fetching import ConnectivityFetcher

log = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True, kw_only=True)
class ReconciliationState:
    """Everything needed to render one pass without recomputation."""

    entries: tuple[ConnectionEntry, ...]
    comparisons: Mapping[ConnectionKey, EntryComparison]
    summary: ReconciliationSummary
    blueprint: str | None = None
    merge_report: MergeReport | None = None

    def comparison(self, entry: ConnectionEntry) -> EntryComparison:
        return self.comparisons[entry.key]


def run_pass(
    records: Iterable[NetworkConfigRecord],
    fragments: Sequence[RemoteFragment] | None = None,
    *,
    blueprint: str | None = None,
    options: ReconcileOptions | None = None,
) -> ReconciliationState:
    """Normalize, optionally merge, analyze and order from a fresh entry collection."""

    effective = options or ReconcileOptions()
    normalized = normalize_records(records)
    entries = normalized.entries
    if effective.auto_assign_lag:
        assign_lag_names(entries.values(), start=effective.lag_name_start)

    report: MergeReport | None = None
    if fragments is not None:
        report = merge_remote(entries, fragments, blueprint=blueprint)

    comparisons, summary = analyze(entries.values())
    return ReconciliationState(
        entries=tuple(order_entries(entries.values())),
        comparisons=comparisons,
        summary=summary,
        blueprint=blueprint,
        merge_report=report,
    )


class FetchStatus(StrEnum):
    APPLIED = "applied"
    FAILED = "failed"
    SUPERSEDED = "superseded"
    ABANDONED = "abandoned"


@dataclass(slots=True, frozen=True, kw_only=True)
class FetchOutcome:
    status: FetchStatus
    token: int
    state: ReconciliationState
    error: str | None = None

    @property
    def applied(self) -> bool:
        return self.status is FetchStatus.APPLIED


class SessionClosedError(RuntimeError):
    """Raised when a closed session is asked to start a fetch."""


@dataclass(slots=True, kw_only=True)
class _Invocation:
    latest: int = 0
    closed: bool = False


@dataclass(slots=True)
class ReconciliationSession:
    """Publishes reconciliation state for one immutable input snapshot."""

    records: tuple[NetworkConfigRecord, ...]
    fetcher: ConnectivityFetcher
    options: ReconcileOptions = field(default_factory=ReconcileOptions)
    _state: ReconciliationState = field(init=False)
    _invocation: _Invocation = field(init=False, default_factory=_Invocation)

    def __post_init__(self) -> None:
        self.records = tuple(self.records)
        self._state = run_pass(self.records, options=self.options)

    @property
    def state(self) -> ReconciliationState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._invocation.closed

    def switch_labels(self) -> list[str]:
        """Switch names present in the input entries, used to scope the remote query."""

        return sorted(
            {
                entry.switch_name
                for entry in self._state.entries
                if entry.switch_name is not None and entry.source is not EntrySource.FETCHED
            }
        )

    async def fetch_and_compare(self, blueprint: str) -> FetchOutcome:
        """Fetch remote connectivity for ``blueprint`` and publish a new pass.

        A failed fetch, a fetch overtaken by a newer call, and a fetch that
        completes after ``close()`` all leave the published state untouched.
        """

        if self._invocation.closed:
            raise SessionClosedError("Reconciliation session is closed")
        self._invocation.latest += 1
        token = self._invocation.latest
        log.info("Fetch #%s started for blueprint %s", token, blueprint)

        result = await self.fetcher(blueprint=blueprint, switch_labels=self.switch_labels())

        if self._invocation.closed:
            log.info("Fetch #%s finished after session close; result discarded", token)
            return FetchOutcome(status=FetchStatus.ABANDONED, token=token, state=self._state)
        if token != self._invocation.latest:
            log.info(
                "Fetch #%s superseded by #%s; result discarded",
                token,
                self._invocation.latest,
            )
            return FetchOutcome(status=FetchStatus.SUPERSEDED, token=token, state=self._state)
        if isinstance(result, ConnectivityFetchFailure):
            log.warning("Fetch #%s failed: %s", token, result.message)
            return FetchOutcome(
                status=FetchStatus.FAILED,
                token=token,
                state=self._state,
                error=result.message,
            )

        state = run_pass(
            self.records,
            result.fragments,
            blueprint=blueprint,
            options=self.options,
        )
        self._state = state
        log.info(
            "Fetch #%s applied: total=%s, complete=%s, partial=%s, input-only=%s, fetched-only=%s",
            token,
            state.summary.total,
            state.summary.complete_matches,
            state.summary.partial_matches,
            state.summary.input_only,
            state.summary.fetched_only,
        )
        return FetchOutcome(status=FetchStatus.APPLIED, token=token, state=state)

    def close(self) -> None:
        """Abandon any in-flight fetch; its result will not be applied."""

        self._invocation.closed = True

    def filter(self, text: str) -> list[ConnectionEntry]:
        return filter_entries(self._state.entries, text)

    def select(self, keys: Iterable[ConnectionKey]) -> list[NetworkConfigRecord]:
        return select_records(self._state.entries, keys)

    def select_indices(self, indices: Iterable[int]) -> list[NetworkConfigRecord]:
        return select_by_index(self._state.entries, indices)
