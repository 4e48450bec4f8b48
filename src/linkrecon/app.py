"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from linkrecon.adapters.apstra import build_http_apstra_fetcher
from linkrecon.domain.parsing import clean_text
from linkrecon.domain.ports.fetching import ConnectivityFetchFailure
from linkrecon.domain.reconciliation import (
    ReconcileOptions,
    ReconciliationSession,
    select_by_index,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from linkrecon.domain.model import NetworkConfigRecord
    from linkrecon.domain.ports.fetching import ConnectivityFetcher
    from linkrecon.domain.ports.provisioning import ProvisioningOutcome, ProvisioningSink
    from linkrecon.domain.reconciliation import FetchOutcome, ReconciliationState

log = getLogger(__name__)


class MissingBlueprintError(ValueError):
    """Raised when no blueprint was given and the records name none."""


@dataclass(slots=True, frozen=True)
class CompareResult:
    state: ReconciliationState
    fetch: FetchOutcome | None = None

    @property
    def fetch_failed(self) -> bool:
        return self.fetch is not None and not self.fetch.applied


def infer_blueprint(records: Iterable[NetworkConfigRecord]) -> str | None:
    """First blueprint named by the records, if any."""

    for record in records:
        blueprint = clean_text(record.blueprint)
        if blueprint is not None:
            return blueprint
    return None


def compare_records(
    records: Sequence[NetworkConfigRecord],
    *,
    blueprint: str | None = None,
    fetch: bool = True,
    fetcher: ConnectivityFetcher | None = None,
    options: ReconcileOptions | None = None,
) -> CompareResult:
    """Reconcile ``records``, optionally against the controller's connectivity."""

    if not fetch:
        session = ReconciliationSession(
            records=tuple(records),
            fetcher=fetcher or _no_fetcher,
            options=options or ReconcileOptions(),
        )
        return CompareResult(state=session.state)

    target = blueprint or infer_blueprint(records)
    if target is None:
        raise MissingBlueprintError("No blueprint given and none found in the records")
    session = ReconciliationSession(
        records=tuple(records),
        fetcher=fetcher or build_http_apstra_fetcher(),
        options=options or ReconcileOptions(),
    )
    log.info("Comparing %s record(s) against blueprint %s", len(records), target)
    try:
        outcome = asyncio.run(session.fetch_and_compare(target))
    finally:
        session.close()
    return CompareResult(state=outcome.state, fetch=outcome)


def provision_selected(
    records: Sequence[NetworkConfigRecord],
    *,
    indices: Iterable[int],
    sink: ProvisioningSink,
    blueprint: str | None = None,
    fetch: bool = True,
    fetcher: ConnectivityFetcher | None = None,
    options: ReconcileOptions | None = None,
) -> tuple[CompareResult, list[ProvisioningOutcome]]:
    """Reconcile, select entries by presentation index and hand them to ``sink``."""

    result = compare_records(
        records,
        blueprint=blueprint,
        fetch=fetch,
        fetcher=fetcher,
        options=options,
    )
    if result.fetch_failed:
        return result, []
    selected = select_by_index(result.state.entries, indices)
    outcomes = sink(selected)
    failed = sum(1 for outcome in outcomes if not outcome.succeeded)
    log.info("Provisioned %s record(s), %s failed", len(outcomes) - failed, failed)
    return result, outcomes


async def _no_fetcher(**_kwargs: object) -> ConnectivityFetchFailure:
    return ConnectivityFetchFailure("Fetching is disabled")
