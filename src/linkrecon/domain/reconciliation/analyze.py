"""Analysis stage: classify agreement per field and per entry."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from linkrecon.domain.model import EntrySource, FieldName
from linkrecon.domain.parsing import name_set, normalize_speed

from .contracts import (
    EntryComparison,
    EntryStatus,
    FieldComparison,
    FieldStatus,
    ReconciliationSummary,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from linkrecon.domain.model import ConnectionEntry, ConnectionKey

type _Normalizer = Callable[[object], object]


def _identity(value: object) -> object:
    return value


_NORMALIZERS: dict[FieldName, _Normalizer] = {
    FieldName.LINK_SPEED: normalize_speed,
    # Template lists compare as sets; fragment arrival order must not matter.
    FieldName.CT_NAMES: name_set,
}


def compare_field(
    field: FieldName,
    input_value: str | bool | None,
    fetched_value: str | bool | None,
) -> FieldStatus:
    if input_value is None and fetched_value is None:
        return FieldStatus.ABSENT
    if fetched_value is None:
        return FieldStatus.INPUT_ONLY
    if input_value is None:
        return FieldStatus.FETCHED_ONLY
    normalize = _NORMALIZERS.get(field, _identity)
    if normalize(input_value) == normalize(fetched_value):
        return FieldStatus.MATCH
    return FieldStatus.CONFLICT


def compare_entry(entry: ConnectionEntry) -> EntryComparison:
    comparisons = tuple(
        FieldComparison(
            field=name,
            status=compare_field(
                name,
                entry.paired(name).value_from_input,
                entry.paired(name).value_from_fetched,
            ),
            input_value=entry.paired(name).value_from_input,
            fetched_value=entry.paired(name).value_from_fetched,
        )
        for name in FieldName
    )
    present = [item for item in comparisons if item.status is not FieldStatus.ABSENT]
    matches = sum(1 for item in present if item.status is FieldStatus.MATCH)
    score = round(100 * matches / len(present)) if present else 0
    return EntryComparison(
        key=entry.key,
        status=_entry_status(entry, present, matches),
        fields=comparisons,
        match_score=score,
        incomplete=entry.is_incomplete,
    )


def _entry_status(
    entry: ConnectionEntry,
    present: list[FieldComparison],
    matches: int,
) -> EntryStatus:
    if entry.source is EntrySource.INPUT:
        return EntryStatus.INPUT_ONLY
    if entry.source is EntrySource.FETCHED:
        return EntryStatus.FETCHED_ONLY
    if present and matches == len(present):
        return EntryStatus.COMPLETE_MATCH
    if matches:
        return EntryStatus.PARTIAL_MATCH
    # Unreachable for merged entries, which share their server name by construction.
    return EntryStatus.NO_MATCH


def analyze(
    entries: Iterable[ConnectionEntry],
) -> tuple[dict[ConnectionKey, EntryComparison], ReconciliationSummary]:
    """Compare every entry and derive the summary from scratch."""

    comparisons = {entry.key: compare_entry(entry) for entry in entries}
    statuses = [comparison.status for comparison in comparisons.values()]
    summary = ReconciliationSummary(
        total=len(comparisons),
        complete_matches=statuses.count(EntryStatus.COMPLETE_MATCH),
        partial_matches=statuses.count(EntryStatus.PARTIAL_MATCH),
        no_matches=statuses.count(EntryStatus.NO_MATCH),
        input_only=statuses.count(EntryStatus.INPUT_ONLY),
        fetched_only=statuses.count(EntryStatus.FETCHED_ONLY),
        incomplete=sum(1 for comparison in comparisons.values() if comparison.incomplete),
        field_conflicts=sum(len(comparison.conflicts) for comparison in comparisons.values()),
    )
    return comparisons, summary
