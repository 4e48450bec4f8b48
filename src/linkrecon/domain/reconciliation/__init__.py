"""Reconciliation of input connection rows against remote connectivity.

Stages, in pass order: ``normalize`` -> ``merge`` -> ``analyze`` -> ``order``;
``select`` projects chosen entries back to flat records and ``engine`` wires
the stages into a pass and a fetch-and-compare session.
"""

from __future__ import annotations

from .analyze import analyze, compare_entry, compare_field
from .contracts import (
    EntryComparison,
    EntryStatus,
    FieldComparison,
    FieldStatus,
    ReconcileOptions,
    ReconciliationSummary,
)
from .engine import (
    FetchOutcome,
    FetchStatus,
    ReconciliationSession,
    ReconciliationState,
    SessionClosedError,
    run_pass,
)
from .merge import ConsolidatedConnection, MergeReport, consolidate_fragments, merge_remote
from .normalize import NormalizationResult, assign_lag_names, entry_from_record, normalize_records
from .order import UNKNOWN_SERVER, group_by_server, order_entries
from .select import (
    FETCHED_ONLY_COMMENT,
    SelectionError,
    filter_entries,
    select_by_index,
    select_records,
    to_record,
)

__all__ = [
    "FETCHED_ONLY_COMMENT",
    "UNKNOWN_SERVER",
    "ConsolidatedConnection",
    "EntryComparison",
    "EntryStatus",
    "FetchOutcome",
    "FetchStatus",
    "FieldComparison",
    "FieldStatus",
    "MergeReport",
    "NormalizationResult",
    "ReconcileOptions",
    "ReconciliationSession",
    "ReconciliationState",
    "ReconciliationSummary",
    "SelectionError",
    "SessionClosedError",
    "analyze",
    "assign_lag_names",
    "compare_entry",
    "compare_field",
    "consolidate_fragments",
    "entry_from_record",
    "filter_entries",
    "group_by_server",
    "merge_remote",
    "normalize_records",
    "order_entries",
    "run_pass",
    "select_by_index",
    "select_records",
    "to_record",
]
