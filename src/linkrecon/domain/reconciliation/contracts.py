"""Shared reconciliation contract components.

This module intentionally holds only:
- per-field and per-entry classification enums
- comparison/summary dataclasses produced by the analyzer
- pass options consumed by the engine
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from linkrecon.domain.model import ConnectionKey, FieldName


class FieldStatus(StrEnum):
    """Agreement of one field between input and fetched values."""

    ABSENT = "absent"
    INPUT_ONLY = "input_only"
    FETCHED_ONLY = "fetched_only"
    MATCH = "match"
    CONFLICT = "conflict"


class EntryStatus(StrEnum):
    """Overall agreement of one connection entry.

    ``NO_MATCH`` only arises for entries assembled outside ``run_pass``: a merge
    joins on the server name, so every joined entry agrees on at least that field.
    """

    COMPLETE_MATCH = "complete_match"
    PARTIAL_MATCH = "partial_match"
    NO_MATCH = "no_match"
    INPUT_ONLY = "input_only"
    FETCHED_ONLY = "fetched_only"


@dataclass(slots=True, frozen=True, kw_only=True)
class FieldComparison:
    field: FieldName
    status: FieldStatus
    input_value: str | bool | None = None
    fetched_value: str | bool | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class EntryComparison:
    key: ConnectionKey
    status: EntryStatus
    fields: tuple[FieldComparison, ...]
    match_score: int
    incomplete: bool = False

    def field_status(self, field: FieldName) -> FieldStatus:
        for comparison in self.fields:
            if comparison.field is field:
                return comparison.status
        return FieldStatus.ABSENT

    @property
    def conflicts(self) -> tuple[FieldComparison, ...]:
        return tuple(item for item in self.fields if item.status is FieldStatus.CONFLICT)


@dataclass(slots=True, frozen=True, kw_only=True)
class ReconciliationSummary:
    total: int = 0
    complete_matches: int = 0
    partial_matches: int = 0
    no_matches: int = 0
    input_only: int = 0
    fetched_only: int = 0
    incomplete: int = 0
    field_conflicts: int = 0


@dataclass(slots=True, frozen=True, kw_only=True)
class ReconcileOptions:
    auto_assign_lag: bool = True
    lag_name_start: int = 900
