"""Normalization stage: flat input records to connection entries.

Responsibilities of this stage:
- derive a ConnectionKey per record (ordinal fallback for incomplete identity)
- trim text, parse booleans and LAG modes through ``domain.parsing``
- fold duplicate rows without overwriting present values with blanks
- optionally group LACP links per server and generate LAG names
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from linkrecon.domain.model import (
    ConnectionEntry,
    ConnectionKey,
    EntryMetadata,
    EntrySource,
    PairedValue,
    ServerKey,
)
from linkrecon.domain.parsing import clean_text, parse_bool, parse_lag_mode

if TYPE_CHECKING:
    from collections.abc import Iterable

    from linkrecon.domain.model import EntriesByKey, NetworkConfigRecord

log = logging.getLogger(__name__)

LACP_ACTIVE = "lacp_active"
LAG_NAME_PREFIX = "ae"

_TEXT_FIELDS = ("server_name", "server_interface", "link_speed", "lag_name", "lag_mode", "ct_names")
_METADATA_FIELDS = (
    "blueprint",
    "comment",
    "server_tags",
    "switch_tags",
    "link_tags",
    "link_group_tags",
)


@dataclass(slots=True)
class NormalizationResult:
    entries: EntriesByKey = field(default_factory=dict)
    duplicates: int = 0
    incomplete: int = 0


def normalize_records(records: Iterable[NetworkConfigRecord]) -> NormalizationResult:
    """Build one entry per ConnectionKey from ``records`` (source=input)."""

    result = NormalizationResult()
    for ordinal, record in enumerate(records):
        entry = entry_from_record(record, ordinal=ordinal)
        if entry.is_incomplete:
            result.incomplete += 1
            log.warning(
                "Row %s lacks switch, server or switch interface; kept as incomplete entry",
                ordinal + 1,
            )
        existing = result.entries.get(entry.key)
        if existing is None:
            result.entries[entry.key] = entry
            continue
        result.duplicates += 1
        log.warning(
            "Duplicate row %s for %s/%s/%s; merging non-empty values",
            ordinal + 1,
            entry.key.switch_name,
            entry.key.server_name,
            entry.key.switch_interface,
        )
        _overlay(existing, entry, has_external=clean_text(record.is_external) is not None)
    return result


def entry_from_record(record: NetworkConfigRecord, *, ordinal: int) -> ConnectionEntry:
    key = ConnectionKey.derive(
        switch_name=record.switch_label,
        server_name=record.server_label,
        switch_interface=record.switch_ifname,
        ordinal=ordinal,
    )
    return ConnectionEntry(
        key=key,
        switch_name=clean_text(record.switch_label),
        switch_interface=clean_text(record.switch_ifname),
        server_name=PairedValue(value_from_input=clean_text(record.server_label)),
        server_interface=PairedValue(value_from_input=clean_text(record.server_ifname)),
        link_speed=PairedValue(value_from_input=clean_text(record.link_speed)),
        lag_name=PairedValue(value_from_input=clean_text(record.link_group_ifname)),
        lag_mode=PairedValue(value_from_input=parse_lag_mode(record.link_group_lag_mode)),
        ct_names=PairedValue(value_from_input=clean_text(record.link_group_ct_names)),
        is_external=PairedValue(value_from_input=parse_bool(record.is_external)),
        metadata=EntryMetadata(
            source=EntrySource.INPUT,
            blueprint=clean_text(record.blueprint),
            comment=clean_text(record.comment),
            server_tags=clean_text(record.server_tags),
            switch_tags=clean_text(record.switch_tags),
            link_tags=clean_text(record.link_tags),
            link_group_tags=clean_text(record.link_group_tags),
        ),
    )


def _overlay(target: ConnectionEntry, later: ConnectionEntry, *, has_external: bool) -> None:
    for name in _TEXT_FIELDS:
        value = getattr(later, name).value_from_input
        if value is not None:
            getattr(target, name).value_from_input = value
    if has_external:
        target.is_external.value_from_input = later.is_external.value_from_input
    for name in _METADATA_FIELDS:
        value = getattr(later.metadata, name)
        if value is not None:
            setattr(target.metadata, name, value)


def assign_lag_names(
    entries: Iterable[ConnectionEntry],
    *,
    start: int = 900,
) -> dict[ServerKey, str]:
    """Give LACP-active links without a LAG name one generated name per server.

    Links are grouped by server only, so links of one server landing on different
    switches share a LAG. Servers are numbered in ascending name order and names
    already used by the input are skipped.
    """

    pending: dict[ServerKey, list[ConnectionEntry]] = defaultdict(list)
    used: set[str] = set()
    for entry in entries:
        if entry.lag_name.value_from_input is not None:
            used.add(entry.lag_name.value_from_input)
            continue
        server = entry.server_name.value_from_input
        if server is None or entry.lag_mode.value_from_input != LACP_ACTIVE:
            continue
        pending[ServerKey(server)].append(entry)

    assigned: dict[ServerKey, str] = {}
    number = start
    for server_key in sorted(pending, key=lambda key: key.server_name):
        name = f"{LAG_NAME_PREFIX}{number}"
        while name in used:
            number += 1
            name = f"{LAG_NAME_PREFIX}{number}"
        number += 1
        used.add(name)
        assigned[server_key] = name
        for entry in pending[server_key]:
            entry.lag_name.value_from_input = name
            entry.metadata.lag_name_generated = True
        log.info(
            "Assigned LAG %s to %s link(s) of server %s",
            name,
            len(pending[server_key]),
            server_key.server_name,
        )
    return assigned
