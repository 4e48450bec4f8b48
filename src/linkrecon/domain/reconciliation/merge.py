"""Merge stage: fold remote connectivity fragments into connection entries.

Responsibilities of this stage:
- consolidate fragments describing the same connection in arrival order
  (first present structural object wins, connectivity templates are unioned)
- join consolidated connections onto entries by full ConnectionKey, touching
  only fetched values
- synthesize fetched-only entries for connections absent from the input
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING

from linkrecon.domain.model import (
    ConnectionEntry,
    ConnectionKey,
    EntryMetadata,
    EntrySource,
)
from linkrecon.domain.parsing import clean_text, merge_name_lists, parse_bool, parse_lag_mode

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from linkrecon.domain.model import (
        EntriesByKey,
        RemoteFragment,
        RemoteInterface,
        RemoteLag,
        RemoteLink,
        RemoteNode,
    )

log = logging.getLogger(__name__)

type _GroupKey = tuple[str, str, str | None]


@dataclass(slots=True, kw_only=True)
class ConsolidatedConnection:
    """Union of every fragment describing one connection."""

    switch_name: str
    switch_interface: str
    server_name: str | None
    switch: RemoteNode | None = None
    server: RemoteNode | None = None
    server_interface: RemoteInterface | None = None
    link: RemoteLink | None = None
    lag: RemoteLag | None = None
    ct_names: str | None = None
    is_external: bool | str | None = None
    fragment_count: int = 0

    @property
    def key(self) -> ConnectionKey | None:
        if self.server_name is None:
            return None
        return ConnectionKey.full(self.switch_name, self.server_name, self.switch_interface)


@dataclass(slots=True)
class MergeReport:
    fragments: int = 0
    consolidated: int = 0
    skipped_fragments: int = 0
    unjoinable: int = 0
    joined: int = 0
    synthesized: int = 0


def consolidate_fragments(
    fragments: Iterable[RemoteFragment],
    *,
    report: MergeReport | None = None,
) -> list[ConsolidatedConnection]:
    """Group fragments per connection and fold each group deterministically."""

    stats = report if report is not None else MergeReport()
    groups: dict[_GroupKey, list[RemoteFragment]] = {}
    for fragment in sorted(fragments, key=lambda item: item.arrival_index):
        stats.fragments += 1
        group_key = _group_key(fragment)
        if group_key is None:
            stats.skipped_fragments += 1
            log.warning(
                "Skipping fragment #%s without switch name or switch interface",
                fragment.arrival_index,
            )
            continue
        groups.setdefault(group_key, []).append(fragment)

    _fold_serverless_groups(groups)

    consolidated = [_fold(group_key, members) for group_key, members in groups.items()]
    stats.consolidated = len(consolidated)
    return consolidated


def merge_remote(
    entries: EntriesByKey,
    fragments: Sequence[RemoteFragment],
    *,
    blueprint: str | None = None,
) -> MergeReport:
    """Join remote ``fragments`` onto ``entries`` in place."""

    report = MergeReport()
    for connection in consolidate_fragments(fragments, report=report):
        key = connection.key
        if key is None:
            report.unjoinable += 1
            log.warning(
                "Remote connection %s/%s has no server; not joined",
                connection.switch_name,
                connection.switch_interface,
            )
            continue
        entry = entries.get(key)
        if entry is None:
            entry = ConnectionEntry(
                key=key,
                switch_name=connection.switch_name,
                switch_interface=connection.switch_interface,
                metadata=EntryMetadata(source=EntrySource.FETCHED, blueprint=blueprint),
            )
            entries[key] = entry
            report.synthesized += 1
        else:
            entry.metadata.source = EntrySource.BOTH
            report.joined += 1
        _apply_fetched(entry, connection)

    log.info(
        "Merged %s fragment(s) into %s connection(s): joined=%s, fetched-only=%s, "
        "skipped=%s, unjoinable=%s",
        report.fragments,
        report.consolidated,
        report.joined,
        report.synthesized,
        report.skipped_fragments,
        report.unjoinable,
    )
    return report


def _group_key(fragment: RemoteFragment) -> _GroupKey | None:
    switch = clean_text(fragment.switch.display_name) if fragment.switch else None
    interface = clean_text(fragment.switch_interface.if_name) if fragment.switch_interface else None
    if switch is None or interface is None:
        return None
    server = clean_text(fragment.server.display_name) if fragment.server else None
    return (switch, interface, server)


def _fold_serverless_groups(groups: dict[_GroupKey, list[RemoteFragment]]) -> None:
    """Fold fragments lacking a server into the unique server-bearing group of their interface."""

    servers_by_interface: dict[tuple[str, str], list[_GroupKey]] = defaultdict(list)
    for group_key in groups:
        switch, interface, server = group_key
        if server is not None:
            servers_by_interface[(switch, interface)].append(group_key)

    for group_key in [key for key in groups if key[2] is None]:
        candidates = servers_by_interface.get((group_key[0], group_key[1]), [])
        if len(candidates) != 1:
            continue
        target = groups[candidates[0]]
        target.extend(groups.pop(group_key))
        target.sort(key=lambda item: item.arrival_index)


def _fold(group_key: _GroupKey, members: list[RemoteFragment]) -> ConsolidatedConnection:
    switch, interface, server = group_key
    connection = ConsolidatedConnection(
        switch_name=switch,
        switch_interface=interface,
        server_name=server,
        ct_names=merge_name_lists(member.ct_names for member in members),
        fragment_count=len(members),
    )
    for member in members:
        if connection.switch is None:
            connection.switch = member.switch
        if connection.server is None:
            connection.server = member.server
        if connection.server_interface is None:
            connection.server_interface = member.server_interface
        if connection.link is None:
            connection.link = member.link
        if connection.lag is None:
            connection.lag = member.lag
        if connection.is_external is None:
            connection.is_external = member.is_external
    return connection


def _apply_fetched(entry: ConnectionEntry, connection: ConsolidatedConnection) -> None:
    entry.server_name.value_from_fetched = connection.server_name
    entry.server_interface.value_from_fetched = (
        clean_text(connection.server_interface.if_name) if connection.server_interface else None
    )
    entry.link_speed.value_from_fetched = (
        clean_text(connection.link.speed) if connection.link else None
    )
    entry.lag_name.value_from_fetched = (
        clean_text(connection.lag.if_name) if connection.lag else None
    )
    entry.lag_mode.value_from_fetched = (
        parse_lag_mode(connection.lag.lag_mode) if connection.lag else None
    )
    entry.ct_names.value_from_fetched = connection.ct_names
    entry.is_external.value_from_fetched = parse_bool(connection.is_external)
    entry.metadata.fragment_count = connection.fragment_count
