"""Selection stage: project chosen entries back to flat records.

Pure projection; nothing here performs I/O.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from linkrecon.domain.model import EntrySource, NetworkConfigRecord

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from linkrecon.domain.model import ConnectionEntry, ConnectionKey

FETCHED_ONLY_COMMENT = "Only in blueprint"


class SelectionError(LookupError):
    """Raised when a selection refers to entries that are not in the sequence."""


def to_record(entry: ConnectionEntry) -> NetworkConfigRecord:
    """Flatten one entry, preferring input values over fetched ones."""

    comment = entry.metadata.comment
    if comment is None and entry.source is EntrySource.FETCHED:
        comment = FETCHED_ONLY_COMMENT
    is_external = entry.is_external.preferred
    return NetworkConfigRecord(
        blueprint=entry.metadata.blueprint,
        server_label=entry.server_name.preferred,
        server_ifname=entry.server_interface.preferred,
        switch_label=entry.switch_name,
        switch_ifname=entry.switch_interface,
        link_speed=entry.link_speed.preferred,
        link_group_ifname=entry.lag_name.preferred,
        link_group_lag_mode=entry.lag_mode.preferred,
        link_group_ct_names=entry.ct_names.preferred,
        link_group_tags=entry.metadata.link_group_tags,
        is_external=is_external if is_external is not None else False,
        server_tags=entry.metadata.server_tags,
        switch_tags=entry.metadata.switch_tags,
        link_tags=entry.metadata.link_tags,
        comment=comment,
    )


def select_records(
    ordered: Sequence[ConnectionEntry],
    keys: Iterable[ConnectionKey],
) -> list[NetworkConfigRecord]:
    """Records for the entries whose key is in ``keys``, in presentation order."""

    wanted = set(keys)
    known = {entry.key for entry in ordered}
    unknown = wanted - known
    if unknown:
        raise SelectionError(f"{len(unknown)} selected connection(s) are not in the result")
    return [to_record(entry) for entry in ordered if entry.key in wanted]


def select_by_index(
    ordered: Sequence[ConnectionEntry],
    indices: Iterable[int],
) -> list[NetworkConfigRecord]:
    """Records for positions of the ordered sequence, in presentation order."""

    positions = sorted(set(indices))
    invalid = [index for index in positions if not 0 <= index < len(ordered)]
    if invalid:
        raise SelectionError(
            f"Indices out of range 0..{len(ordered) - 1}: {', '.join(map(str, invalid))}"
        )
    return [to_record(ordered[index]) for index in positions]


def filter_entries(ordered: Iterable[ConnectionEntry], text: str) -> list[ConnectionEntry]:
    """Case-insensitive substring filter on switch, interface and server names."""

    needle = text.strip().lower()
    if not needle:
        return list(ordered)
    return [entry for entry in ordered if needle in _haystack(entry)]


def _haystack(entry: ConnectionEntry) -> str:
    parts = (
        entry.switch_name,
        entry.switch_interface,
        entry.server_name.value_from_input,
        entry.server_name.value_from_fetched,
    )
    return "\n".join(part.lower() for part in parts if part)
