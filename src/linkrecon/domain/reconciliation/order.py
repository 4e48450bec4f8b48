"""Ordering stage: deterministic presentation order over reconciled entries.

Entries sort by server name (input, then fetched, then ``UNKNOWN_SERVER``),
then switch name, then switch interface. All comparisons are plain,
case-sensitive string comparisons, so ``eth10`` sorts before ``eth2``.
"""

from __future__ import annotations

from itertools import groupby
from typing import TYPE_CHECKING

from linkrecon.domain.model import FieldName

if TYPE_CHECKING:
    from collections.abc import Iterable

    from linkrecon.domain.model import ConnectionEntry

UNKNOWN_SERVER = "Unknown Server"

type _SortKey = tuple[str, str, str, tuple[str, ...]]


def server_group_name(entry: ConnectionEntry) -> str:
    return entry.server_display_name or UNKNOWN_SERVER


def sort_key(entry: ConnectionEntry) -> _SortKey:
    return (
        server_group_name(entry),
        entry.switch_name or "",
        entry.switch_interface or "",
        _content_key(entry),
    )


def _content_key(entry: ConnectionEntry) -> tuple[str, ...]:
    # Only incomplete entries can tie on the first three parts.
    parts: list[str] = []
    for name in FieldName:
        paired = entry.paired(name)
        parts.append(_text(paired.value_from_input))
        parts.append(_text(paired.value_from_fetched))
    metadata = entry.metadata
    parts.extend(
        _text(value)
        for value in (
            metadata.source.value,
            metadata.blueprint,
            metadata.comment,
            metadata.server_tags,
            metadata.switch_tags,
            metadata.link_tags,
            metadata.link_group_tags,
            metadata.lag_name_generated,
        )
    )
    return tuple(parts)


def _text(value: str | bool | None) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def order_entries(entries: Iterable[ConnectionEntry]) -> list[ConnectionEntry]:
    """Return entries in presentation order, independent of insertion order."""

    return sorted(entries, key=sort_key)


def group_by_server(ordered: Iterable[ConnectionEntry]) -> list[tuple[str, list[ConnectionEntry]]]:
    """Split an ordered sequence into consecutive per-server groups."""

    return [(name, list(members)) for name, members in groupby(ordered, key=server_group_name)]
