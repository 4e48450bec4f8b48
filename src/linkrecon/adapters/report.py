"""JSON rendering of a reconciliation state."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from linkrecon.domain.reconciliation import group_by_server, to_record

if TYPE_CHECKING:
    from linkrecon.domain.reconciliation import ReconciliationState


def render_report(state: ReconciliationState) -> dict[str, object]:
    """Report with the summary and every entry in presentation order."""

    rows: list[dict[str, object]] = []
    for index, entry in enumerate(state.entries):
        comparison = state.comparison(entry)
        rows.append(
            {
                "index": index,
                "status": comparison.status.value,
                "match_score": comparison.match_score,
                "incomplete": comparison.incomplete,
                "source": entry.source.value,
                "record": to_record(entry).as_dict(),
                "fields": {
                    item.field.value: {
                        "status": item.status.value,
                        "input": item.input_value,
                        "fetched": item.fetched_value,
                    }
                    for item in comparison.fields
                },
            }
        )
    return {
        "blueprint": state.blueprint,
        "summary": asdict(state.summary),
        "servers": [
            {"server": name, "connections": len(members)}
            for name, members in group_by_server(state.entries)
        ],
        "entries": rows,
    }
