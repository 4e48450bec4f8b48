from __future__ import annotations

from typing import TYPE_CHECKING

from linkrecon.adapters.report import render_report
from linkrecon.domain.reconciliation import run_pass
from tests.support.builders import make_fragment

if TYPE_CHECKING:
    from linkrecon.domain.model import NetworkConfigRecord


def test_report_lists_entries_in_presentation_order(
    sample_records: list[NetworkConfigRecord],
) -> None:
    state = run_pass(
        sample_records,
        [make_fragment(0, switch="SW2", interface="et-0/0/10", server="Web01", speed="10G")],
        blueprint="DC1",
    )

    report = render_report(state)

    assert report["blueprint"] == "DC1"
    assert report["summary"]["total"] == 4
    entries = report["entries"]
    assert [row["index"] for row in entries] == [0, 1, 2, 3]
    assert [row["record"]["server_label"] for row in entries] == ["App01", "App01", "Db01", "Web01"]
    web = entries[3]
    assert web["status"] == "partial_match"
    assert web["fields"]["link_speed"] == {"status": "conflict", "input": "25GB", "fetched": "10G"}
    assert report["servers"] == [
        {"server": "App01", "connections": 2},
        {"server": "Db01", "connections": 1},
        {"server": "Web01", "connections": 1},
    ]
