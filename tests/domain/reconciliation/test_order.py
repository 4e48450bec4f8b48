from __future__ import annotations

from itertools import permutations
from typing import TYPE_CHECKING

import pytest

from linkrecon.domain.reconciliation import (
    UNKNOWN_SERVER,
    group_by_server,
    merge_remote,
    normalize_records,
    order_entries,
    run_pass,
    to_record,
)
from tests.support.builders import make_fragment, make_record

if TYPE_CHECKING:
    from linkrecon.domain.model import NetworkConfigRecord


def _layout(records: list[NetworkConfigRecord]) -> list[tuple[str | None, str | None, str | None]]:
    entries = order_entries(normalize_records(records).entries.values())
    return [
        (entry.server_display_name, entry.switch_name, entry.switch_interface) for entry in entries
    ]


def test_orders_by_server_then_switch_then_interface() -> None:
    records = [
        make_record(server="Web01", switch="SW2", interface="eth1"),
        make_record(server="App01", switch="SW2", interface="eth1"),
        make_record(server="Web01", switch="SW1", interface="eth9"),
        make_record(server="Web01", switch="SW1", interface="eth3"),
    ]

    assert _layout(records) == [
        ("App01", "SW2", "eth1"),
        ("Web01", "SW1", "eth3"),
        ("Web01", "SW1", "eth9"),
        ("Web01", "SW2", "eth1"),
    ]


def test_interfaces_sort_lexically() -> None:
    records = [
        make_record(interface="eth2"),
        make_record(interface="eth10"),
    ]

    assert [item[2] for item in _layout(records)] == ["eth10", "eth2"]


def test_server_names_compare_case_sensitively() -> None:
    records = [make_record(server="alpha"), make_record(server="Beta", interface="eth2")]

    assert [item[0] for item in _layout(records)] == ["Beta", "alpha"]


def test_fetched_server_name_and_placeholder_are_used() -> None:
    records = [
        make_record(server="Web01"),
        make_record(server=None, switch="SW0", interface="eth0"),
    ]
    entries = normalize_records(records).entries
    merge_remote(entries, [make_fragment(0, switch="SW5", interface="eth5", server="Cache01")])

    ordered = order_entries(entries.values())

    assert [entry.server_display_name for entry in ordered] == ["Cache01", None, "Web01"]
    groups = group_by_server(ordered)
    assert [name for name, _members in groups] == ["Cache01", UNKNOWN_SERVER, "Web01"]


def test_order_is_identical_for_every_input_permutation(
    sample_records: list[NetworkConfigRecord],
) -> None:
    records = [*sample_records, make_record(switch=None, interface="eth7", comment="spare")]
    fragments = [
        make_fragment(0, switch="SW2", interface="et-0/0/10", server="Web01", ct="Web_CT"),
        make_fragment(1, switch="SW3", interface="eth1", server="New01"),
    ]

    expected = [to_record(entry) for entry in run_pass(records, fragments).entries]
    for permutation in permutations(records):
        state = run_pass(list(permutation), fragments)
        assert [to_record(entry) for entry in state.entries] == expected


@pytest.mark.parametrize(
    ("column", "values"),
    [
        ("link_tags", ("A", "B")),
        ("blueprint", ("DC1", "DC2")),
        ("server_tags", ("edge", "core")),
        ("link_group_tags", ("lag-a", "lag-b")),
    ],
)
def test_incomplete_rows_differing_only_in_metadata_order_stably(
    column: str,
    values: tuple[str, str],
) -> None:
    records = [make_record(switch=None, interface="eth7", **{column: value}) for value in values]

    orders = {
        tuple(getattr(entry.metadata, column) for entry in run_pass(list(permutation)).entries)
        for permutation in permutations(records)
    }

    assert orders == {tuple(sorted(values))}


def test_group_by_server_keeps_consecutive_members(
    sample_records: list[NetworkConfigRecord],
) -> None:
    ordered = run_pass(sample_records).entries

    groups = group_by_server(ordered)

    assert [(name, len(members)) for name, members in groups] == [
        ("App01", 2),
        ("Db01", 1),
        ("Web01", 1),
    ]
