from __future__ import annotations

from linkrecon.adapters.apstra import build_connectivity_query
from linkrecon.adapters.apstra.query import quote_label, switch_filter


def test_switch_filter_is_sorted_and_deduplicated() -> None:
    assert switch_filter(["SW2", "SW1", "SW2", ""]) == ", label=is_in(['SW1', 'SW2'])"


def test_switch_filter_empty_without_labels() -> None:
    assert switch_filter([]) == ""


def test_quote_label_escapes_quotes() -> None:
    assert quote_label("rack'1") == "'rack\\'1'"


def test_query_names_the_nodes_items_are_read_from() -> None:
    query = build_connectivity_query(["SW1"])

    for name in ("switch", "switch_intf", "link1", "server_intf", "server", "ae1", "CT"):
        assert f"name='{name}'" in query
    assert "name='switch', label=is_in(['SW1'])" in query
