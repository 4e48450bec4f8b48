from __future__ import annotations

from linkrecon.domain.model import ConnectionKey


def test_full_key_when_all_parts_present() -> None:
    key = ConnectionKey.derive(
        switch_name=" SW1 ",
        server_name="Web01",
        switch_interface="et-0/0/1",
        ordinal=4,
    )

    assert key == ConnectionKey.full("SW1", "Web01", "et-0/0/1")
    assert key.is_complete
    assert key.ordinal is None


def test_keys_are_case_sensitive() -> None:
    assert ConnectionKey.full("SW1", "web01", "eth1") != ConnectionKey.full("SW1", "Web01", "eth1")


def test_separator_characters_do_not_collide() -> None:
    first = ConnectionKey.full("SW-1", "A", "eth1")
    second = ConnectionKey.full("SW", "1-A", "eth1")

    assert first != second
    assert len({first, second}) == 2


def test_incomplete_key_carries_ordinal() -> None:
    first = ConnectionKey.derive(
        switch_name="", server_name="Web01", switch_interface="eth1", ordinal=0
    )
    second = ConnectionKey.derive(
        switch_name=None, server_name="Web01", switch_interface="eth1", ordinal=1
    )

    assert not first.is_complete
    assert first.switch_name == ""
    assert first != second


def test_missing_interface_is_incomplete() -> None:
    key = ConnectionKey.derive(
        switch_name="SW1", server_name="Web01", switch_interface=" ", ordinal=2
    )

    assert not key.is_complete
    assert key.ordinal == 2
