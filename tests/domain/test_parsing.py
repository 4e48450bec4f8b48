from __future__ import annotations

import pytest

from linkrecon.domain.parsing import (
    clean_text,
    merge_name_lists,
    name_set,
    normalize_speed,
    parse_bool,
    parse_lag_mode,
    split_names,
)


@pytest.mark.parametrize(
    "value",
    ["true", "TRUE", "yes", "Yes", "1", "y", "Y", " y ", True],
)
def test_parse_bool_accepts_truthy_forms(value: object) -> None:
    assert parse_bool(value) is True


@pytest.mark.parametrize(
    "value",
    ["false", "no", "N", "0", "", "   ", None, "maybe", "external", False],
)
def test_parse_bool_defaults_to_false(value: object) -> None:
    assert parse_bool(value) is False


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("25GB", "25g"),
        ("25 Gbps", "25g"),
        ("25g", "25g"),
        ("25G", "25g"),
        ("25", "25g"),
        ("100M", "100m"),
        ("100 Mbps", "100m"),
        ("1000 Mbps", "1g"),
        ("2.5G", "2.5g"),
        ("  40 gbps ", "40g"),
    ],
)
def test_normalize_speed_canonical_forms(raw: str, expected: str) -> None:
    assert normalize_speed(raw) == expected


def test_normalize_speed_keeps_unrecognized_text_lowercased() -> None:
    assert normalize_speed(" Auto ") == "auto"
    assert normalize_speed("25 furlongs") == "25 furlongs"
    assert normalize_speed(None) is None
    assert normalize_speed("  ") is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("yes", "lacp_active"),
        ("Y", "lacp_active"),
        ("TRUE", "lacp_active"),
        ("1", "lacp_active"),
        ("lacp", "lacp_active"),
        ("LACP_ACTIVE", "lacp_active"),
        ("no", "none"),
        ("0", "none"),
        ("Static", "static"),
        ("None", "none"),
        ("active-backup", "active-backup"),
        ("", None),
        (None, None),
    ],
)
def test_parse_lag_mode(raw: str | None, expected: str | None) -> None:
    assert parse_lag_mode(raw) == expected


def test_clean_text_trims_and_collapses_blank() -> None:
    assert clean_text("  SW1 ") == "SW1"
    assert clean_text("") is None
    assert clean_text(None) is None
    assert clean_text(25) == "25"


def test_split_names_drops_empties() -> None:
    assert split_names(" A , ,B,, C ") == ["A", "B", "C"]
    assert split_names(None) == []


def test_merge_name_lists_unions_in_first_seen_order() -> None:
    merged = merge_name_lists(["Web_CT", "DB_CT, Web_CT", None, "db_ct"])

    assert merged == "Web_CT,DB_CT,db_ct"


def test_merge_name_lists_returns_none_when_empty() -> None:
    assert merge_name_lists([None, "", " , "]) is None


def test_name_set_ignores_order_and_spacing() -> None:
    assert name_set("A, B") == name_set("B,A")
