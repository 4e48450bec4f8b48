"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class EntrySource(StrEnum):
    """Which sources have contributed data to a connection entry."""

    INPUT = "input"
    FETCHED = "fetched"
    BOTH = "both"


class FieldName(StrEnum):
    """Comparable attributes of a connection entry."""

    SERVER_NAME = "server_name"
    SERVER_INTERFACE = "server_interface"
    LINK_SPEED = "link_speed"
    LAG_NAME = "lag_name"
    LAG_MODE = "lag_mode"
    CT_NAMES = "ct_names"
    IS_EXTERNAL = "is_external"
