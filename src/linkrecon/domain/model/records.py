"""Flat network-configuration record shared with the spreadsheet and provisioning steps."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(slots=True, kw_only=True)
class NetworkConfigRecord:
    blueprint: str | None = None
    server_label: str | None = None
    server_ifname: str | None = None
    switch_label: str | None = None
    switch_ifname: str | None = None
    link_speed: str | None = None
    link_group_ifname: str | None = None
    link_group_lag_mode: str | None = None
    link_group_ct_names: str | None = None
    link_group_tags: str | None = None
    is_external: bool | str | None = None
    server_tags: str | None = None
    switch_tags: str | None = None
    link_tags: str | None = None
    comment: str | None = None

    def as_dict(self) -> dict[str, object]:
        return {field.name: getattr(self, field.name) for field in fields(self)}


RECORD_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(NetworkConfigRecord))
