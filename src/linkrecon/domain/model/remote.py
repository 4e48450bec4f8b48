"""Remote connectivity fragments as seen by the domain.

Adapters translate controller query rows into these shapes; any nested part
may be missing because the controller returns partial objects per row.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True, kw_only=True)
class RemoteNode:
    label: str | None = None
    hostname: str | None = None

    @property
    def display_name(self) -> str | None:
        return self.label or self.hostname


@dataclass(slots=True, frozen=True, kw_only=True)
class RemoteInterface:
    if_name: str | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class RemoteLink:
    speed: str | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class RemoteLag:
    if_name: str | None = None
    lag_mode: str | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class RemoteFragment:
    """One item of a connectivity query result, before consolidation."""

    arrival_index: int
    switch: RemoteNode | None = None
    server: RemoteNode | None = None
    switch_interface: RemoteInterface | None = None
    server_interface: RemoteInterface | None = None
    link: RemoteLink | None = None
    lag: RemoteLag | None = None
    ct_names: str | None = None
    is_external: bool | str | None = None
