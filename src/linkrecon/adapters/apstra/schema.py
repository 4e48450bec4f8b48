"""Apstra response schemas for authentication, blueprints and graph queries."""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)

type ApstraId = str


class ApstraBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow")
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        # Graph nodes carry many attributes we never read.
        log.debug(
            "Apstra %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class LoginResponse(ApstraBaseModel):
    token: str
    id: ApstraId | None = None


class BlueprintSummary(ApstraBaseModel):
    id: ApstraId
    label: str | None = None
    design: str | None = None


class BlueprintList(ApstraBaseModel):
    items: list[BlueprintSummary] = Field(default_factory=list)


class ApstraNode(ApstraBaseModel):
    id: ApstraId | None = None
    type: str | None = None
    label: str | None = None
    hostname: str | None = None
    role: str | None = None
    system_type: str | None = None


class ApstraInterface(ApstraBaseModel):
    id: ApstraId | None = None
    if_name: str | None = None
    if_type: str | None = None
    name: str | None = None
    description: str | None = None


class ApstraLink(ApstraBaseModel):
    id: ApstraId | None = None
    speed: str | int | None = None
    link_type: str | None = None
    role: str | None = None


class ApstraEvpnInterface(ApstraBaseModel):
    id: ApstraId | None = None
    lag_mode: str | None = None


class ApstraConnectivityTemplate(ApstraBaseModel):
    id: ApstraId | None = None
    label: str | None = None
    policy_type_name: str | None = None


class ConnectivityItem(ApstraBaseModel):
    """One row of the connectivity graph query; keys are the query's node names."""

    switch: ApstraNode | None = None
    switch_intf: ApstraInterface | None = None
    intf1: ApstraInterface | None = None
    server: ApstraNode | None = None
    server_intf: ApstraInterface | None = None
    intf2: ApstraInterface | None = None
    link1: ApstraLink | None = None
    ae1: ApstraInterface | None = None
    ae_interface: ApstraInterface | None = None
    evpn1: ApstraEvpnInterface | None = None
    connectivity_template: ApstraConnectivityTemplate | None = Field(default=None, alias="CT")
    ct_names: str | list[str] | None = None
    lag_mode: str | None = None
    is_external: bool | str | None = None


class QueryResponse(ApstraBaseModel):
    items: list[ConnectivityItem] = Field(default_factory=list)
    count: int | None = None
