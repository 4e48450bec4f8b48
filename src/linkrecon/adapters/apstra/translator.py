"""Translate Apstra connectivity rows into domain fragments.

Each row names its interfaces and LAG objects differently depending on the
query flavor; the first populated alias wins.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from linkrecon.domain.model import (
    RemoteFragment,
    RemoteInterface,
    RemoteLag,
    RemoteLink,
    RemoteNode,
)
from linkrecon.domain.parsing import clean_text, merge_name_lists

if TYPE_CHECKING:
    from .schema import ApstraInterface, ApstraNode, ConnectivityItem, QueryResponse


def translate_item(item: ConnectivityItem, *, arrival_index: int) -> RemoteFragment:
    return RemoteFragment(
        arrival_index=arrival_index,
        switch=_node(item.switch),
        server=_node(item.server),
        switch_interface=_interface(item.switch_intf, item.intf1),
        server_interface=_interface(item.server_intf, item.intf2),
        link=RemoteLink(speed=clean_text(item.link1.speed)) if item.link1 else None,
        lag=_lag(item),
        ct_names=_ct_names(item),
        is_external=item.is_external,
    )


def translate_response(response: QueryResponse) -> list[RemoteFragment]:
    """Fragments in the order the controller returned them."""

    return [
        translate_item(item, arrival_index=index) for index, item in enumerate(response.items)
    ]


def _node(node: ApstraNode | None) -> RemoteNode | None:
    if node is None:
        return None
    return RemoteNode(label=clean_text(node.label), hostname=clean_text(node.hostname))


def _interface(*candidates: ApstraInterface | None) -> RemoteInterface | None:
    for candidate in candidates:
        if candidate is not None and clean_text(candidate.if_name) is not None:
            return RemoteInterface(if_name=clean_text(candidate.if_name))
    return None


def _lag(item: ConnectivityItem) -> RemoteLag | None:
    name = None
    if item.ae1 is not None:
        name = clean_text(item.ae1.if_name)
    if name is None and item.ae_interface is not None:
        name = clean_text(item.ae_interface.name) or clean_text(item.ae_interface.if_name)
    mode = clean_text(item.evpn1.lag_mode) if item.evpn1 else None
    mode = mode or clean_text(item.lag_mode)
    if name is None and mode is None:
        return None
    return RemoteLag(if_name=name, lag_mode=mode)


def _ct_names(item: ConnectivityItem) -> str | None:
    names: list[object] = [item.ct_names]
    if isinstance(item.ct_names, list):
        names = list(item.ct_names)
    template = item.connectivity_template.label if item.connectivity_template else None
    return merge_name_lists([*names, template])
