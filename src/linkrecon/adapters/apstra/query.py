"""Connectivity graph query text.

The query names its nodes after the keys ``ConnectivityItem`` reads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

CONNECTIVITY_QUERY_TEMPLATE = (
    "match("
    "node('system', system_type='switch', name='switch'{switch_filter})"
    ".out('hosted_interfaces').node('interface', if_type='ethernet', name='switch_intf')"
    ".out('link').node('link', name='link1')"
    ".in_('link').node('interface', if_type='ethernet', name='server_intf')"
    ".in_('hosted_interfaces').node('system', system_type='server', name='server'), "
    "optional("
    "node(name='switch_intf').in_('composed_of')"
    ".node('interface', if_type='port_channel', name='ae1')"
    "), "
    "optional("
    "node(name='ae1').in_('composed_of')"
    ".node('interface', if_type='port_channel', name='evpn1')"
    "), "
    "optional("
    "node(name='switch_intf').in_('ep_member_of').node('ep_group')"
    ".in_('ep_affected_by').node('ep_application_instance')"
    ".out('ep_top_level').node('ep_endpoint_policy', policy_type_name='batch', name='CT')"
    ")"
    ")"
)


def quote_label(label: str) -> str:
    escaped = label.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def switch_filter(switch_labels: Iterable[str]) -> str:
    labels = sorted({label for label in switch_labels if label})
    if not labels:
        return ""
    return f", label=is_in([{', '.join(quote_label(label) for label in labels)}])"


def build_connectivity_query(switch_labels: Iterable[str] = ()) -> str:
    """Connectivity query restricted to ``switch_labels`` (all switches when empty)."""

    return CONNECTIVITY_QUERY_TEMPLATE.format(switch_filter=switch_filter(switch_labels))
