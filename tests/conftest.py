from __future__ import annotations

import pytest

from linkrecon.domain.model import NetworkConfigRecord


@pytest.fixture
def sample_records() -> list[NetworkConfigRecord]:
    """Three servers across two switches, one LACP pair without a LAG name."""

    return [
        NetworkConfigRecord(
            blueprint="DC1",
            server_label="Web01",
            server_ifname="ens1f0",
            switch_label="SW2",
            switch_ifname="et-0/0/10",
            link_speed="25GB",
            link_group_ct_names="Web_CT",
            is_external="no",
            comment="rack A",
        ),
        NetworkConfigRecord(
            blueprint="DC1",
            server_label="App01",
            server_ifname="ens1f0",
            switch_label="SW1",
            switch_ifname="et-0/0/2",
            link_speed="10G",
            link_group_lag_mode="yes",
        ),
        NetworkConfigRecord(
            blueprint="DC1",
            server_label="App01",
            server_ifname="ens1f1",
            switch_label="SW2",
            switch_ifname="et-0/0/2",
            link_speed="10G",
            link_group_lag_mode="lacp_active",
        ),
        NetworkConfigRecord(
            blueprint="DC1",
            server_label="Db01",
            server_ifname="eno1",
            switch_label="SW1",
            switch_ifname="et-0/0/5",
            link_speed="100 Gbps",
            link_group_ifname="ae5",
            link_group_lag_mode="static",
            is_external="Y",
        ),
    ]
