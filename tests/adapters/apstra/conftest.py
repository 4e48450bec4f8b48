from __future__ import annotations

import pytest

from linkrecon.adapters.apstra import ApstraClient
from linkrecon.adapters.http_resilience import ResilienceConfig
from linkrecon.config import ApstraConfig
from tests.support.apstra import BASE_URL, FakeController, make_client_factory


@pytest.fixture
def apstra_config() -> ApstraConfig:
    return ApstraConfig(
        base_url=BASE_URL,
        username="admin",
        password="secret",
        resilience=ResilienceConfig(name="apstra", base_url=BASE_URL, verify_tls=False),
    )


@pytest.fixture
def connectivity_items() -> list[dict[str, object]]:
    web = {
        "switch": {"id": "n-sw2", "label": "SW2", "hostname": "sw2.dc1", "role": "leaf"},
        "switch_intf": {"id": "i-1", "if_name": "et-0/0/10", "if_type": "ethernet"},
        "link1": {"id": "l-1", "speed": "25G", "role": "to_generic"},
        "server": {"id": "n-web", "label": "Web01", "system_type": "server"},
        "server_intf": {"id": "i-2", "if_name": "ens1f0"},
    }
    return [
        {**web, "CT": {"id": "ct-1", "label": "Web_CT"}},
        {**web, "CT": {"id": "ct-2", "label": "DB_CT"}},
        {
            "switch": {"label": "SW1"},
            "intf1": {"if_name": "et-0/0/2"},
            "server": {"hostname": "app01.dc1"},
            "intf2": {"if_name": "ens1f0"},
            "link1": {"speed": 10},
            "ae_interface": {"name": "ae900"},
            "lag_mode": "lacp_active",
            "ct_names": "App_CT, Mgmt_CT",
            "is_external": "yes",
        },
    ]


@pytest.fixture
def controller(connectivity_items: list[dict[str, object]]) -> FakeController:
    return FakeController(connectivity_items)


@pytest.fixture
def apstra_client(apstra_config: ApstraConfig, controller: FakeController) -> ApstraClient:
    return ApstraClient(config=apstra_config, client_factory=make_client_factory(controller))
