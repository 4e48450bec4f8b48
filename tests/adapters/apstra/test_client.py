from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import pytest

from linkrecon.adapters.apstra import (
    ApstraAPIError,
    ApstraAuthenticationError,
    ApstraClient,
    BlueprintNotFoundError,
)
from tests.support.apstra import make_client_factory

if TYPE_CHECKING:
    from linkrecon.config import ApstraConfig
    from tests.support.apstra import FakeController


def test_query_connectivity_logs_in_resolves_label_and_queries(
    apstra_client: ApstraClient,
    controller: FakeController,
) -> None:
    response = asyncio.run(
        apstra_client.query_connectivity(blueprint="DC1", switch_labels=["SW2", "SW1"])
    )

    assert response.count == 3
    assert len(response.items) == 3
    assert response.items[0].connectivity_template is not None
    assert response.items[0].connectivity_template.label == "Web_CT"
    paths = [(request.method, request.url.path) for request in controller.requests]
    assert paths == [
        ("POST", "/api/aaa/login"),
        ("GET", "/api/blueprints"),
        ("POST", "/api/blueprints/bp-1/qe"),
    ]
    assert "label=is_in(['SW1', 'SW2'])" in controller.query_text()


def test_blueprint_id_is_accepted(
    apstra_client: ApstraClient,
    controller: FakeController,
) -> None:
    asyncio.run(apstra_client.query_connectivity(blueprint="bp-2"))

    assert controller.requests[-1].url.path == "/api/blueprints/bp-2/qe"
    assert "is_in" not in controller.query_text()


def test_login_rejection_raises_authentication_error(
    apstra_client: ApstraClient,
    controller: FakeController,
) -> None:
    controller.login_status = 401

    with pytest.raises(ApstraAuthenticationError):
        asyncio.run(apstra_client.query_connectivity(blueprint="DC1"))

    assert len(controller.requests) == 1


def test_unknown_blueprint_raises(apstra_client: ApstraClient) -> None:
    with pytest.raises(BlueprintNotFoundError, match="DC9"):
        asyncio.run(apstra_client.query_connectivity(blueprint="DC9"))


def test_missing_blueprint_on_query_raises(
    apstra_client: ApstraClient,
    controller: FakeController,
) -> None:
    controller.query_status = 404

    with pytest.raises(BlueprintNotFoundError):
        asyncio.run(apstra_client.query_connectivity(blueprint="DC1"))


def test_rejected_query_raises_api_error(
    apstra_client: ApstraClient,
    controller: FakeController,
) -> None:
    controller.query_status = 422

    with pytest.raises(ApstraAPIError, match="rejected the graph query"):
        asyncio.run(apstra_client.query_connectivity(blueprint="DC1"))


def test_non_object_payload_raises(
    apstra_client: ApstraClient,
    controller: FakeController,
) -> None:
    controller.query_payload = ["not", "an", "object"]

    with pytest.raises(ApstraAPIError, match="Unexpected"):
        asyncio.run(apstra_client.query_connectivity(blueprint="DC1"))


def test_session_token_is_sent_on_every_call(
    apstra_config: ApstraConfig,
    controller: FakeController,
) -> None:
    client = ApstraClient(config=apstra_config, client_factory=make_client_factory(controller))

    asyncio.run(client.query_connectivity(blueprint="DC1"))

    login, *authenticated = controller.requests
    assert "AuthToken" not in login.headers
    assert all(request.headers["AuthToken"] == "tok-123" for request in authenticated)
