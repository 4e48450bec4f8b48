"""Fake Apstra controller endpoints served through httpx.MockTransport."""

from __future__ import annotations

import json
from collections.abc import Callable  # noqa: TC003

import httpx

from linkrecon.adapters.http_resilience import ResilienceConfig, ResilientClient

BASE_URL = "https://apstra.test"

type Handler = Callable[[httpx.Request], httpx.Response]


def make_client_factory(
    handler: Handler,
) -> Callable[[ResilienceConfig], ResilientClient]:
    async def async_handler(request: httpx.Request) -> httpx.Response:
        return handler(request)

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        client = ResilientClient(resilience)
        client._client = httpx.AsyncClient(  # noqa: SLF001  # type: ignore[reportPrivateUsage]
            base_url=resilience.base_url or "",
            transport=httpx.MockTransport(async_handler),
        )
        return client

    return factory


class FakeController:
    """In-memory Apstra endpoints recording every request."""

    def __init__(self, items: list[dict[str, object]] | None = None) -> None:
        self.items = items if items is not None else []
        self.requests: list[httpx.Request] = []
        self.login_status = 201
        self.query_status = 200
        self.query_payload: object = None
        self.blueprints = [{"id": "bp-1", "label": "DC1"}, {"id": "bp-2", "label": "DC2"}]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if request.method == "POST" and path == "/api/aaa/login":
            if self.login_status != 201:
                return httpx.Response(self.login_status, json={"errors": "bad credentials"})
            return httpx.Response(201, json={"token": "tok-123", "id": "user-1"})
        if request.headers.get("AuthToken") != "tok-123":
            return httpx.Response(401, json={"errors": "missing token"})
        if request.method == "GET" and path == "/api/blueprints":
            return httpx.Response(200, json={"items": self.blueprints})
        if request.method == "POST" and path.endswith("/qe"):
            if self.query_status != 200:
                return httpx.Response(self.query_status, json={"errors": "rejected"})
            payload = self.query_payload
            if payload is None:
                payload = {"items": self.items, "count": len(self.items)}
            return httpx.Response(200, json=payload)
        return httpx.Response(404, json={"errors": "not found"})

    def query_text(self) -> str:
        for request in self.requests:
            if request.url.path.endswith("/qe"):
                return json.loads(request.content)["query"]
        raise AssertionError("no query was sent")


