"""Apstra controller API client.

Authentication state lives in an explicit ``ApstraSession`` value passed to
every call; the client itself holds configuration only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from logging import getLogger
from typing import TYPE_CHECKING

from linkrecon.adapters.http_resilience import ResilientClient

from .query import build_connectivity_query
from .schema import BlueprintList, BlueprintSummary, LoginResponse, QueryResponse

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    import httpx

    from linkrecon.config.apstra import ApstraConfig
    from linkrecon.config.http_resilience import ResilienceConfig

log = getLogger(__name__)

AUTH_HEADER = "AuthToken"
LOGIN_PATH = "/api/aaa/login"
BLUEPRINTS_PATH = "/api/blueprints"


class ApstraAPIError(RuntimeError):
    """Raised when the Apstra API returns an unexpected response."""


class ApstraAuthenticationError(ApstraAPIError):
    """Raised when the controller rejects the configured credentials or token."""


class BlueprintNotFoundError(ApstraAPIError):
    """Raised when a blueprint id or label does not exist on the controller."""


@dataclass(slots=True, frozen=True)
class ApstraSession:
    token: str = field(repr=False)
    user_id: str | None = None

    @property
    def headers(self) -> dict[str, str]:
        return {AUTH_HEADER: self.token}


class ApstraClient:
    """Low-level HTTP client for the Apstra API."""

    def __init__(
        self,
        *,
        config: ApstraConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient

    async def query_connectivity(
        self,
        *,
        blueprint: str,
        switch_labels: Iterable[str] = (),
    ) -> QueryResponse:
        """Log in, resolve ``blueprint`` (id or label) and run the connectivity query."""

        query = build_connectivity_query(switch_labels)
        async with self._client_factory(self._resilience) as client:
            session = await self.login(client)
            summary = await self.resolve_blueprint(client, session, blueprint)
            return await self.execute_query(client, session, blueprint_id=summary.id, query=query)

    async def login(self, client: ResilientClient) -> ApstraSession:
        log.debug("Logging in to Apstra as %s", self._config.username)
        response = await client.post(
            LOGIN_PATH,
            json={"username": self._config.username, "password": self._config.password},
        )
        if response.status_code in {HTTPStatus.UNAUTHORIZED, HTTPStatus.FORBIDDEN}:
            raise ApstraAuthenticationError(
                f"Apstra rejected credentials for {self._config.username}"
            )
        response.raise_for_status()
        login = LoginResponse.model_validate(_json_object(response))
        return ApstraSession(token=login.token, user_id=login.id)

    async def list_blueprints(
        self,
        client: ResilientClient,
        session: ApstraSession,
    ) -> list[BlueprintSummary]:
        response = await client.get(BLUEPRINTS_PATH, headers=session.headers)
        _raise_for_auth(response)
        response.raise_for_status()
        return BlueprintList.model_validate(_json_object(response)).items

    async def resolve_blueprint(
        self,
        client: ResilientClient,
        session: ApstraSession,
        blueprint: str,
    ) -> BlueprintSummary:
        """Find a blueprint by id first, then by label."""

        blueprints = await self.list_blueprints(client, session)
        for summary in blueprints:
            if summary.id == blueprint:
                return summary
        for summary in blueprints:
            if summary.label == blueprint:
                return summary
        raise BlueprintNotFoundError(f"Blueprint not found: {blueprint}")

    async def execute_query(
        self,
        client: ResilientClient,
        session: ApstraSession,
        *,
        blueprint_id: str,
        query: str,
    ) -> QueryResponse:
        log.debug("Running graph query on blueprint %s: %s", blueprint_id, query)
        response = await client.post(
            f"{BLUEPRINTS_PATH}/{blueprint_id}/qe",
            json={"query": query},
            headers=session.headers,
        )
        _raise_for_auth(response)
        if response.status_code == HTTPStatus.NOT_FOUND:
            raise BlueprintNotFoundError(f"Blueprint not found: {blueprint_id}")
        if response.status_code == HTTPStatus.UNPROCESSABLE_ENTITY:
            raise ApstraAPIError(f"Apstra rejected the graph query: {response.text}")
        response.raise_for_status()
        return QueryResponse.model_validate(_json_object(response))


def _raise_for_auth(response: httpx.Response) -> None:
    if response.status_code == HTTPStatus.UNAUTHORIZED:
        raise ApstraAuthenticationError("Apstra session token was rejected")


def _json_object(response: httpx.Response) -> dict[str, object]:
    payload = response.json()
    if not isinstance(payload, dict):
        raise ApstraAPIError("Unexpected Apstra response payload")
    return payload
