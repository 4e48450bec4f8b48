"""Apstra implementation of the connectivity fetch port."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from linkrecon.config import get_apstra_config
from linkrecon.domain.ports.fetching import ConnectivityFetchFailure, ConnectivityFetchSuccess

from .client import ApstraAPIError, ApstraClient
from .translator import translate_response

if TYPE_CHECKING:
    from collections.abc import Sequence

    from linkrecon.config.apstra import ApstraConfig
    from linkrecon.domain.ports.fetching import ConnectivityFetchResult

log = getLogger(__name__)


class ApstraConnectivityFetcher:
    """Fetch connectivity and report every failure as a value, never a raise."""

    def __init__(self, client: ApstraClient) -> None:
        self._client = client

    async def __call__(
        self,
        *,
        blueprint: str,
        switch_labels: Sequence[str],
    ) -> ConnectivityFetchResult:
        try:
            response = await self._client.query_connectivity(
                blueprint=blueprint,
                switch_labels=switch_labels,
            )
        except httpx.TimeoutException as exc:
            log.warning("Apstra query timed out for blueprint %s: %s", blueprint, exc)
            return ConnectivityFetchFailure(f"Timed out querying blueprint {blueprint}")
        except httpx.HTTPError as exc:
            log.warning("Apstra request failed for blueprint %s: %s", blueprint, exc)
            return ConnectivityFetchFailure(f"Request to controller failed: {exc}")
        except ApstraAPIError as exc:
            log.warning("Apstra API error for blueprint %s: %s", blueprint, exc)
            return ConnectivityFetchFailure(str(exc))
        except ValidationError as exc:
            log.warning("Malformed Apstra response for blueprint %s: %s", blueprint, exc)
            return ConnectivityFetchFailure(
                f"Malformed controller response ({exc.error_count()} error(s))"
            )
        except ValueError as exc:
            log.warning("Undecodable Apstra response for blueprint %s: %s", blueprint, exc)
            return ConnectivityFetchFailure("Controller response was not valid JSON")

        fragments = translate_response(response)
        log.info(
            "Fetched %s connectivity row(s) for blueprint %s (switches: %s)",
            len(fragments),
            blueprint,
            ", ".join(switch_labels) or "all",
        )
        return ConnectivityFetchSuccess(fragments=fragments)


def build_http_apstra_fetcher(config: ApstraConfig | None = None) -> ApstraConnectivityFetcher:
    return ApstraConnectivityFetcher(ApstraClient(config=config or get_apstra_config()))
