"""Public interface for the Apstra adapter."""

from __future__ import annotations

from .client import (
    ApstraAPIError,
    ApstraAuthenticationError,
    ApstraClient,
    ApstraSession,
    BlueprintNotFoundError,
)
from .fetcher import ApstraConnectivityFetcher, build_http_apstra_fetcher
from .query import build_connectivity_query
from .schema import ConnectivityItem, QueryResponse
from .translator import translate_item, translate_response

__all__ = [
    "ApstraAPIError",
    "ApstraAuthenticationError",
    "ApstraClient",
    "ApstraConnectivityFetcher",
    "ApstraSession",
    "BlueprintNotFoundError",
    "ConnectivityItem",
    "QueryResponse",
    "build_connectivity_query",
    "build_http_apstra_fetcher",
    "translate_item",
    "translate_response",
]
