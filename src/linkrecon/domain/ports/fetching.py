"""Ports for fetching remote connectivity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from linkrecon.domain.model import RemoteFragment


@dataclass(slots=True, frozen=True)
class ConnectivityFetchSuccess:
    """Complete connectivity result for one blueprint."""

    fragments: Sequence[RemoteFragment]


@dataclass(slots=True, frozen=True)
class ConnectivityFetchFailure:
    """Fetch that produced no usable result (network, authentication, malformed payload)."""

    message: str


type ConnectivityFetchResult = ConnectivityFetchSuccess | ConnectivityFetchFailure


@runtime_checkable
class ConnectivityFetcher(Protocol):
    """Callable port for fetching connectivity of a blueprint restricted to some switches."""

    async def __call__(
        self,
        *,
        blueprint: str,
        switch_labels: Sequence[str],
    ) -> ConnectivityFetchResult:
        ...


__all__ = [
    "ConnectivityFetchFailure",
    "ConnectivityFetchResult",
    "ConnectivityFetchSuccess",
    "ConnectivityFetcher",
]
