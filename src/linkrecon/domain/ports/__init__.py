"""Ports the reconciliation core depends on."""

from __future__ import annotations

from .fetching import (
    ConnectivityFetcher,
    ConnectivityFetchFailure,
    ConnectivityFetchResult,
    ConnectivityFetchSuccess,
)
from .provisioning import ProvisioningOutcome, ProvisioningSink

__all__ = [
    "ConnectivityFetchFailure",
    "ConnectivityFetchResult",
    "ConnectivityFetchSuccess",
    "ConnectivityFetcher",
    "ProvisioningOutcome",
    "ProvisioningSink",
]
