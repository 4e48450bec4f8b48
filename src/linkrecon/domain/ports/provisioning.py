"""Port for submitting selected records to provisioning."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from linkrecon.domain.model import NetworkConfigRecord


@dataclass(slots=True, frozen=True)
class ProvisioningOutcome:
    record: NetworkConfigRecord
    succeeded: bool
    message: str | None = None


class ProvisioningSink(Protocol):
    def __call__(self, records: Sequence[NetworkConfigRecord]) -> list[ProvisioningOutcome]: ...


__all__ = ["ProvisioningOutcome", "ProvisioningSink"]
