"""JSON record files: input snapshots from the spreadsheet pipeline and provisioning output."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, ClassVar

from pydantic import BaseModel, ConfigDict, TypeAdapter

from linkrecon.domain.model import NetworkConfigRecord
from linkrecon.domain.ports.provisioning import ProvisioningOutcome

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

log = logging.getLogger(__name__)


class RecordFileError(ValueError):
    """Raised when a record file does not contain a list of records."""


class RecordPayload(BaseModel):
    model_config = ConfigDict(extra="allow")
    _logged_extra_keys: ClassVar[set[str]] = set()

    blueprint: str | int | float | None = None
    server_label: str | int | float | None = None
    server_ifname: str | int | float | None = None
    switch_label: str | int | float | None = None
    switch_ifname: str | int | float | None = None
    link_speed: str | int | float | None = None
    link_group_ifname: str | int | float | None = None
    link_group_lag_mode: str | int | float | None = None
    link_group_ct_names: str | int | float | None = None
    link_group_tags: str | int | float | None = None
    is_external: bool | str | int | float | None = None
    server_tags: str | int | float | None = None
    switch_tags: str | int | float | None = None
    link_tags: str | int | float | None = None
    comment: str | int | float | None = None

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.warning("Record file: ignoring unknown columns: %s", ", ".join(sorted(new_keys)))

    def to_record(self) -> NetworkConfigRecord:
        values = self.model_dump(exclude={*(self.__pydantic_extra__ or {})})
        is_external = values.pop("is_external")
        return NetworkConfigRecord(
            **{name: _text(value) for name, value in values.items()},
            is_external=is_external if isinstance(is_external, bool) else _text(is_external),
        )


def _text(value: object) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


_PAYLOADS = TypeAdapter(list[RecordPayload])


def parse_records(payload: object) -> list[NetworkConfigRecord]:
    """Validate a decoded JSON document: a list of records or ``{"records": [...]}``."""

    if isinstance(payload, dict) and "records" in payload:
        payload = payload["records"]
    if not isinstance(payload, list):
        raise RecordFileError("Expected a JSON list of network-configuration records")
    return [item.to_record() for item in _PAYLOADS.validate_python(payload)]


def load_records(path: Path) -> list[NetworkConfigRecord]:
    with path.open(encoding="utf-8") as handle:
        records = parse_records(json.load(handle))
    log.info("Loaded %s record(s) from %s", len(records), path)
    return records


def write_json(path: Path, document: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(document, handle, indent=2)
        handle.write("\n")


class JsonFileProvisioningSink:
    """Provisioning sink that hands selected records over as a JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def __call__(self, records: Sequence[NetworkConfigRecord]) -> list[ProvisioningOutcome]:
        write_json(self._path, [record.as_dict() for record in records])
        log.info("Wrote %s record(s) for provisioning to %s", len(records), self._path)
        return [
            ProvisioningOutcome(record=record, succeeded=True, message=str(self._path))
            for record in records
        ]
