"""Connection entries holding paired input and fetched values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .enums import EntrySource, FieldName
from .keys import ConnectionKey  # noqa: TC001


@dataclass(slots=True, kw_only=True)
class PairedValue[T]:
    """One attribute as supplied by each source; ``None`` means never supplied."""

    value_from_input: T | None = None
    value_from_fetched: T | None = None

    @property
    def preferred(self) -> T | None:
        if self.value_from_input is not None:
            return self.value_from_input
        return self.value_from_fetched


@dataclass(slots=True, kw_only=True)
class EntryMetadata:
    source: EntrySource
    blueprint: str | None = None
    comment: str | None = None
    server_tags: str | None = None
    switch_tags: str | None = None
    link_tags: str | None = None
    link_group_tags: str | None = None
    lag_name_generated: bool = False
    fragment_count: int = 0


@dataclass(slots=True, kw_only=True)
class ConnectionEntry:
    key: ConnectionKey
    switch_name: str | None
    switch_interface: str | None
    metadata: EntryMetadata
    server_name: PairedValue[str] = field(default_factory=PairedValue)
    server_interface: PairedValue[str] = field(default_factory=PairedValue)
    link_speed: PairedValue[str] = field(default_factory=PairedValue)
    lag_name: PairedValue[str] = field(default_factory=PairedValue)
    lag_mode: PairedValue[str] = field(default_factory=PairedValue)
    ct_names: PairedValue[str] = field(default_factory=PairedValue)
    is_external: PairedValue[bool] = field(default_factory=PairedValue)

    @property
    def is_incomplete(self) -> bool:
        return not self.key.is_complete

    @property
    def source(self) -> EntrySource:
        return self.metadata.source

    def paired(self, name: FieldName) -> PairedValue[str] | PairedValue[bool]:
        return getattr(self, name.value)

    @property
    def server_display_name(self) -> str | None:
        return self.server_name.preferred


type EntriesByKey = dict[ConnectionKey, ConnectionEntry]
