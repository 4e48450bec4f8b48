"""Connection domain model."""

from __future__ import annotations

from .entries import ConnectionEntry, EntriesByKey, EntryMetadata, PairedValue
from .enums import EntrySource, FieldName
from .keys import ConnectionKey, ServerKey
from .records import RECORD_FIELDS, NetworkConfigRecord
from .remote import RemoteFragment, RemoteInterface, RemoteLag, RemoteLink, RemoteNode

__all__ = [
    "RECORD_FIELDS",
    "ConnectionEntry",
    "ConnectionKey",
    "EntriesByKey",
    "EntryMetadata",
    "EntrySource",
    "FieldName",
    "NetworkConfigRecord",
    "PairedValue",
    "RemoteFragment",
    "RemoteInterface",
    "RemoteLag",
    "RemoteLink",
    "RemoteNode",
    "ServerKey",
]
