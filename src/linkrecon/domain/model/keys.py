"""Value-type identities for connections."""

from __future__ import annotations

from dataclasses import dataclass

from linkrecon.domain.parsing import clean_text


@dataclass(slots=True, frozen=True)
class ConnectionKey:
    """Identity of one switch interface to server connection.

    Components are compared exactly as sourced (case-sensitive). A key built
    from a row that lacks part of its identity carries the row ordinal so that
    incomplete rows stay distinct and never join remote data.
    """

    switch_name: str
    server_name: str
    switch_interface: str
    ordinal: int | None = None

    @property
    def is_complete(self) -> bool:
        return self.ordinal is None

    @classmethod
    def full(cls, switch_name: str, server_name: str, switch_interface: str) -> ConnectionKey:
        return cls(
            switch_name=switch_name,
            server_name=server_name,
            switch_interface=switch_interface,
        )

    @classmethod
    def derive(
        cls,
        *,
        switch_name: object,
        server_name: object,
        switch_interface: object,
        ordinal: int,
    ) -> ConnectionKey:
        """Build a full key when all parts are present, else an ordinal fallback key."""

        switch = clean_text(switch_name)
        server = clean_text(server_name)
        interface = clean_text(switch_interface)
        if switch is not None and server is not None and interface is not None:
            return cls.full(switch, server, interface)
        return cls(
            switch_name=switch or "",
            server_name=server or "",
            switch_interface=interface or "",
            ordinal=ordinal,
        )


@dataclass(slots=True, frozen=True)
class ServerKey:
    """Server-only identity, used for grouping LACP links into one LAG."""

    server_name: str
