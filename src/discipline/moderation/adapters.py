"""Capability adapters.

Each adapter knows one way of restricting a member and how to tell whether the
current backend connection offers it. Backends advertise capabilities by
implementing the protocols below.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable

from ..constants import MS_PER_SECOND


@runtime_checkable
class GuildMuteBackend(Protocol):
    """Unified high-level mute; duration in milliseconds."""

    async def mute_guild_member(self, guild_id: str, user_id: str, duration_ms: int) -> None:
        ...


@runtime_checkable
class GroupBanBackend(Protocol):
    """Legacy flat group-ban API; duration in whole seconds."""

    async def set_group_ban(self, group_id: str, user_id: str, duration_seconds: int) -> None:
        ...


def ms_to_seconds(duration_ms: int) -> int:
    return int(duration_ms) // MS_PER_SECOND


class CapabilityAdapter(ABC):
    """One backend means of performing a restriction."""

    name: str = ""

    @abstractmethod
    def probe(self, connection: Any) -> bool:
        """Whether this adapter can be used against ``connection`` right now."""

    @abstractmethod
    async def invoke(self, connection: Any, scope_id: str, target_id: str, duration_ms: int) -> None:
        """Apply the restriction. Raises on backend failure."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"


class GuildMuteAdapter(CapabilityAdapter):
    name = "guild_mute"

    def probe(self, connection: Any) -> bool:
        return isinstance(connection, GuildMuteBackend)

    async def invoke(self, connection: Any, scope_id: str, target_id: str, duration_ms: int) -> None:
        await connection.mute_guild_member(scope_id, target_id, duration_ms)


class GroupBanAdapter(CapabilityAdapter):
    name = "group_ban"

    def probe(self, connection: Any) -> bool:
        return isinstance(connection, GroupBanBackend)

    async def invoke(self, connection: Any, scope_id: str, target_id: str, duration_ms: int) -> None:
        await connection.set_group_ban(scope_id, target_id, ms_to_seconds(duration_ms))


class InternalGroupBanAdapter(CapabilityAdapter):
    """Same contract as ``GroupBanAdapter`` but reached through ``connection.internal``."""

    name = "internal_group_ban"

    def probe(self, connection: Any) -> bool:
        return isinstance(getattr(connection, "internal", None), GroupBanBackend)

    async def invoke(self, connection: Any, scope_id: str, target_id: str, duration_ms: int) -> None:
        await connection.internal.set_group_ban(scope_id, target_id, ms_to_seconds(duration_ms))


def default_adapters() -> tuple[CapabilityAdapter, ...]:
    """The reference adapters in priority order."""
    return (GuildMuteAdapter(), GroupBanAdapter(), InternalGroupBanAdapter())
