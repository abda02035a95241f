from __future__ import annotations

import logging
from datetime import timedelta

import discord

from ..constants import MAX_DISCORD_TIMEOUT_MS

log = logging.getLogger("discipline.moderation.discord_backend")


class DiscordGuildMuteBackend:
    """Exposes a discord.py client as a ``GuildMuteBackend``.

    A mute is a native member timeout. Ids arrive as strings from the core and
    are converted back to snowflakes here.
    """

    def __init__(self, client: discord.Client, *, reason: str = "惩戒") -> None:
        self.client = client
        self.reason = reason

    async def _resolve_member(self, guild_id: int, user_id: int) -> discord.Member:
        guild = self.client.get_guild(guild_id)
        if guild is None:
            guild = await self.client.fetch_guild(guild_id)
        member = guild.get_member(user_id)
        if member is None:
            member = await guild.fetch_member(user_id)
        return member

    async def mute_guild_member(self, guild_id: str, user_id: str, duration_ms: int) -> None:
        if duration_ms <= 0 or duration_ms > MAX_DISCORD_TIMEOUT_MS:
            raise ValueError(f"timeout of {duration_ms}ms is outside Discord's allowed range")
        member = await self._resolve_member(int(guild_id), int(user_id))
        log.debug("timing out member=%s guild=%s for %dms", member.id, guild_id, duration_ms)
        await member.timeout(timedelta(milliseconds=duration_ms), reason=self.reason)
