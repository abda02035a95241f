"""Tests for the reference capability adapters and the Discord backend."""

from datetime import timedelta

import pytest

from discipline.constants import MS_PER_HOUR
from discipline.moderation.adapters import (
    GroupBanAdapter,
    GuildMuteAdapter,
    InternalGroupBanAdapter,
    ms_to_seconds,
)
from discipline.moderation.discord_backend import DiscordGuildMuteBackend
from discipline.moderation.executor import EnforcementExecutor
from discipline.moderation.models import Enforce, Failed, Succeeded, Tier, Unsupported
from discipline.testing.fakes import (
    BareBackend,
    FakeClient,
    FakeGroupBanBackend,
    FakeGuild,
    FakeGuildMuteBackend,
    FakeInternalOnlyBackend,
    FakeUser,
)

ONE_HOUR = Enforce(MS_PER_HOUR, Tier.LOW)


class TestProbes:
    def test_guild_mute_probe(self):
        adapter = GuildMuteAdapter()
        assert adapter.probe(FakeGuildMuteBackend())
        assert not adapter.probe(FakeGroupBanBackend())
        assert not adapter.probe(BareBackend())

    def test_group_ban_probe(self):
        adapter = GroupBanAdapter()
        assert adapter.probe(FakeGroupBanBackend())
        assert not adapter.probe(FakeInternalOnlyBackend())

    def test_internal_probe(self):
        adapter = InternalGroupBanAdapter()
        assert adapter.probe(FakeInternalOnlyBackend())
        assert not adapter.probe(FakeGroupBanBackend())
        assert not adapter.probe(BareBackend())


class TestUnits:
    def test_ms_to_seconds_truncates(self):
        assert ms_to_seconds(3_600_000) == 3600
        assert ms_to_seconds(1999) == 1

    @pytest.mark.asyncio
    async def test_guild_mute_keeps_milliseconds(self):
        backend = FakeGuildMuteBackend()
        result = await EnforcementExecutor(backend).enforce("g", "u", ONE_HOUR)
        assert result == Succeeded(MS_PER_HOUR, "guild_mute")
        assert backend.calls == [("g", "u", MS_PER_HOUR)]

    @pytest.mark.asyncio
    async def test_group_ban_gets_seconds(self):
        backend = FakeGroupBanBackend()
        result = await EnforcementExecutor(backend).enforce("g", "u", ONE_HOUR)
        assert result == Succeeded(MS_PER_HOUR, "group_ban")
        assert backend.calls == [("g", "u", 3600)]

    @pytest.mark.asyncio
    async def test_internal_group_ban_gets_seconds(self):
        backend = FakeInternalOnlyBackend()
        result = await EnforcementExecutor(backend).enforce("g", "u", ONE_HOUR)
        assert result == Succeeded(MS_PER_HOUR, "internal_group_ban")
        assert backend.internal.calls == [("g", "u", 3600)]

    @pytest.mark.asyncio
    async def test_bare_backend_is_unsupported(self):
        assert await EnforcementExecutor(BareBackend()).enforce("g", "u", ONE_HOUR) == Unsupported()


class TestDiscordBackend:
    @pytest.mark.asyncio
    async def test_times_out_cached_member(self):
        member = FakeUser(id=42)
        client = FakeClient([FakeGuild(id=7, members=[member])])
        backend = DiscordGuildMuteBackend(client)  # type: ignore[arg-type]

        result = await EnforcementExecutor(backend).enforce("7", "42", ONE_HOUR)

        assert result == Succeeded(MS_PER_HOUR, "guild_mute")
        assert member.timeouts == [(timedelta(hours=1), "惩戒")]

    @pytest.mark.asyncio
    async def test_fetches_uncached_member(self):
        guild = FakeGuild(id=7)
        backend = DiscordGuildMuteBackend(FakeClient([guild]))  # type: ignore[arg-type]

        await backend.mute_guild_member("7", "99", MS_PER_HOUR)

        assert guild.fetched == [99]
        assert guild.get_member(99).timeouts == [(timedelta(hours=1), "惩戒")]

    @pytest.mark.asyncio
    async def test_unknown_guild_is_reported_as_failure(self):
        backend = DiscordGuildMuteBackend(FakeClient())  # type: ignore[arg-type]
        result = await EnforcementExecutor(backend).enforce("7", "42", ONE_HOUR)
        assert isinstance(result, Failed)
        assert result.adapter_name == "guild_mute"
        assert result.cause.error_type == "LookupError"

    @pytest.mark.asyncio
    async def test_rejects_timeout_beyond_discord_limit(self):
        backend = DiscordGuildMuteBackend(FakeClient([FakeGuild(id=7)]))  # type: ignore[arg-type]
        with pytest.raises(ValueError):
            await backend.mute_guild_member("7", "42", 29 * 24 * MS_PER_HOUR)
