from __future__ import annotations

import asyncio
import logging

import discord
from discord.ext import commands

from .config import Settings
from .error_handlers import setup_error_handlers
from .moderation.discord_backend import DiscordGuildMuteBackend
from .moderation.executor import EnforcementExecutor
from .moderation.service import DisciplineService
from .moderation.trials import RandomTrialSource

log = logging.getLogger("discipline.bot")


class _CommandSyncManager:
    def __init__(self, bot: "DisciplineBot") -> None:
        self.bot = bot
        self._lock = asyncio.Lock()

    async def sync_startup(self) -> None:
        if self.bot.settings.sync_guild_id:
            await self.sync_guild(self.bot.settings.sync_guild_id)
        else:
            await self.sync_global()

    async def sync_global(self) -> None:
        async with self._lock:
            await self.bot.tree.sync()
            log.info("Commands synced globally")
            self._log_tree()

    async def sync_guild(self, guild_id: int) -> None:
        async with self._lock:
            guild = discord.Object(id=guild_id)
            self.bot.tree.copy_global_to(guild=guild)
            await self.bot.tree.sync(guild=guild)
            log.info("Commands synced to guild %d", guild_id)
            self._log_tree()

    def _log_tree(self) -> None:
        cmds = self.bot.tree.get_commands()
        log.info("Tree commands loaded: %d", len(cmds))
        for c in cmds:
            log.info(" - /%s", c.name)


class DisciplineBot(commands.Bot):
    def __init__(self, settings: Settings) -> None:
        intents = discord.Intents.default()
        intents.members = True
        intents.message_content = bool(settings.message_content_intent)

        log.info("INTENTS: guilds=%s members=%s message_content=%s", intents.guilds, intents.members, intents.message_content)

        super().__init__(
            command_prefix=commands.when_mentioned_or(settings.command_prefix),
            intents=intents,
            allowed_mentions=discord.AllowedMentions(everyone=False, roles=False, users=True),
            help_command=None,
        )

        self.settings = settings
        self.mute_backend = DiscordGuildMuteBackend(self)
        self.discipline_service = DisciplineService(
            RandomTrialSource(),
            EnforcementExecutor(self.mute_backend, timeout=settings.enforcement_timeout_seconds),
        )
        self._sync_mgr = _CommandSyncManager(self)

    async def setup_hook(self) -> None:
        await setup_error_handlers(self)

        loaded: list[str] = []
        failed: list[str] = []

        # Cogs are loaded defensively so one bad cog cannot prevent command registration.
        async def _load_cog(import_path: str, class_name: str) -> None:
            try:
                log.info("Loading cog: %s.%s", import_path, class_name)
                mod = __import__(import_path, fromlist=[class_name])
                cls = getattr(mod, class_name)
                await self.add_cog(cls(self))
                loaded.append(f"{import_path}.{class_name}")
            except (ModuleNotFoundError, AttributeError) as e:
                log.error("Cog %s.%s not found: %s", import_path, class_name, e)
                failed.append(f"{import_path}.{class_name} ({type(e).__name__})")
            except Exception as e:
                log.exception("Failed to load cog: %s.%s", import_path, class_name)
                failed.append(f"{import_path}.{class_name} ({type(e).__name__})")

        await _load_cog("discipline.cogs.discipline", "DisciplineCog")

        if self.settings.prefix_commands_enabled and not self.intents.message_content:
            log.warning("PREFIX_COMMANDS_ENABLED but message_content intent is disabled; prefix commands will remain unavailable")
        elif self.settings.prefix_commands_enabled:
            await _load_cog("discipline.cogs.discipline", "DisciplinePrefixCog")

        if not self.settings.admin_user_ids:
            log.warning("ADMIN_USER_IDS is empty; nobody can use the discipline command")

        log.info("Startup cog load summary: loaded=%d failed=%d", len(loaded), len(failed))
        for name in failed:
            log.warning("Startup cog failed: %s", name)
        await self._sync_mgr.sync_startup()
        log.info("Command sync complete")

    async def on_ready(self) -> None:
        log.info("Logged in as %s (%s) in %d guilds", self.user, getattr(self.user, "id", "?"), len(self.guilds))
