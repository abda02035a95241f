from __future__ import annotations

import logging

import discord
from discord import app_commands
from discord.ext import commands

from .constants import ERROR_MESSAGES
from .utils import error_embed, safe_response

log = logging.getLogger("discipline.error_handlers")


def unexpected_error_message(error: BaseException) -> str:
    """``执行失败：<message>`` using the wrapped exception when there is one."""
    original = getattr(error, "original", None) or error
    return ERROR_MESSAGES["unexpected"].format(str(original) or ERROR_MESSAGES["unknown_error"])


class ErrorHandler(commands.Cog):
    """Centralized error handling for the bot."""

    def __init__(self, bot: commands.Bot) -> None:
        self.bot = bot
        self._previous_tree_error = None

    async def cog_load(self) -> None:
        # App command errors are dispatched through the tree, not as a bot event.
        self._previous_tree_error = self.bot.tree.on_error
        self.bot.tree.on_error = self.on_app_command_error

    async def cog_unload(self) -> None:
        if self._previous_tree_error is not None:
            self.bot.tree.on_error = self._previous_tree_error

    @commands.Cog.listener()
    async def on_command_error(self, ctx: commands.Context, error: commands.CommandError) -> None:
        if isinstance(error, commands.CommandNotFound):
            return

        if isinstance(error, commands.NoPrivateMessage):
            await safe_response(ctx, ERROR_MESSAGES["guild_only"])
            return

        if isinstance(error, (commands.MissingPermissions, commands.CheckFailure)):
            await safe_response(ctx, ERROR_MESSAGES["missing_permissions"])
            return

        if isinstance(error, (commands.BadArgument, commands.MissingRequiredArgument)):
            await safe_response(ctx, embed=error_embed(f"Invalid argument: {error}"))
            return

        log.exception("Unexpected error in command %s", ctx.command, exc_info=error)
        await safe_response(ctx, unexpected_error_message(error))

    async def on_app_command_error(self, interaction: discord.Interaction, error: app_commands.AppCommandError) -> None:
        if isinstance(error, app_commands.NoPrivateMessage):
            await safe_response(interaction, ERROR_MESSAGES["guild_only"], ephemeral=True)
            return

        if isinstance(error, (app_commands.MissingPermissions, app_commands.CheckFailure)):
            await safe_response(interaction, ERROR_MESSAGES["missing_permissions"], ephemeral=True)
            return

        log.exception("Unexpected error in app command %s", interaction.command, exc_info=error)
        await safe_response(interaction, unexpected_error_message(error), ephemeral=True)


async def setup_error_handlers(bot: commands.Bot) -> None:
    await bot.add_cog(ErrorHandler(bot))
