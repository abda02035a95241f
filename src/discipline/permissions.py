from __future__ import annotations

import logging

import discord
from discord import app_commands
from discord.ext import commands

log = logging.getLogger("discipline.permissions")


def is_discipline_admin(user_id: int, admin_user_ids: frozenset[int]) -> bool:
    """Only explicitly configured users may discipline others."""
    return int(user_id) in admin_user_ids


def _allowed(client: discord.Client, user: discord.abc.User, command_name: str) -> bool:
    settings = getattr(client, "settings", None)
    admin_ids = getattr(settings, "admin_user_ids", frozenset())
    if is_discipline_admin(user.id, admin_ids):
        return True
    log.warning("Permission denied: %s (%s) tried to use %s", user, user.id, command_name)
    return False


def discipline_admin():
    """Prefix-command check; failures surface as ``commands.CheckFailure``."""
    async def predicate(ctx: commands.Context) -> bool:
        return _allowed(ctx.bot, ctx.author, getattr(ctx.command, "qualified_name", "?"))

    return commands.check(predicate)


def discipline_admin_app():
    """Slash-command check; failures surface as ``app_commands.CheckFailure``."""
    def predicate(interaction: discord.Interaction) -> bool:
        return _allowed(interaction.client, interaction.user, getattr(interaction.command, "qualified_name", "?"))

    return app_commands.check(predicate)
