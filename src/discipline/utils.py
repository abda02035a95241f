from __future__ import annotations

import logging
from typing import Any

import discord
from discord.ext import commands

from .constants import COLORS, MAX_EMBED_DESCRIPTION, MAX_EMBED_TITLE, MAX_MESSAGE_LENGTH

log = logging.getLogger("discipline.utils")


def truncate(text: str, limit: int = MAX_MESSAGE_LENGTH) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 1] + "…"


def safe_embed(title: str, description: str, color: int = COLORS["default"]) -> discord.Embed:
    """Create an embed with safe length limits."""
    return discord.Embed(
        title=truncate(title, MAX_EMBED_TITLE),
        description=truncate(description, MAX_EMBED_DESCRIPTION),
        color=color,
    )


def error_embed(message: str) -> discord.Embed:
    return safe_embed("Error", message, COLORS["error"])


async def safe_response(
    target: discord.Interaction | commands.Context,
    content: str | None = None,
    embed: discord.Embed | None = None,
    ephemeral: bool = False,
    **kwargs: Any,
) -> bool:
    """Safely respond to an interaction or context with error handling."""
    if content is not None:
        content = truncate(content)
    try:
        if isinstance(target, discord.Interaction):
            if target.response.is_done():
                await target.followup.send(content=content, embed=embed, ephemeral=ephemeral, **kwargs)
            else:
                await target.response.send_message(content=content, embed=embed, ephemeral=ephemeral, **kwargs)
        else:
            await target.reply(content=content, embed=embed, **kwargs)
        return True
    except discord.HTTPException as e:
        log.error("Failed to send response: %s", e)
        return False
