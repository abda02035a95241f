from __future__ import annotations

import logging
from typing import Any, Optional

import discord
from discord.ext import commands

from .utils import safe_response


class BaseCog(commands.Cog):
    """Base class for all cogs with common functionality."""

    def __init__(self, bot: commands.Bot) -> None:
        self.bot = bot
        self.log = logging.getLogger(f"discipline.cog.{self.__class__.__name__.lower()}")

    async def cog_load(self) -> None:
        self.log.info("Loaded %s", self.__class__.__name__)

    async def cog_unload(self) -> None:
        self.log.info("Unloaded %s", self.__class__.__name__)

    async def safe_response(
        self,
        target: discord.Interaction | commands.Context,
        content: Optional[str] = None,
        embed: Optional[discord.Embed] = None,
        ephemeral: bool = False,
        **kwargs: Any,
    ) -> bool:
        return await safe_response(target, content, embed, ephemeral, **kwargs)
