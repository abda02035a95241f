from __future__ import annotations

from typing import Optional

import discord
from discord import app_commands
from discord.ext import commands

from ..base_cog import BaseCog
from ..moderation.service import DisciplineService
from ..permissions import discipline_admin, discipline_admin_app
from ..render import render_report
from ..targets import Target, refusal_for, target_from_mention, target_from_reply


class _DisciplineBase(BaseCog):
    """Dice-judged mutes.

    A base save on a d20 decides whether the target walks away; a failed save
    rolls again for the mute length.
    """

    def __init__(self, bot: commands.Bot) -> None:
        super().__init__(bot)
        self.service: DisciplineService = getattr(bot, "discipline_service")

    async def _judge(self, guild: discord.Guild, operator_id: int, target: Optional[Target]) -> str:
        bot_id = self.bot.user.id if self.bot.user else None
        refusal = refusal_for(target, operator_id, bot_id)
        if refusal is not None:
            return refusal
        assert target is not None
        report = await self.service.run(str(guild.id), str(operator_id), str(target.user_id))
        return render_report(report, target.name)


class DisciplineCog(_DisciplineBase):
    """``/discipline`` slash command."""

    @app_commands.command(name="discipline", description="对群成员进行随机数鉴定并执行禁言")
    @app_commands.guild_only()
    @app_commands.describe(member="要惩戒的群成员")
    @discipline_admin_app()
    async def discipline_slash(self, interaction: discord.Interaction, member: discord.Member) -> None:
        assert interaction.guild is not None
        await interaction.response.defer()
        text = await self._judge(interaction.guild, interaction.user.id, Target(member.id, member.display_name))
        await self.safe_response(interaction, text)


class DisciplinePrefixCog(_DisciplineBase):
    """``!惩戒`` prefix command; needs the message content intent."""

    @commands.command(name="惩戒", aliases=["discipline"], help="对群成员进行随机数鉴定并执行禁言")
    @commands.guild_only()
    @discipline_admin()
    async def discipline_prefix(self, ctx: commands.Context, *, target: Optional[str] = None) -> None:
        assert ctx.guild is not None
        resolved = target_from_mention(ctx.guild, target)
        if resolved is None:
            resolved = await target_from_reply(ctx.message)
        text = await self._judge(ctx.guild, ctx.author.id, resolved)
        await self.safe_response(ctx, text)


async def setup(bot: commands.Bot) -> None:
    await bot.add_cog(DisciplineCog(bot))
    if getattr(bot.settings, "prefix_commands_enabled", False) and bot.intents.message_content:  # type: ignore[attr-defined]
        await bot.add_cog(DisciplinePrefixCog(bot))
