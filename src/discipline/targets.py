"""Figuring out who a discipline command is aimed at."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

import discord

log = logging.getLogger("discipline.targets")

_MENTION_RE = re.compile(r"<@!?(\d+)>")

NO_TARGET = "请 @ 要惩戒的群成员，或引用其消息"
SELF_TARGET = "不能对自己使用惩戒指令"
BOT_TARGET = "不能对机器人使用惩戒指令"


@dataclass(frozen=True)
class Target:
    user_id: int
    name: str


def parse_mention(text: Optional[str]) -> Optional[int]:
    """First user mention in ``text``, if any."""
    if not text:
        return None
    match = _MENTION_RE.search(text)
    return int(match.group(1)) if match else None


def _display(user: discord.abc.User) -> str:
    return getattr(user, "display_name", None) or getattr(user, "name", None) or str(user.id)


def target_from_mention(guild: discord.Guild, text: Optional[str]) -> Optional[Target]:
    user_id = parse_mention(text)
    if user_id is None:
        return None
    member = guild.get_member(user_id)
    return Target(user_id, _display(member) if member is not None else str(user_id))


async def target_from_reply(message: discord.Message) -> Optional[Target]:
    """Author of the message being replied to.

    Uses the cached reference when discord.py resolved it, otherwise fetches
    the message. A failed fetch means no target.
    """
    ref = message.reference
    if ref is None:
        return None

    resolved = ref.resolved
    if isinstance(resolved, discord.DeletedReferencedMessage):
        return None
    if resolved is not None:
        return Target(resolved.author.id, _display(resolved.author))

    if ref.message_id is None:
        return None
    try:
        log.debug("fetching replied message %s", ref.message_id)
        fetched = await message.channel.fetch_message(ref.message_id)
    except discord.HTTPException as e:
        log.warning("failed to fetch replied message %s: %s", ref.message_id, e)
        return None
    return Target(fetched.author.id, _display(fetched.author))


def refusal_for(target: Optional[Target], operator_id: int, bot_id: Optional[int]) -> Optional[str]:
    """Message explaining why ``target`` cannot be disciplined, or None if it can."""
    if target is None:
        return NO_TARGET
    if target.user_id == operator_id:
        return SELF_TARGET
    if bot_id is not None and target.user_id == bot_id:
        return BOT_TARGET
    return None
