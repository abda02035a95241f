from __future__ import annotations

import os
import re
from dataclasses import dataclass, field

from .constants import DEFAULT_ENFORCEMENT_TIMEOUT_SECONDS


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "y", "on"}


def _get_id_set(name: str) -> frozenset[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return frozenset()
    ids: set[int] = set()
    for part in re.split(r"[\s,;]+", raw):
        if part.isdigit():
            ids.add(int(part))
    return frozenset(ids)


@dataclass(frozen=True)
class Settings:
    token: str
    sync_guild_id: int
    log_level: str
    # Only these users may run the discipline command.
    admin_user_ids: frozenset[int] = field(default_factory=frozenset)
    # Prefix commands require message content intent in the Discord Developer Portal.
    message_content_intent: bool = True
    prefix_commands_enabled: bool = True
    command_prefix: str = "!"
    # 0 disables the timeout on the backend call.
    enforcement_timeout_seconds: int = DEFAULT_ENFORCEMENT_TIMEOUT_SECONDS


def load_settings() -> Settings:
    token = os.getenv("DISCORD_TOKEN", "").strip()
    if not token:
        raise RuntimeError("DISCORD_TOKEN is required")
    return Settings(
        token=token,
        sync_guild_id=_get_int("SYNC_GUILD_ID", 0),
        log_level=(os.getenv("LOG_LEVEL", "INFO").strip() or "INFO"),
        admin_user_ids=_get_id_set("ADMIN_USER_IDS"),
        message_content_intent=_get_bool("MESSAGE_CONTENT_INTENT", True),
        prefix_commands_enabled=_get_bool("PREFIX_COMMANDS_ENABLED", True),
        command_prefix=(os.getenv("COMMAND_PREFIX", "!").strip() or "!"),
        enforcement_timeout_seconds=max(0, _get_int("ENFORCEMENT_TIMEOUT_SECONDS", DEFAULT_ENFORCEMENT_TIMEOUT_SECONDS)),
    )
