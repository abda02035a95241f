from __future__ import annotations

from typing import Final

# Discord limits
MAX_MESSAGE_LENGTH: Final[int] = 2000
MAX_EMBED_DESCRIPTION: Final[int] = 4096
MAX_EMBED_TITLE: Final[int] = 256

# Trials
TRIAL_SIDES: Final[int] = 20
BASE_SAVE_THRESHOLD: Final[int] = 16

# Time units
MS_PER_SECOND: Final[int] = 1000
MS_PER_HOUR: Final[int] = 60 * 60 * MS_PER_SECOND
HOURS_PER_DAY: Final[int] = 24

# Discord caps member timeouts at 28 days.
MAX_DISCORD_TIMEOUT_MS: Final[int] = 28 * HOURS_PER_DAY * MS_PER_HOUR

DEFAULT_ENFORCEMENT_TIMEOUT_SECONDS: Final[int] = 15

# Colors (hex values)
COLORS = {
    "default": 0x5865F2,
    "error": 0xED4245,
}

ERROR_MESSAGES = {
    "missing_permissions": "权限不足，仅管理员可使用此指令",
    "guild_only": "此指令只能在群组中使用",
    "unexpected": "执行失败：{}",
    "unknown_error": "未知错误",
}
