"""Escalation + enforcement subsystem.

Self-contained modules:
- trials (injected d20 trial source)
- policy (pure two-stage escalation decision)
- adapters (capability adapters, fixed priority order)
- executor (probe-then-invoke, at most one attempt per call)
- service (roll + enforce orchestration with logging)

Nothing here talks to Discord directly; the bot connection is wrapped by
``discord_backend.DiscordGuildMuteBackend``.
"""

from .errors import InvalidTrialRange
from .executor import EnforcementExecutor
from .models import (
    Decision,
    Enforce,
    EnforcementResult,
    Exempt,
    ExemptReason,
    Failed,
    FailureCause,
    Judgement,
    Succeeded,
    Tier,
    Unsupported,
)
from .policy import decide, roll
from .service import DisciplineReport, DisciplineService
from .trials import RandomTrialSource, TrialSource

__all__ = [
    "Decision",
    "DisciplineReport",
    "DisciplineService",
    "Enforce",
    "EnforcementExecutor",
    "EnforcementResult",
    "Exempt",
    "ExemptReason",
    "Failed",
    "FailureCause",
    "InvalidTrialRange",
    "Judgement",
    "RandomTrialSource",
    "Succeeded",
    "Tier",
    "TrialSource",
    "Unsupported",
    "decide",
    "roll",
]
