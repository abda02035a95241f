from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .executor import EnforcementExecutor
from .models import Enforce, EnforcementResult, Judgement
from .policy import roll
from .trials import TrialSource

log = logging.getLogger("discipline.moderation.service")


@dataclass(frozen=True)
class DisciplineReport:
    scope_id: str
    operator_id: str
    target_id: str
    judgement: Judgement
    # None when the decision was an exemption and nothing was enforced.
    result: Optional[EnforcementResult] = None


class DisciplineService:
    """Rolls the escalation policy for a target and enforces the outcome.

    Callers must already have checked that the target is neither the operator
    nor the bot itself.
    """

    def __init__(self, trials: TrialSource, executor: EnforcementExecutor) -> None:
        self.trials = trials
        self.executor = executor

    async def run(self, scope_id: str, operator_id: str, target_id: str) -> DisciplineReport:
        judgement = roll(self.trials)
        log.info("base save: operator=%s target=%s roll=%d", operator_id, target_id, judgement.trial1)
        if judgement.trial2 is not None:
            log.info("duration roll: operator=%s target=%s roll=%d", operator_id, target_id, judgement.trial2)

        decision = judgement.decision
        if not isinstance(decision, Enforce):
            log.info("exempt: target=%s reason=%s", target_id, decision.reason.value)
            return DisciplineReport(scope_id, operator_id, target_id, judgement)

        result = await self.executor.enforce(scope_id, target_id, decision)
        log.info(
            "discipline done: operator=%s target=%s tier=%s duration_ms=%d result=%s",
            operator_id,
            target_id,
            decision.tier.value,
            decision.duration_ms,
            type(result).__name__,
        )
        return DisciplineReport(scope_id, operator_id, target_id, judgement, result)
