"""Two-stage escalation policy.

A base save (trial 1) of 16 or more exempts the target outright. Anything lower
draws a second trial which picks the restriction length from a fixed table.
The table covers every face of the die exactly once.
"""

from __future__ import annotations

from typing import Optional

from ..constants import BASE_SAVE_THRESHOLD, MS_PER_HOUR, TRIAL_SIDES
from .errors import InvalidTrialRange
from .models import Decision, Enforce, Exempt, ExemptReason, Judgement, Tier
from .trials import TrialSource

# (low, high, decision), inclusive bounds, ascending and contiguous over 1..20.
DURATION_TABLE: tuple[tuple[int, int, Decision], ...] = (
    (1, 1, Enforce(72 * MS_PER_HOUR, Tier.CRITICAL_FAILURE)),
    (2, 5, Enforce(1 * MS_PER_HOUR, Tier.LOW)),
    (6, 15, Enforce(12 * MS_PER_HOUR, Tier.MID)),
    (16, 19, Enforce(24 * MS_PER_HOUR, Tier.HIGH)),
    (20, 20, Exempt(ExemptReason.CRITICAL_SUCCESS)),
)


def _check(value: object) -> int:
    # bool is an int subclass; a True/False trial is always a caller bug.
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidTrialRange(value, TRIAL_SIDES)
    if not 1 <= value <= TRIAL_SIDES:
        raise InvalidTrialRange(value, TRIAL_SIDES)
    return value


def needs_second_trial(trial1: int) -> bool:
    return _check(trial1) < BASE_SAVE_THRESHOLD


def decide(trial1: int, trial2: Optional[int] = None) -> Decision:
    """Map trial values to a decision. Pure and total over ``[1, 20]``."""
    if not needs_second_trial(trial1):
        return Exempt(ExemptReason.BASE_SUCCESS)
    if trial2 is None:
        raise InvalidTrialRange(None, TRIAL_SIDES)
    value = _check(trial2)
    for low, high, decision in DURATION_TABLE:
        if low <= value <= high:
            return decision
    raise AssertionError(f"duration table does not cover {value}")


def roll(source: TrialSource) -> Judgement:
    """Draw trial 1, and trial 2 only when the base save failed."""
    trial1 = source.draw()
    if not needs_second_trial(trial1):
        return Judgement(trial1=trial1, trial2=None, decision=decide(trial1))
    trial2 = source.draw()
    return Judgement(trial1=trial1, trial2=trial2, decision=decide(trial1, trial2))
