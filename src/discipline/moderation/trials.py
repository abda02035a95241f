from __future__ import annotations

import random
from typing import Optional, Protocol, runtime_checkable

from ..constants import TRIAL_SIDES


@runtime_checkable
class TrialSource(Protocol):
    """Produces independent uniform integers in ``[1, sides]``."""

    sides: int

    def draw(self) -> int:
        ...


class RandomTrialSource:
    """d20 backed by an explicit ``random.Random``.

    Defaults to ``random.SystemRandom`` so concurrent commands never share
    a seeded generator state.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        # The escalation table is defined for a d20 only.
        self.sides = TRIAL_SIDES
        self._rng = rng or random.SystemRandom()

    def draw(self) -> int:
        return self._rng.randint(1, self.sides)

    def __repr__(self) -> str:
        return f"<RandomTrialSource d{self.sides}>"
