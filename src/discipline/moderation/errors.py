from __future__ import annotations


class InvalidTrialRange(ValueError):
    """A trial value arrived outside the die's range.

    This is a caller contract violation; values are never clamped.
    """

    def __init__(self, value: object, sides: int) -> None:
        super().__init__(f"trial value {value!r} outside [1, {sides}]")
        self.value = value
        self.sides = sides
