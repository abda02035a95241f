from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional, Union

from ..constants import MS_PER_HOUR


class ExemptReason(Enum):
    BASE_SUCCESS = "base_success"
    CRITICAL_SUCCESS = "critical_success"


class Tier(Enum):
    """Which bucket of the duration table produced a restriction."""

    CRITICAL_FAILURE = "critical_failure"
    LOW = "low"
    MID = "mid"
    HIGH = "high"


@dataclass(frozen=True)
class Exempt:
    reason: ExemptReason


@dataclass(frozen=True)
class Enforce:
    duration_ms: int
    tier: Tier

    @property
    def hours(self) -> int:
        return self.duration_ms // MS_PER_HOUR


Decision = Union[Exempt, Enforce]


@dataclass(frozen=True)
class Judgement:
    """Both trial values plus the decision they produced.

    ``trial2`` is None when the base save succeeded and no second trial was drawn.
    """

    trial1: int
    trial2: Optional[int]
    decision: Decision


FailureKind = Literal["error", "timeout", "cancelled"]


@dataclass(frozen=True)
class FailureCause:
    kind: FailureKind
    message: str
    # Exception class name, when the failure came from a raised error.
    error_type: Optional[str] = None

    @property
    def outcome_unknown(self) -> bool:
        # The backend may or may not have applied the restriction.
        return self.kind in ("timeout", "cancelled")

    @classmethod
    def from_exception(cls, exc: BaseException) -> "FailureCause":
        return cls(kind="error", message=str(exc), error_type=type(exc).__name__)


@dataclass(frozen=True)
class Succeeded:
    duration_ms: int
    adapter_name: str


@dataclass(frozen=True)
class Unsupported:
    pass


@dataclass(frozen=True)
class Failed:
    adapter_name: str
    cause: FailureCause


EnforcementResult = Union[Succeeded, Unsupported, Failed]
