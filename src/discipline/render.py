"""Operator-facing text for discipline results."""

from __future__ import annotations

from .constants import HOURS_PER_DAY, MS_PER_HOUR
from .moderation.models import (
    Enforce,
    EnforcementResult,
    Exempt,
    ExemptReason,
    Failed,
    Succeeded,
    Tier,
    Unsupported,
)
from .moderation.service import DisciplineReport

UNSUPPORTED_MESSAGE = "当前适配器不支持禁言功能"
OUTCOME_UNKNOWN_NOTE = "（禁言结果未知，请手动确认）"


def format_duration(duration_ms: int) -> str:
    """``3天``, ``1天2小时`` for a day or more, otherwise ``12小时``."""
    hours = duration_ms // MS_PER_HOUR
    if hours >= HOURS_PER_DAY:
        days, remaining = divmod(hours, HOURS_PER_DAY)
        if remaining == 0:
            return f"{days}天"
        return f"{days}天{remaining}小时"
    return f"{hours}小时"


def _decision_line(decision: Enforce | Exempt, target_name: str) -> str:
    if isinstance(decision, Exempt):
        return f"🎉 大成功！{target_name} 豁免禁言"
    if decision.tier is Tier.CRITICAL_FAILURE:
        return f"💀 大失败！禁言时长：{decision.hours}小时"
    return f"⏰ 禁言时长：{decision.hours}小时"


def _result_line(result: EnforcementResult, target_name: str) -> str:
    if isinstance(result, Succeeded):
        return f"✅ 已对 {target_name} 执行禁言（{format_duration(result.duration_ms)}）"
    if isinstance(result, Unsupported):
        return f"❌ 禁言执行失败：{UNSUPPORTED_MESSAGE}"
    if isinstance(result, Failed):
        line = f"❌ 禁言执行失败：{result.cause.message or '未知错误'}"
        if result.cause.outcome_unknown:
            line += OUTCOME_UNKNOWN_NOTE
        return line
    raise TypeError(f"unknown enforcement result {result!r}")


def render_report(report: DisciplineReport, target_name: str) -> str:
    judgement = report.judgement
    lines = [f"🎲 基础豁免检定结果：{judgement.trial1}"]

    decision = judgement.decision
    if isinstance(decision, Exempt) and decision.reason is ExemptReason.BASE_SUCCESS:
        lines.append(f"✅ {target_name} 成功豁免，无后续影响")
        return "\n".join(lines)

    lines.append(f"❌ {target_name} 豁免失败，进入禁言时长判定")
    lines.append(f"🎲 禁言时长判定结果：{judgement.trial2}")
    lines.append(_decision_line(decision, target_name))
    if report.result is not None:
        lines.append(_result_line(report.result, target_name))
    return "\n".join(lines)
