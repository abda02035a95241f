"""Tests for operator-facing report text."""

import pytest

from discipline.constants import MS_PER_HOUR
from discipline.moderation.models import (
    Enforce,
    Exempt,
    ExemptReason,
    Failed,
    FailureCause,
    Judgement,
    Succeeded,
    Tier,
    Unsupported,
)
from discipline.moderation.service import DisciplineReport
from discipline.render import format_duration, render_report


def _report(trial1, trial2, decision, result=None):
    return DisciplineReport("g", "op", "t", Judgement(trial1, trial2, decision), result)


class TestFormatDuration:
    @pytest.mark.parametrize(
        "hours, text",
        [(1, "1小时"), (12, "12小时"), (23, "23小时"), (24, "1天"), (26, "1天2小时"), (72, "3天")],
    )
    def test_format(self, hours, text):
        assert format_duration(hours * MS_PER_HOUR) == text


class TestRenderReport:
    def test_base_success(self):
        text = render_report(_report(18, None, Exempt(ExemptReason.BASE_SUCCESS)), "Alice")
        assert text == "🎲 基础豁免检定结果：18\n✅ Alice 成功豁免，无后续影响"

    def test_critical_success(self):
        text = render_report(_report(3, 20, Exempt(ExemptReason.CRITICAL_SUCCESS)), "Alice")
        assert text.splitlines() == [
            "🎲 基础豁免检定结果：3",
            "❌ Alice 豁免失败，进入禁言时长判定",
            "🎲 禁言时长判定结果：20",
            "🎉 大成功！Alice 豁免禁言",
        ]

    def test_critical_failure_applied(self):
        decision = Enforce(72 * MS_PER_HOUR, Tier.CRITICAL_FAILURE)
        text = render_report(_report(10, 1, decision, Succeeded(decision.duration_ms, "guild_mute")), "Bob")
        lines = text.splitlines()
        assert lines[3] == "💀 大失败！禁言时长：72小时"
        assert lines[4] == "✅ 已对 Bob 执行禁言（3天）"

    def test_regular_tier(self):
        decision = Enforce(12 * MS_PER_HOUR, Tier.MID)
        text = render_report(_report(10, 8, decision, Succeeded(decision.duration_ms, "group_ban")), "Bob")
        assert "⏰ 禁言时长：12小时" in text
        assert text.endswith("✅ 已对 Bob 执行禁言（12小时）")

    def test_unsupported(self):
        decision = Enforce(MS_PER_HOUR, Tier.LOW)
        text = render_report(_report(2, 3, decision, Unsupported()), "Bob")
        assert text.endswith("❌ 禁言执行失败：当前适配器不支持禁言功能")

    def test_failed_shows_cause_verbatim(self):
        decision = Enforce(MS_PER_HOUR, Tier.LOW)
        cause = FailureCause(kind="error", message="Missing Permissions", error_type="Forbidden")
        text = render_report(_report(2, 3, decision, Failed("guild_mute", cause)), "Bob")
        assert text.endswith("❌ 禁言执行失败：Missing Permissions")

    def test_timeout_flags_unknown_outcome(self):
        decision = Enforce(MS_PER_HOUR, Tier.LOW)
        cause = FailureCause(kind="timeout", message="backend call timed out")
        text = render_report(_report(2, 3, decision, Failed("guild_mute", cause)), "Bob")
        assert "禁言结果未知" in text

    def test_failed_without_message_falls_back(self):
        decision = Enforce(MS_PER_HOUR, Tier.LOW)
        cause = FailureCause.from_exception(RuntimeError())
        text = render_report(_report(2, 3, decision, Failed("guild_mute", cause)), "Bob")
        assert text.endswith("❌ 禁言执行失败：未知错误")
