"""End-to-end discipline runs with deterministic trials."""

import pytest

from discipline.moderation.executor import EnforcementExecutor
from discipline.moderation.models import (
    Enforce,
    Exempt,
    ExemptReason,
    Failed,
    Succeeded,
    Tier,
)
from discipline.moderation.service import DisciplineService
from discipline.testing.fakes import FakeGuildMuteBackend, ScriptedAdapter, SequenceTrialSource


def _service(values, backend=None, adapters=None):
    backend = backend or FakeGuildMuteBackend()
    return DisciplineService(SequenceTrialSource(values), EnforcementExecutor(backend, adapters)), backend


class TestScenarios:
    @pytest.mark.asyncio
    async def test_base_success_enforces_nothing(self):
        service, backend = _service([18])
        report = await service.run("g", "op", "t")

        assert report.judgement.decision == Exempt(ExemptReason.BASE_SUCCESS)
        assert report.judgement.trial2 is None
        assert report.result is None
        assert backend.calls == []

    @pytest.mark.asyncio
    async def test_critical_failure_is_enforced(self):
        service, backend = _service([10, 1])
        report = await service.run("g", "op", "t")

        assert report.judgement.decision == Enforce(259_200_000, Tier.CRITICAL_FAILURE)
        assert report.result == Succeeded(259_200_000, "guild_mute")
        assert backend.calls == [("g", "t", 259_200_000)]

    @pytest.mark.asyncio
    async def test_critical_success_skips_enforcement(self):
        service, backend = _service([3, 20])
        report = await service.run("g", "op", "t")

        assert report.judgement.decision == Exempt(ExemptReason.CRITICAL_SUCCESS)
        assert report.result is None
        assert backend.calls == []

    @pytest.mark.asyncio
    async def test_failure_keeps_the_dice(self):
        adapter = ScriptedAdapter("flaky", error=ConnectionError("connection dropped"))
        service, _ = _service([4, 9], adapters=[adapter])
        report = await service.run("g", "op", "t")

        assert (report.judgement.trial1, report.judgement.trial2) == (4, 9)
        assert isinstance(report.result, Failed)
        assert report.result.cause.message == "connection dropped"

    @pytest.mark.asyncio
    async def test_report_carries_identities(self):
        service, _ = _service([17])
        report = await service.run("scope", "operator", "target")
        assert (report.scope_id, report.operator_id, report.target_id) == ("scope", "operator", "target")
