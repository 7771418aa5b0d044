"""Tests for domain/polling.py — JobPoller with scripted status sequences."""

import pytest

from meshmint.domain.errors import JobFailedError, StatusQueryError
from meshmint.domain.models import JobHandle, JobStatus
from meshmint.domain.polling import (
    BOUNDED_MINT_POLICY,
    UNBOUNDED_POLICY,
    JobPoller,
    PollPolicy,
)


class ScriptedClient:
    """RemoteJobClient whose fetch_status replays a fixed sequence."""

    is_configured = True

    def __init__(self, statuses):
        self.statuses = list(statuses)
        self.queries = 0

    async def submit(self, params):
        return JobHandle("job-1")

    async def fetch_status(self, handle):
        self.queries += 1
        item = self.statuses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


class RecordingSleep:
    def __init__(self):
        self.delays = []

    async def __call__(self, delay):
        self.delays.append(delay)


class TestPollPolicy:
    def test_defaults_are_unbounded(self):
        assert UNBOUNDED_POLICY.is_bounded is False
        assert UNBOUNDED_POLICY.delay_seconds == 5.0
        assert UNBOUNDED_POLICY.allows(10_000) is True

    def test_mint_policy(self):
        assert BOUNDED_MINT_POLICY.max_attempts == 12
        assert BOUNDED_MINT_POLICY.delay_seconds == 5.0
        assert BOUNDED_MINT_POLICY.allows(11) is True
        assert BOUNDED_MINT_POLICY.allows(12) is False

    def test_fixed_delay(self):
        assert [UNBOUNDED_POLICY.delay_for(n) for n in (1, 2, 3)] == [5.0, 5.0, 5.0]

    def test_backoff_with_cap(self):
        policy = PollPolicy(delay_seconds=1.0, backoff=2.0, max_delay=5.0)
        assert [policy.delay_for(n) for n in (1, 2, 3, 4)] == [1.0, 2.0, 4.0, 5.0]

    @pytest.mark.parametrize("kwargs", [
        {"delay_seconds": -1},
        {"max_attempts": 0},
        {"backoff": 0.5},
    ])
    def test_rejects_invalid(self, kwargs):
        with pytest.raises(ValueError):
            PollPolicy(**kwargs)


class TestUnboundedPolling:
    @pytest.mark.asyncio
    async def test_two_pending_then_success(self):
        client = ScriptedClient([
            JobStatus.pending("PENDING"),
            JobStatus.pending("IN_PROGRESS"),
            JobStatus.succeeded("https://x/y.glb", raw_status="SUCCEEDED"),
        ])
        sleep = RecordingSleep()
        status = await JobPoller(UNBOUNDED_POLICY, sleep=sleep).poll(client, JobHandle("job-1"))
        assert status.payload == "https://x/y.glb"
        assert sleep.delays == [5.0, 5.0]
        assert client.queries == 3

    @pytest.mark.asyncio
    async def test_keeps_polling_past_mint_cap(self):
        statuses = [JobStatus.pending()] * 30 + [JobStatus.succeeded("url")]
        client = ScriptedClient(statuses)
        sleep = RecordingSleep()
        status = await JobPoller(sleep=sleep).poll(client, JobHandle("job-1"))
        assert status.is_succeeded
        assert len(sleep.delays) == 30

    @pytest.mark.asyncio
    async def test_success_is_never_requeried(self):
        client = ScriptedClient([JobStatus.succeeded("url"), JobStatus.pending()])
        await JobPoller(sleep=RecordingSleep()).poll(client, JobHandle("job-1"))
        assert client.queries == 1
        assert len(client.statuses) == 1

    @pytest.mark.asyncio
    async def test_failure_short_circuits(self):
        client = ScriptedClient([
            JobStatus.pending(),
            JobStatus.failed("Model generation failed", raw_status="FAILED"),
            JobStatus.succeeded("never reached"),
        ])
        sleep = RecordingSleep()
        with pytest.raises(JobFailedError) as exc:
            await JobPoller(sleep=sleep).poll(client, JobHandle("job-1"))
        assert exc.value.reason == "Model generation failed"
        assert exc.value.job_id == "job-1"
        assert client.queries == 2
        assert sleep.delays == [5.0]

    @pytest.mark.asyncio
    async def test_status_query_error_stops_polling(self):
        client = ScriptedClient([
            JobStatus.pending(),
            StatusQueryError("Failed to check task status", status=500),
            JobStatus.succeeded("never reached"),
        ])
        with pytest.raises(StatusQueryError):
            await JobPoller(sleep=RecordingSleep()).poll(client, JobHandle("job-1"))
        assert client.queries == 2


class TestBoundedPolling:
    @pytest.mark.asyncio
    async def test_exhaustion_returns_last_pending(self):
        client = ScriptedClient([JobStatus.pending("pending")] * 20)
        sleep = RecordingSleep()
        status = await JobPoller(BOUNDED_MINT_POLICY, sleep=sleep).poll(client, JobHandle("job-1"))
        assert status.is_terminal is False
        assert status.raw_status == "pending"
        assert client.queries == 12
        assert len(sleep.delays) == 11

    @pytest.mark.asyncio
    async def test_success_within_cap(self):
        client = ScriptedClient([JobStatus.pending()] * 3 + [JobStatus.succeeded({"status": "success"})])
        status = await JobPoller(BOUNDED_MINT_POLICY, sleep=RecordingSleep()).poll(
            client, JobHandle("job-1")
        )
        assert status.is_succeeded
        assert client.queries == 4

    @pytest.mark.asyncio
    async def test_failure_on_last_attempt_still_raises(self):
        client = ScriptedClient([JobStatus.pending()] * 11 + [JobStatus.failed("NFT minting failed")])
        with pytest.raises(JobFailedError):
            await JobPoller(BOUNDED_MINT_POLICY, sleep=RecordingSleep()).poll(
                client, JobHandle("job-1")
            )
        assert client.queries == 12

    @pytest.mark.asyncio
    async def test_single_attempt_policy_never_sleeps(self):
        client = ScriptedClient([JobStatus.pending()])
        sleep = RecordingSleep()
        status = await JobPoller(PollPolicy(max_attempts=1), sleep=sleep).poll(
            client, JobHandle("job-1")
        )
        assert status.is_terminal is False
        assert sleep.delays == []
