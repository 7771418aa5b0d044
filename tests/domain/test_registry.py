"""Tests for domain/registry.py."""

import pytest

from meshmint.domain.actions import Mint3DNFTAction, TextTo3DAction
from meshmint.domain.extraction import StructuredExtractor
from meshmint.domain.models import JobHandle, JobStatus
from meshmint.domain.polling import JobPoller
from meshmint.domain.registry import ActionRegistry
from meshmint.ports.inbound import ActionRequest


class MockLLM:
    async def execute(self, message, system_prompt=None, session_id=None, model=None):
        return '{"prompt": "mask", "artStyle": "realistic", "negativePrompt": "blurry"}'


class MockJobClient:
    is_configured = True

    def __init__(self):
        self.submitted = 0

    async def submit(self, params):
        self.submitted += 1
        return JobHandle("job-1")

    async def fetch_status(self, handle):
        return JobStatus.succeeded("https://x/y.glb")


async def _no_sleep(delay):
    return None


def _registry(client=None):
    extractor = StructuredExtractor(MockLLM(), model="m")
    client = client or MockJobClient()
    return ActionRegistry([
        TextTo3DAction(extractor, client, JobPoller(sleep=_no_sleep)),
        Mint3DNFTAction(extractor, client, JobPoller(sleep=_no_sleep)),
    ])


class TestLookup:
    def test_by_name(self):
        assert _registry().get("TEXT_TO_3D").name == "TEXT_TO_3D"

    def test_by_simile_case_insensitive(self):
        assert _registry().get("make_3d").name == "TEXT_TO_3D"
        assert _registry().get(" create_3d_nft ").name == "MINT_3D_NFT"

    def test_unknown(self):
        assert _registry().get("FLY") is None

    def test_list_preserves_order(self):
        names = [a.name for a in _registry().list_actions()]
        assert names == ["TEXT_TO_3D", "MINT_3D_NFT"]

    def test_duplicate_key_rejected(self):
        registry = _registry()
        extractor = StructuredExtractor(MockLLM(), model="m")
        with pytest.raises(ValueError):
            registry.register(TextTo3DAction(extractor, MockJobClient()))


class TestDispatch:
    @pytest.mark.asyncio
    async def test_runs_action(self):
        client = MockJobClient()
        payloads = []
        ok = await _registry(client).dispatch("GENERATE_3D", ActionRequest(text="mask"), payloads.append)
        assert ok is True
        assert client.submitted == 1
        assert len(payloads) == 1

    @pytest.mark.asyncio
    async def test_declined_action_returns_none(self):
        client = MockJobClient()
        payloads = []
        result = await _registry(client).dispatch("MINT_3D_NFT", ActionRequest(text="mint"), payloads.append)
        assert result is None
        assert payloads == []
        assert client.submitted == 0

    @pytest.mark.asyncio
    async def test_unknown_returns_none(self):
        assert await _registry().dispatch("NOPE", ActionRequest(text="x")) is None

    @pytest.mark.asyncio
    async def test_artifacts_flow_between_actions(self):
        registry = _registry()
        request = ActionRequest(text="make a mask")
        await registry.dispatch("TEXT_TO_3D", request)
        follow_up = ActionRequest(text="mint it", artifacts=request.artifacts)
        assert await registry.get("MINT_3D_NFT").validate(follow_up) is True
