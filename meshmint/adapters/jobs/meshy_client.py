"""Meshy text-to-3D client using aiohttp."""

import sys
from typing import Any, Mapping, Optional

import aiohttp

from meshmint.domain.errors import ConfigError, StatusQueryError, SubmissionError
from meshmint.domain.models import JobHandle, JobStatus

MESHY_API_BASE = "https://api.meshy.ai"
TEXT_TO_3D_PATH = "/openapi/v2/text-to-3d"

# Status strings are matched case-sensitively; everything else is pending.
MESHY_SUCCEEDED = "SUCCEEDED"
MESHY_FAILED = "FAILED"


def _log(msg: str):
    print(msg, file=sys.stderr)


class MeshyClient:
    """Async Meshy API client (2-step: create preview task → poll task).

    Implements RemoteJobClient. The API key is injected; a missing key only
    fails when a request is about to be made.
    """

    def __init__(
        self,
        api_key: Optional[str],
        api_base: str = MESHY_API_BASE,
        timeout: float = 30.0,
    ):
        self._api_key = api_key or ""
        self._api_base = api_base.rstrip("/")
        self._timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def _auth_headers(self) -> dict:
        if not self._api_key:
            raise ConfigError("Meshy API key not configured")
        return {"Authorization": f"Bearer {self._api_key}"}

    def _session(self) -> aiohttp.ClientSession:
        return aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self._timeout))

    @staticmethod
    def build_request(params: Mapping[str, Any]) -> dict:
        """Map extracted parameters to the preview-task request body."""
        return {
            "mode": "preview",
            "prompt": params["prompt"],
            "negative_prompt": params.get("negativePrompt", ""),
            "art_style": params.get("artStyle", "realistic"),
            "should_remesh": True,
        }

    async def submit(self, params: Mapping[str, Any]) -> JobHandle:
        headers = self._auth_headers()
        headers["Content-Type"] = "application/json"
        url = f"{self._api_base}{TEXT_TO_3D_PATH}"

        async with self._session() as session:
            async with session.post(url, headers=headers, json=self.build_request(params)) as resp:
                if not 200 <= resp.status < 300:
                    body = await resp.text()
                    _log(f"[meshy] submit failed (HTTP {resp.status}): {body[:200]}")
                    raise SubmissionError(
                        "Failed to initiate 3D model generation", status=resp.status
                    )
                data = await resp.json()

        task_id = data.get("result") if isinstance(data, dict) else None
        if not isinstance(task_id, str) or not task_id:
            raise SubmissionError("Meshy response did not include a task id")
        _log(f"[meshy] preview task created: {task_id}")
        return JobHandle(job_id=task_id)

    @staticmethod
    def parse_status(data: Mapping[str, Any]) -> JobStatus:
        """Map a task body to JobStatus. Success payload is the GLB URL."""
        status = data.get("status", "")
        if status == MESHY_SUCCEEDED:
            model_urls = data.get("model_urls") or {}
            glb = model_urls.get("glb") if isinstance(model_urls, dict) else None
            if not isinstance(glb, str) or not glb:
                return JobStatus.failed("Model generation succeeded without a GLB url", status)
            return JobStatus.succeeded(glb, raw_status=status)
        if status == MESHY_FAILED:
            task_error = data.get("task_error") or {}
            message = task_error.get("message") if isinstance(task_error, dict) else None
            return JobStatus.failed(message or "Model generation failed", raw_status=status)
        return JobStatus.pending(raw_status=str(status))

    async def fetch_status(self, handle: JobHandle) -> JobStatus:
        headers = self._auth_headers()
        url = f"{self._api_base}{TEXT_TO_3D_PATH}/{handle.job_id}"

        async with self._session() as session:
            async with session.get(url, headers=headers) as resp:
                if not 200 <= resp.status < 300:
                    raise StatusQueryError("Failed to check task status", status=resp.status)
                data = await resp.json()

        if not isinstance(data, dict):
            raise StatusQueryError("Meshy task status was not an object")
        return self.parse_status(data)
