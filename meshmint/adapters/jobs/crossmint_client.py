"""Crossmint NFT minting client using aiohttp."""

import sys
from typing import Any, List, Mapping, Optional

import aiohttp

from meshmint.domain.errors import ConfigError, StatusQueryError, SubmissionError
from meshmint.domain.models import JobHandle, JobStatus

CROSSMINT_API_BASE = "https://staging.crossmint.com"
CROSSMINT_API_VERSION = "2022-06-09"

CROSSMINT_SUCCESS = "success"
CROSSMINT_FAILED = "failed"


def _log(msg: str):
    print(msg, file=sys.stderr)


class CrossmintClient:
    """Async Crossmint client: mint into a collection, then poll the action.

    Implements RemoteJobClient. ``submit`` expects ``recipient``, ``name``,
    ``image`` and ``description``; ``attributes`` is optional.
    """

    def __init__(
        self,
        api_key: Optional[str],
        api_base: str = CROSSMINT_API_BASE,
        collection: str = "default",
        timeout: float = 30.0,
    ):
        self._api_key = api_key or ""
        self._api_base = api_base.rstrip("/")
        self._collection = collection
        self._timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def _auth_headers(self) -> dict:
        if not self._api_key:
            raise ConfigError("Crossmint API key not configured")
        return {"x-api-key": self._api_key}

    def _session(self) -> aiohttp.ClientSession:
        return aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self._timeout))

    @property
    def mint_url(self) -> str:
        return (
            f"{self._api_base}/api/{CROSSMINT_API_VERSION}"
            f"/collections/{self._collection}/nfts"
        )

    def action_url(self, action_id: str) -> str:
        return f"{self._api_base}/api/{CROSSMINT_API_VERSION}/actions/{action_id}"

    @staticmethod
    def build_request(params: Mapping[str, Any]) -> dict:
        metadata = {
            "name": params["name"],
            "image": params["image"],
            "description": params["description"],
        }
        attributes: Optional[List[dict]] = params.get("attributes")
        if attributes:
            metadata["attributes"] = list(attributes)
        return {"recipient": params["recipient"], "metadata": metadata}

    async def submit(self, params: Mapping[str, Any]) -> JobHandle:
        headers = self._auth_headers()
        headers.update({"accept": "application/json", "content-type": "application/json"})

        async with self._session() as session:
            async with session.post(self.mint_url, headers=headers, json=self.build_request(params)) as resp:
                if not 200 <= resp.status < 300:
                    body = await resp.text()
                    _log(f"[crossmint] mint failed (HTTP {resp.status}): {body[:200]}")
                    raise SubmissionError("Failed to initiate NFT minting", status=resp.status)
                data = await resp.json()

        action_id = data.get("actionId") if isinstance(data, dict) else None
        if not isinstance(action_id, str) or not action_id:
            raise SubmissionError("Crossmint response did not include an actionId")
        _log(f"[crossmint] mint action created: {action_id}")
        return JobHandle(job_id=action_id)

    @staticmethod
    def parse_status(data: Mapping[str, Any]) -> JobStatus:
        status = data.get("status", "")
        if status == CROSSMINT_SUCCESS:
            return JobStatus.succeeded(dict(data), raw_status=status)
        if status == CROSSMINT_FAILED:
            return JobStatus.failed("NFT minting failed", raw_status=status)
        if not isinstance(status, str) or not status:
            status = "pending"
        return JobStatus.pending(raw_status=status)

    async def fetch_status(self, handle: JobHandle) -> JobStatus:
        headers = self._auth_headers()

        async with self._session() as session:
            async with session.get(self.action_url(handle.job_id), headers=headers) as resp:
                if not 200 <= resp.status < 300:
                    raise StatusQueryError("Failed to check minting status", status=resp.status)
                data = await resp.json()

        if not isinstance(data, dict):
            raise StatusQueryError("Crossmint action status was not an object")
        return self.parse_status(data)
