"""Outbound ports: interfaces for external system adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from meshmint.domain.models import JobHandle, JobStatus


@runtime_checkable
class LLMPort(Protocol):
    """Interface for LLM execution backends."""

    async def execute(
        self,
        message: str,
        system_prompt: Optional[str] = None,
        session_id: Optional[str] = None,
        model: Optional[str] = None,
    ) -> str: ...


@runtime_checkable
class RemoteJobClient(Protocol):
    """Interface for a remote service that runs long jobs."""

    @property
    def is_configured(self) -> bool: ...

    async def submit(self, params: Mapping[str, Any]) -> JobHandle: ...

    async def fetch_status(self, handle: JobHandle) -> JobStatus: ...


@runtime_checkable
class ResultCallback(Protocol):
    """Single-shot sink for an action's ``{text, content}`` payload."""

    def __call__(self, payload: Dict[str, Any]) -> Any: ...
