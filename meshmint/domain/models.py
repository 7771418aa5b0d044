"""Domain data models — pure Python dataclasses."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, Optional


class ExtractedParameters(Mapping):
    """Read-only field -> value mapping produced once per invocation."""

    def __init__(self, values: Mapping[str, str]):
        self._values = MappingProxyType(dict(values))

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ExtractedParameters({dict(self._values)!r})"

    def as_dict(self) -> Dict[str, str]:
        return dict(self._values)


@dataclass(frozen=True)
class JobHandle:
    """Identifies one submitted remote job."""

    job_id: str
    submitted_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class JobState(str, Enum):
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class JobStatus:
    """One observation of a remote job.

    ``raw_status`` keeps the service's own status string (e.g. "IN_PROGRESS").
    ``payload`` is only set on success, ``reason`` only on failure.
    """

    state: JobState
    raw_status: str = ""
    payload: Any = None
    reason: Optional[str] = None

    @classmethod
    def pending(cls, raw_status: str = "pending") -> "JobStatus":
        return cls(state=JobState.PENDING, raw_status=raw_status)

    @classmethod
    def succeeded(cls, payload: Any, raw_status: str = "success") -> "JobStatus":
        return cls(state=JobState.SUCCEEDED, raw_status=raw_status, payload=payload)

    @classmethod
    def failed(cls, reason: str, raw_status: str = "failed") -> "JobStatus":
        return cls(state=JobState.FAILED, raw_status=raw_status, reason=reason)

    @property
    def is_terminal(self) -> bool:
        return self.state is not JobState.PENDING

    @property
    def is_succeeded(self) -> bool:
        return self.state is JobState.SUCCEEDED

    @property
    def is_failed(self) -> bool:
        return self.state is JobState.FAILED


@dataclass(frozen=True)
class ActionResult:
    """The only value an action hands back to its caller."""

    text: str
    content: Dict[str, Any]
    success: bool = True

    @classmethod
    def error(cls, doing: str, message: str) -> "ActionResult":
        return cls(
            text=f"Error {doing}: {message}",
            content={"error": message},
            success=False,
        )

    def as_callback_payload(self) -> Dict[str, Any]:
        return {"text": self.text, "content": self.content}
