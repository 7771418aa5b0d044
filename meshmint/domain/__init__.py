"""Domain layer — pure Python, no framework dependencies."""

from meshmint.domain.errors import (
    ActionError,
    ConfigError,
    InvalidContentError,
    JobFailedError,
    RemoteServiceError,
    StatusQueryError,
    SubmissionError,
)
from meshmint.domain.models import (
    ActionResult,
    ExtractedParameters,
    JobHandle,
    JobState,
    JobStatus,
)
from meshmint.domain.extraction import StructuredExtractor, guard_fields, parse_json_block
from meshmint.domain.polling import BOUNDED_MINT_POLICY, UNBOUNDED_POLICY, JobPoller, PollPolicy

__all__ = [
    "ActionError",
    "ConfigError",
    "InvalidContentError",
    "JobFailedError",
    "RemoteServiceError",
    "StatusQueryError",
    "SubmissionError",
    "ActionResult",
    "ExtractedParameters",
    "JobHandle",
    "JobState",
    "JobStatus",
    "StructuredExtractor",
    "guard_fields",
    "parse_json_block",
    "BOUNDED_MINT_POLICY",
    "UNBOUNDED_POLICY",
    "JobPoller",
    "PollPolicy",
]
