"""Action error taxonomy.

Every error below is fatal for the invocation that raised it. Handlers turn
them into an ``Error <doing X>: <message>`` result; nothing is retried.
"""


class ActionError(Exception):
    """Base class for errors surfaced by an action handler."""


class ConfigError(ActionError):
    """A required credential or setting is missing."""


class InvalidContentError(ActionError):
    """Extractor output failed the field guard."""


class RemoteServiceError(ActionError):
    """A remote HTTP call returned a non-2xx response or an unusable body."""

    def __init__(self, message: str, status: int = 0):
        super().__init__(message)
        self.status = status


class SubmissionError(RemoteServiceError):
    """Job creation was rejected by the remote service."""


class StatusQueryError(RemoteServiceError):
    """A job status check failed. Polling stops."""


class JobFailedError(ActionError):
    """The remote service reported the job as failed."""

    def __init__(self, reason: str, job_id: str = ""):
        super().__init__(reason)
        self.reason = reason
        self.job_id = job_id
