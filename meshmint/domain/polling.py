"""Generic job poller driven by a retry policy.

Whether polling is bounded is a policy value, not a separate loop:

- ``UNBOUNDED_POLICY`` polls until the job reaches a terminal state. There is
  no cap and no cancellation path; the remote service is relied on to finish
  every job eventually. A job that never finishes holds its task forever.
- ``BOUNDED_MINT_POLICY`` gives up after 12 attempts and hands back the last
  pending status. Callers report that as "initiated", not as an error.
"""

import asyncio
import sys
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from meshmint.domain.errors import JobFailedError
from meshmint.domain.models import JobHandle, JobStatus
from meshmint.ports.outbound import RemoteJobClient

DEFAULT_POLL_INTERVAL = 5.0
DEFAULT_MINT_MAX_ATTEMPTS = 12

Sleep = Callable[[float], Awaitable[None]]


def _log(msg: str):
    print(msg, file=sys.stderr)


@dataclass(frozen=True)
class PollPolicy:
    """How often and how long to poll.

    ``max_attempts=None`` means poll forever. ``backoff`` multiplies the delay
    after every pending observation (1.0 keeps it fixed), capped by
    ``max_delay`` when set.
    """

    delay_seconds: float = DEFAULT_POLL_INTERVAL
    max_attempts: Optional[int] = None
    backoff: float = 1.0
    max_delay: Optional[float] = None

    def __post_init__(self):
        if self.delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0")
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1 or None")
        if self.backoff < 1.0:
            raise ValueError("backoff must be >= 1.0")

    @property
    def is_bounded(self) -> bool:
        return self.max_attempts is not None

    def delay_for(self, attempt: int) -> float:
        """Delay after the ``attempt``-th pending observation (1-based)."""
        delay = self.delay_seconds * (self.backoff ** (attempt - 1))
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay

    def allows(self, attempt: int) -> bool:
        """True when another status query may follow ``attempt`` queries."""
        return self.max_attempts is None or attempt < self.max_attempts


UNBOUNDED_POLICY = PollPolicy()
BOUNDED_MINT_POLICY = PollPolicy(max_attempts=DEFAULT_MINT_MAX_ATTEMPTS)


class JobPoller:
    """Drives a JobHandle to a terminal status.

    Returns the Succeeded status, or the last Pending status when a bounded
    policy runs out of attempts. A Failed status raises JobFailedError at
    once. StatusQueryError from the client propagates and stops polling.
    """

    def __init__(
        self,
        policy: PollPolicy = UNBOUNDED_POLICY,
        sleep: Optional[Sleep] = None,
        name: str = "poller",
    ):
        self.policy = policy
        self._sleep = sleep or asyncio.sleep
        self._name = name

    async def poll(self, client: RemoteJobClient, handle: JobHandle) -> JobStatus:
        attempt = 0
        while True:
            status = await client.fetch_status(handle)
            attempt += 1

            if status.is_succeeded:
                _log(f"[{self._name}] job {handle.job_id} succeeded after {attempt} check(s)")
                return status
            if status.is_failed:
                _log(f"[{self._name}] job {handle.job_id} failed: {status.reason}")
                raise JobFailedError(status.reason or "job failed", job_id=handle.job_id)

            if not self.policy.allows(attempt):
                _log(
                    f"[{self._name}] job {handle.job_id} still {status.raw_status!r} "
                    f"after {attempt} check(s), giving up"
                )
                return status

            await self._sleep(self.policy.delay_for(attempt))
