"""Action handler skeleton shared by every capability.

An invocation walks Validating → Extracting → Submitting → Polling →
Completed; any ActionError (or unexpected exception) jumps to Failed. Either
way the caller gets exactly one ActionResult, and the optional callback is
invoked exactly once with it.
"""

import inspect
import sys
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from meshmint.domain.extraction import StructuredExtractor, format_messages
from meshmint.domain.models import ActionResult, ExtractedParameters
from meshmint.ports.inbound import ActionRequest
from meshmint.ports.outbound import ResultCallback


def _log(msg: str):
    print(msg, file=sys.stderr)


class ActionState(str, Enum):
    VALIDATING = "validating"
    EXTRACTING = "extracting"
    SUBMITTING = "submitting"
    POLLING = "polling"
    COMPLETED = "completed"
    FAILED = "failed"


# One example conversation: list of (speaker, content) pairs
ActionExample = List[Tuple[str, Dict[str, Any]]]


class Action:
    """Base class for a conversational action.

    Subclasses set ``name``, ``similes``, ``description``, ``examples``,
    ``template``, ``required_fields`` and ``error_context`` and implement
    ``perform``. ``validate`` defaults to accepting every request.
    """

    name: str = ""
    similes: Tuple[str, ...] = ()
    description: str = ""
    examples: List[ActionExample] = []

    template: str = ""
    required_fields: Tuple[str, ...] = ()
    # Completes "Error <error_context>: <message>"
    error_context: str = "running action"

    def __init__(self, extractor: StructuredExtractor):
        self.extractor = extractor

    def _enter(self, state: ActionState):
        # Logged only; one instance serves concurrent invocations.
        _log(f"[{self.name}] -> {state.value}")

    async def validate(self, request: ActionRequest) -> bool:
        return True

    def build_state(self, request: ActionRequest) -> Dict[str, Any]:
        """Template state; ``recentMessages`` is always present."""
        return {"recentMessages": format_messages(request.recent_messages())}

    async def extract(self, request: ActionRequest, **extra: Any) -> ExtractedParameters:
        self._enter(ActionState.EXTRACTING)
        state = self.build_state(request)
        state.update(extra)
        return await self.extractor.extract_fields(self.template, state, self.required_fields)

    async def perform(self, request: ActionRequest) -> ActionResult:
        raise NotImplementedError

    async def run(self, request: ActionRequest) -> ActionResult:
        """Execute the action and return its single result value.

        Does not call ``validate``; dispatchers do that first.
        """
        try:
            result = await self.perform(request)
        except Exception as e:
            self._enter(ActionState.FAILED)
            _log(f"[{self.name}] Error {self.error_context}: {e}")
            return ActionResult.error(self.error_context, str(e))
        self._enter(ActionState.COMPLETED)
        return result

    async def handler(
        self,
        request: ActionRequest,
        callback: Optional[ResultCallback] = None,
    ) -> bool:
        """Run, emit the result through ``callback`` once, return success."""
        result = await self.run(request)
        if callback is not None:
            emitted = callback(result.as_callback_payload())
            if inspect.isawaitable(emitted):
                await emitted
        return result.success

    def describe(self) -> Mapping[str, Any]:
        return {
            "name": self.name,
            "similes": list(self.similes),
            "description": self.description,
        }
