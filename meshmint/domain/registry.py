"""Action lookup and dispatch."""

import sys
from typing import Dict, Iterable, List, Optional

from meshmint.domain.actions.base import Action
from meshmint.ports.inbound import ActionRequest
from meshmint.ports.outbound import ResultCallback


def _log(msg: str):
    print(msg, file=sys.stderr)


class ActionRegistry:
    """Resolves actions by name or simile (case-insensitive)."""

    def __init__(self, actions: Iterable[Action] = ()):
        self._actions: List[Action] = []
        self._index: Dict[str, Action] = {}
        for action in actions:
            self.register(action)

    def register(self, action: Action):
        for key in (action.name, *action.similes):
            key = key.upper()
            existing = self._index.get(key)
            if existing is not None and existing is not action:
                raise ValueError(f"{key} already registered by {existing.name}")
            self._index[key] = action
        self._actions.append(action)

    def get(self, name: str) -> Optional[Action]:
        return self._index.get(name.strip().upper())

    def list_actions(self) -> List[Action]:
        return list(self._actions)

    async def dispatch(
        self,
        name: str,
        request: ActionRequest,
        callback: Optional[ResultCallback] = None,
    ) -> Optional[bool]:
        """Validate then run ``name``.

        Returns None when the action is unknown or declines the request,
        otherwise the handler's success flag.
        """
        action = self.get(name)
        if action is None:
            _log(f"[registry] unknown action: {name}")
            return None
        if not await action.validate(request):
            _log(f"[registry] {action.name} declined request")
            return None
        return await action.handler(request, callback)
