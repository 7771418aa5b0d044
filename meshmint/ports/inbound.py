"""Inbound port: platform-agnostic action request."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ConversationMessage:
    """One prior turn. ``content`` carries structured fields such as modelUrl."""

    role: str
    text: str
    content: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ActionRequest:
    """Conversation context handed to an action.

    ``artifacts`` is the side-channel of values produced by earlier actions
    (e.g. a generated model URL). Actions only ever add keys to it.
    """

    text: str
    history: List[ConversationMessage] = field(default_factory=list)
    artifacts: Dict[str, str] = field(default_factory=dict)
    user_name: str = "user"

    def recent_messages(self, limit: Optional[int] = 10) -> List[ConversationMessage]:
        """Prior turns followed by the current message, newest last."""
        messages = list(self.history)
        messages.append(ConversationMessage(role=self.user_name, text=self.text))
        if limit is not None:
            messages = messages[-limit:]
        return messages

    def find_artifact(self, key: str) -> Optional[str]:
        """Return the newest string value for ``key`` from artifacts or history."""
        value = self.artifacts.get(key)
        if isinstance(value, str) and value:
            return value
        for message in reversed(self.history):
            candidate = message.content.get(key) if message.content else None
            if isinstance(candidate, str) and candidate:
                return candidate
        return None
