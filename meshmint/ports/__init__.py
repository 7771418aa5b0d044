"""Port interfaces (Hexagonal Architecture)."""

from meshmint.ports.inbound import ActionRequest, ConversationMessage
from meshmint.ports.outbound import LLMPort, RemoteJobClient, ResultCallback

__all__ = [
    "ActionRequest",
    "ConversationMessage",
    "LLMPort",
    "RemoteJobClient",
    "ResultCallback",
]
