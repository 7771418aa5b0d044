"""MeshMint — conversational actions for 3D generation and NFT minting."""

from meshmint.config import CONFIG, AppConfig, __version__
from meshmint.domain.actions import (
    Action,
    BitcoinPriceAction,
    Mint3DNFTAction,
    MintNFTAction,
    TextTo3DAction,
)
from meshmint.domain.models import ActionResult, JobHandle, JobStatus
from meshmint.domain.polling import BOUNDED_MINT_POLICY, UNBOUNDED_POLICY, JobPoller, PollPolicy
from meshmint.domain.registry import ActionRegistry
from meshmint.ports.inbound import ActionRequest, ConversationMessage

__all__ = [
    "CONFIG",
    "AppConfig",
    "__version__",
    "Action",
    "BitcoinPriceAction",
    "Mint3DNFTAction",
    "MintNFTAction",
    "TextTo3DAction",
    "ActionResult",
    "JobHandle",
    "JobStatus",
    "BOUNDED_MINT_POLICY",
    "UNBOUNDED_POLICY",
    "JobPoller",
    "PollPolicy",
    "ActionRegistry",
    "ActionRequest",
    "ConversationMessage",
]
