"""Conversational actions."""

from meshmint.domain.actions.base import Action, ActionState
from meshmint.domain.actions.bitcoin_price import BitcoinPriceAction
from meshmint.domain.actions.mint_nft import Mint3DNFTAction, MintNFTAction
from meshmint.domain.actions.text_to_3d import TextTo3DAction

__all__ = [
    "Action",
    "ActionState",
    "BitcoinPriceAction",
    "Mint3DNFTAction",
    "MintNFTAction",
    "TextTo3DAction",
]
