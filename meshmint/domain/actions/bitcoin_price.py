"""GET_BITCOIN_PRICE: fetch CoinDesk prices and have the LLM format them."""

from typing import Any, Dict, Protocol

from meshmint.domain.actions.base import Action, ActionState
from meshmint.domain.actions.templates import BITCOIN_PRICE_TEMPLATE
from meshmint.domain.extraction import StructuredExtractor
from meshmint.domain.models import ActionResult
from meshmint.ports.inbound import ActionRequest


class PriceSource(Protocol):
    async def current_price(self) -> Dict[str, Any]: ...


class BitcoinPriceAction(Action):
    name = "GET_BITCOIN_PRICE"
    similes = ("CHECK_BTC_PRICE", "BITCOIN_PRICE", "BTC_PRICE", "CRYPTO_PRICE")
    description = "Fetches and formats the current Bitcoin price from CoinDesk API"
    template = BITCOIN_PRICE_TEMPLATE
    required_fields = ("usdPrice", "gbpPrice", "eurPrice", "lastUpdated")
    error_context = "fetching Bitcoin price"
    examples = [
        [
            ("{{user1}}", {"text": "What's the current Bitcoin price?"}),
            ("{{user2}}", {
                "text": "I'll check the current Bitcoin price for you...",
                "action": "GET_BITCOIN_PRICE",
            }),
            ("{{user2}}", {
                "text": (
                    "Current Bitcoin Prices:\n"
                    "USD: $96,518.16\n"
                    "GBP: £77,191.37\n"
                    "EUR: €92,959.73\n"
                    "Last Updated: 2024-12-22 03:05 UTC"
                ),
            }),
        ],
    ]

    def __init__(self, extractor: StructuredExtractor, source: PriceSource):
        super().__init__(extractor)
        self.source = source

    async def perform(self, request: ActionRequest) -> ActionResult:
        self._enter(ActionState.SUBMITTING)
        data = await self.source.current_price()

        prices = await self.extract(request, btcData=data)
        return ActionResult(
            text=(
                "Current Bitcoin Prices:\n"
                f"USD: {prices['usdPrice']}\n"
                f"GBP: {prices['gbpPrice']}\n"
                f"EUR: {prices['eurPrice']}\n"
                f"Last Updated: {prices['lastUpdated']}"
            ),
            content=prices.as_dict(),
        )
