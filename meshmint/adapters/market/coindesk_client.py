"""CoinDesk Bitcoin price client using aiohttp."""

from typing import Any, Dict

import aiohttp

from meshmint.domain.errors import RemoteServiceError

COINDESK_PRICE_URL = "https://api.coindesk.com/v1/bpi/currentprice.json"


class CoinDeskClient:
    """Fetches the current BPI snapshot. No credential needed."""

    def __init__(self, url: str = COINDESK_PRICE_URL, timeout: float = 30.0):
        self._url = url
        self._timeout = timeout

    @property
    def is_configured(self) -> bool:
        return True

    async def current_price(self) -> Dict[str, Any]:
        timeout = aiohttp.ClientTimeout(total=self._timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(self._url) as resp:
                if not 200 <= resp.status < 300:
                    raise RemoteServiceError("Failed to fetch Bitcoin price", status=resp.status)
                # CoinDesk serves this as application/javascript
                data = await resp.json(content_type=None)
        if not isinstance(data, dict):
            raise RemoteServiceError("Bitcoin price response was not an object")
        return data
