from meshmint.adapters.market.coindesk_client import CoinDeskClient

__all__ = ["CoinDeskClient"]
