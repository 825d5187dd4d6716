"""Price sources for the simulation."""

from sma_trader.market_data.coincap import DEFAULT_BASE_URL, HISTORY_INTERVALS, CoinCapPriceSource
from sma_trader.market_data.models import AssetInfo, HistoricalPrice
from sma_trader.market_data.replay import ReplayPriceSource
from sma_trader.market_data.source import PriceFetchError, PriceSource, StartupFetchError

__all__ = [
    "AssetInfo",
    "CoinCapPriceSource",
    "DEFAULT_BASE_URL",
    "HISTORY_INTERVALS",
    "HistoricalPrice",
    "PriceFetchError",
    "PriceSource",
    "ReplayPriceSource",
    "StartupFetchError",
]
