"""Offline price source that replays a fixed sequence."""

from __future__ import annotations

from typing import Iterable, Optional

from sma_trader.market_data.source import PriceFetchError, PriceSource


class ReplayPriceSource(PriceSource):
    def __init__(self, prices: Iterable[Optional[float]]) -> None:
        # None entries simulate a failed fetch at that position.
        self._prices = list(prices)
        self._index = 0

    @property
    def remaining(self) -> int:
        return len(self._prices) - self._index

    def fetch_price(self, asset_id: str) -> float:
        if self._index >= len(self._prices):
            raise PriceFetchError(f"Replay exhausted for {asset_id}")
        price = self._prices[self._index]
        self._index += 1
        if price is None:
            raise PriceFetchError(f"Replay gap for {asset_id} at position {self._index - 1}")
        return float(price)
