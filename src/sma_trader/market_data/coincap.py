"""CoinCap REST price source."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any, Callable, Optional

import requests

from sma_trader.market_data.models import AssetInfo, HistoricalPrice
from sma_trader.market_data.source import PriceFetchError, PriceSource

DEFAULT_BASE_URL = "https://api.coincap.io/v2"
HISTORY_INTERVALS = ("m1", "m5", "m15", "m30", "h1", "h2", "h6", "h12", "d1")


class CoinCapPriceSource(PriceSource):
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        retry_attempts: int = 3,
        retry_delay_seconds: float = 2.0,
        timeout_seconds: float = 10.0,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if retry_attempts < 1:
            raise ValueError("retry_attempts must be >= 1")
        self.base_url = base_url.rstrip("/")
        self.retry_attempts = retry_attempts
        self.retry_delay_seconds = retry_delay_seconds
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        if api_key:
            self.session.headers.update({"Authorization": f"Bearer {api_key}"})
        self._sleep = sleep

    def _get(self, path: str, params: Optional[dict[str, str]] = None) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        last_error: Optional[Exception] = None
        for attempt in range(1, self.retry_attempts + 1):
            try:
                response = self.session.get(url, params=params, timeout=self.timeout_seconds)
                response.raise_for_status()
                return response.json()["data"]
            except (requests.exceptions.RequestException, ValueError, KeyError, TypeError) as exc:
                last_error = exc
                if attempt < self.retry_attempts:
                    self._sleep(self.retry_delay_seconds)
        raise PriceFetchError(
            f"GET {url} failed after {self.retry_attempts} attempts: {last_error}"
        ) from last_error

    def fetch_price(self, asset_id: str) -> float:
        data = self._get(f"assets/{asset_id}")
        try:
            return float(data["priceUsd"])
        except (KeyError, TypeError, ValueError) as exc:
            raise PriceFetchError(f"Malformed price payload for {asset_id}: {data!r}") from exc

    def list_assets(self, limit: int = 20) -> list[AssetInfo]:
        data = self._get("assets")
        assets: list[AssetInfo] = []
        for item in data[:limit]:
            price = item.get("priceUsd")
            assets.append(
                AssetInfo(
                    id=str(item["id"]),
                    symbol=str(item.get("symbol", "")),
                    name=str(item.get("name", item["id"])),
                    price_usd=float(price) if price is not None else None,
                )
            )
        return assets

    def fetch_history(
        self,
        asset_id: str,
        interval: str = "m5",
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[HistoricalPrice]:
        if interval not in HISTORY_INTERVALS:
            raise ValueError(f"Unsupported history interval: {interval}")
        params = {"interval": interval}
        if start is not None:
            params["start"] = str(int(start.timestamp() * 1000))
        if end is not None:
            params["end"] = str(int(end.timestamp() * 1000))
        data = self._get(f"assets/{asset_id}/history", params=params)
        try:
            return [
                HistoricalPrice(
                    time=datetime.fromtimestamp(item["time"] / 1000.0, tz=timezone.utc),
                    price=float(item["priceUsd"]),
                )
                for item in data
            ]
        except (KeyError, TypeError, ValueError) as exc:
            raise PriceFetchError(f"Malformed history payload for {asset_id}") from exc
