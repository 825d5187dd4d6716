"""Price source interface and fetch errors."""

from __future__ import annotations


class PriceFetchError(RuntimeError):
    """The price source could not produce a price for this request."""


class StartupFetchError(PriceFetchError):
    """The synchronous fetch performed by ``start()`` failed."""


class PriceSource:
    def fetch_price(self, asset_id: str) -> float:  # pragma: no cover - interface
        raise NotImplementedError
