"""Market data records returned by price sources."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class AssetInfo:
    id: str
    symbol: str
    name: str
    price_usd: Optional[float] = None


@dataclass(frozen=True)
class HistoricalPrice:
    time: datetime
    price: float
