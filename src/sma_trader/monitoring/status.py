"""Simulation status snapshot for presentation layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from sma_trader.execution.models import PortfolioSnapshot, TradeRecord
from sma_trader.simulator.models import PricePoint


@dataclass(frozen=True)
class SimulationStatus:
    now: datetime
    asset_id: str
    state: str
    price: Optional[float]
    short_sma: float
    long_sma: float
    signal: str
    portfolio: PortfolioSnapshot
    history: list[PricePoint] = field(default_factory=list)
    trades: list[TradeRecord] = field(default_factory=list)
