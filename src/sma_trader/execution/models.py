"""Ledger records for simulated trades."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sma_trader.strategy.signals import Signal


@dataclass(frozen=True)
class TradeRecord:
    time: datetime
    side: Signal  # BUY or SELL
    price: float
    quantity: float
    total_value: float


@dataclass(frozen=True)
class PortfolioSnapshot:
    cash_balance: float
    asset_quantity: float
    asset_value: float
    total_value: float
