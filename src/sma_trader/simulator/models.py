"""Simulation data structures."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from sma_trader.strategy.signals import Signal


class SimulationState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"


@dataclass(frozen=True)
class PricePoint:
    time: datetime
    price: float
    short_sma: float
    long_sma: float
    signal: Signal


@dataclass(frozen=True)
class SimulationConfig:
    asset_id: str = "bitcoin"
    short_window: int = 5
    long_window: int = 20
    polling_interval_ms: int = 60000
    initial_balance: float = 10000.0
    buy_fraction: float = 0.9

    @property
    def polling_interval_seconds(self) -> float:
        return self.polling_interval_ms / 1000.0
