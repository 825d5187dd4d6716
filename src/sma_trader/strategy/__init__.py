"""Rolling windows, moving averages and crossover signals."""

from sma_trader.strategy.indicators import INSUFFICIENT_DATA, simple_moving_average
from sma_trader.strategy.signals import TRADE_SIGNALS, Signal, is_trade_transition, next_signal
from sma_trader.strategy.window import RollingWindow

__all__ = [
    "INSUFFICIENT_DATA",
    "RollingWindow",
    "Signal",
    "TRADE_SIGNALS",
    "is_trade_transition",
    "next_signal",
    "simple_moving_average",
]
