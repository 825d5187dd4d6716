"""Edge-triggered SMA crossover signal."""

from __future__ import annotations

from enum import Enum

from sma_trader.strategy.indicators import INSUFFICIENT_DATA


class Signal(str, Enum):
    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"


TRADE_SIGNALS = frozenset({Signal.BUY, Signal.SELL})


def next_signal(short_sma: float, long_sma: float, previous: Signal) -> Signal:
    """Return the signal for this tick given the previous one.

    A new BUY or SELL is emitted only when the short average crosses the long
    one; otherwise the previous signal carries over. Equal averages never
    cause a transition. An insufficient-data average forces HOLD.
    """
    if short_sma == INSUFFICIENT_DATA or long_sma == INSUFFICIENT_DATA:
        return Signal.HOLD
    if short_sma > long_sma and previous != Signal.BUY:
        return Signal.BUY
    if short_sma < long_sma and previous != Signal.SELL:
        return Signal.SELL
    return previous


def is_trade_transition(previous: Signal, current: Signal) -> bool:
    return current != previous and current in TRADE_SIGNALS
