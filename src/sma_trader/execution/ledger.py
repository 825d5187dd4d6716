"""Paper-trading ledger for all-in / all-out crossover trades."""

from __future__ import annotations

import math
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sma_trader.execution.models import PortfolioSnapshot, TradeRecord
from sma_trader.strategy.signals import Signal

if TYPE_CHECKING:
    from sma_trader.monitoring.audit import AuditLog


class TradeLedger:
    def __init__(
        self,
        initial_balance: float = 10000.0,
        buy_fraction: float = 0.9,
        audit_log: Optional[AuditLog] = None,
    ) -> None:
        if initial_balance < 0:
            raise ValueError("Initial balance must be >= 0")
        if not 0 < buy_fraction <= 1:
            raise ValueError("Buy fraction must be in (0, 1]")
        self.initial_balance = float(initial_balance)
        self.buy_fraction = buy_fraction
        self._audit_log = audit_log
        self.cash_balance = self.initial_balance
        self.asset_quantity = 0.0
        self._trades: list[TradeRecord] = []

    def _log(self, event: str, payload: dict) -> None:
        if self._audit_log is None:
            return
        self._audit_log.log(event, payload)

    def execute_trade(self, signal: Signal, price: float, time: datetime) -> Optional[TradeRecord]:
        """Apply a BUY or SELL at ``price``.

        Returns the appended record, or None when there is nothing to trade
        (no cash for a BUY, no holding for a SELL).
        """
        if not math.isfinite(price) or price <= 0:
            raise ValueError(f"Trade price must be a positive number, got {price!r}")
        if signal == Signal.BUY:
            return self._buy(price, time)
        if signal == Signal.SELL:
            return self._sell(price, time)
        raise ValueError(f"Cannot execute trade for signal {signal}")

    def _buy(self, price: float, time: datetime) -> Optional[TradeRecord]:
        if self.cash_balance <= 0:
            return None
        spend = self.cash_balance * self.buy_fraction
        quantity = spend / price
        self.cash_balance -= spend
        self.asset_quantity += quantity
        return self._append(TradeRecord(time, Signal.BUY, price, quantity, price * quantity))

    def _sell(self, price: float, time: datetime) -> Optional[TradeRecord]:
        if self.asset_quantity <= 0:
            return None
        quantity = self.asset_quantity
        sale_value = quantity * price
        self.cash_balance += sale_value
        self.asset_quantity = 0.0
        return self._append(TradeRecord(time, Signal.SELL, price, quantity, sale_value))

    def _append(self, record: TradeRecord) -> TradeRecord:
        self._trades.append(record)
        self._log(
            "trade_executed",
            {
                "side": record.side.value,
                "price": record.price,
                "quantity": record.quantity,
                "total_value": record.total_value,
                "cash_balance": self.cash_balance,
            },
        )
        return record

    def trades(self) -> list[TradeRecord]:
        return list(self._trades)

    def snapshot(self, current_price: Optional[float] = None) -> PortfolioSnapshot:
        asset_value = self.asset_quantity * current_price if current_price else 0.0
        return PortfolioSnapshot(
            cash_balance=self.cash_balance,
            asset_quantity=self.asset_quantity,
            asset_value=asset_value,
            total_value=self.cash_balance + asset_value,
        )

    def reset(self) -> None:
        self.cash_balance = self.initial_balance
        self.asset_quantity = 0.0
        self._trades = []
