"""SMA crossover paper-trading simulation."""

from __future__ import annotations

import math
import threading
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable, Optional

from sma_trader.execution.ledger import TradeLedger
from sma_trader.execution.models import PortfolioSnapshot, TradeRecord
from sma_trader.market_data.source import PriceFetchError, PriceSource, StartupFetchError
from sma_trader.simulator.models import PricePoint, SimulationConfig, SimulationState
from sma_trader.strategy.indicators import simple_moving_average
from sma_trader.strategy.signals import Signal, is_trade_transition, next_signal
from sma_trader.strategy.window import RollingWindow

if TYPE_CHECKING:
    from sma_trader.monitoring.audit import AuditLog
    from sma_trader.monitoring.monitor import Monitor
    from sma_trader.runtime.scheduler import TickScheduler


class SimulationController:
    """Polls a price source and paper-trades SMA crossovers.

    Each tick pushes one price into the short and long windows, recomputes
    both averages and the crossover signal, records a ``PricePoint`` and,
    when the signal flips to BUY or SELL, executes a ledger trade. Ticks are
    serialized; accessors return copies taken under the state lock.
    """

    def __init__(
        self,
        price_source: PriceSource,
        scheduler: TickScheduler,
        config: Optional[SimulationConfig] = None,
        audit_log: Optional[AuditLog] = None,
        monitor: Optional[Monitor] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.config = config or SimulationConfig()
        if self.config.polling_interval_ms <= 0:
            raise ValueError("Polling interval must be > 0")
        self.price_source = price_source
        self.scheduler = scheduler
        self._audit_log = audit_log
        self._monitor = monitor
        self._clock = clock or (lambda: datetime.now(timezone.utc))

        self._short_window: RollingWindow[float] = RollingWindow(self.config.short_window)
        self._long_window: RollingWindow[float] = RollingWindow(self.config.long_window)
        self._ledger = TradeLedger(
            initial_balance=self.config.initial_balance,
            buy_fraction=self.config.buy_fraction,
            audit_log=audit_log,
        )
        self._signal = Signal.HOLD
        self._history: list[PricePoint] = []
        self._state = SimulationState.IDLE
        # Bumped by every start and stop; a start whose run was stopped
        # during its initial tick does not arm the scheduler.
        self._run_generation = 0

        self._lifecycle_lock = threading.Lock()
        self._tick_lock = threading.Lock()
        self._state_lock = threading.Lock()

    @property
    def asset_id(self) -> str:
        return self.config.asset_id

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def signal(self) -> Signal:
        return self._signal

    def _log(self, event: str, payload: dict) -> None:
        if self._audit_log is None:
            return
        self._audit_log.log(event, payload)

    def start(self) -> None:
        """Tick once, then arm the scheduler.

        A failed initial fetch still arms the scheduler; the failure is
        raised afterwards as ``StartupFetchError``. If ``stop`` is called
        while the initial tick is in flight the scheduler is never armed.
        """
        with self._lifecycle_lock:
            if self._state == SimulationState.RUNNING:
                return
            self._state = SimulationState.RUNNING
            self._run_generation += 1
            generation = self._run_generation

        startup_error: Optional[PriceFetchError] = None
        with self._tick_lock:
            try:
                self._tick_unlocked()
            except PriceFetchError as exc:
                self._record_fetch_failure(exc)
                startup_error = exc

        with self._lifecycle_lock:
            armed = generation == self._run_generation
            if armed:
                self.scheduler.schedule(self.config.polling_interval_seconds, self.tick)

        if armed:
            self._log(
                "simulation_started",
                {"asset_id": self.asset_id, "interval_ms": self.config.polling_interval_ms},
            )
            if self._monitor is not None:
                self._monitor.started(self.asset_id, self.config.polling_interval_seconds)

        if startup_error is not None:
            raise StartupFetchError(f"Initial price fetch failed: {startup_error}") from startup_error

    def stop(self) -> None:
        with self._lifecycle_lock:
            if self._state == SimulationState.IDLE:
                return
            self._run_generation += 1
            self._state = SimulationState.IDLE
            self.scheduler.cancel()
        self._log("simulation_stopped", {"asset_id": self.asset_id})
        if self._monitor is not None:
            self._monitor.stopped(self.asset_id)

    def reset(self) -> None:
        self.stop()
        with self._tick_lock, self._state_lock:
            self._short_window.clear()
            self._long_window.clear()
            self._signal = Signal.HOLD
            self._history = []
            self._ledger.reset()
        self._log("simulation_reset", {"asset_id": self.asset_id})
        if self._monitor is not None:
            self._monitor.reset(self.asset_id)

    def tick(self) -> Optional[PricePoint]:
        """Run one polling step.

        Returns the appended ``PricePoint``, or None when the price fetch
        failed and the tick was skipped.
        """
        with self._tick_lock:
            try:
                return self._tick_unlocked()
            except PriceFetchError as exc:
                self._record_fetch_failure(exc)
                return None

    def _tick_unlocked(self) -> PricePoint:
        price = self._fetch_price()
        now = self._clock()
        trade: Optional[TradeRecord] = None
        with self._state_lock:
            self._short_window.push(price)
            self._long_window.push(price)
            short_sma = simple_moving_average(self._short_window.snapshot())
            long_sma = simple_moving_average(self._long_window.snapshot())

            previous = self._signal
            current = next_signal(short_sma, long_sma, previous)
            point = PricePoint(time=now, price=price, short_sma=short_sma, long_sma=long_sma, signal=current)
            self._history.append(point)
            if is_trade_transition(previous, current):
                trade = self._ledger.execute_trade(current, price, now)
            self._signal = current

        self._log(
            "tick",
            {
                "asset_id": self.asset_id,
                "price": price,
                "short_sma": short_sma,
                "long_sma": long_sma,
                "signal": current.value,
            },
        )
        if self._monitor is not None:
            self._monitor.tick(self.asset_id, price, short_sma, long_sma, current.value)
            if trade is not None:
                self._monitor.trade(self.asset_id, trade.side.value, trade.quantity, trade.price, trade.total_value)
        return point

    def _fetch_price(self) -> float:
        price = self.price_source.fetch_price(self.asset_id)
        if not isinstance(price, (int, float)) or not math.isfinite(price) or price <= 0:
            raise PriceFetchError(f"Invalid price for {self.asset_id}: {price!r}")
        return float(price)

    def _record_fetch_failure(self, exc: PriceFetchError) -> None:
        self._log("price_fetch_failed", {"asset_id": self.asset_id, "error": str(exc)})
        if self._monitor is not None:
            self._monitor.price_fetch_failed(self.asset_id, str(exc))

    def history(self) -> list[PricePoint]:
        with self._state_lock:
            return list(self._history)

    def trades(self) -> list[TradeRecord]:
        with self._state_lock:
            return self._ledger.trades()

    def portfolio(self, current_price: Optional[float] = None) -> PortfolioSnapshot:
        with self._state_lock:
            if not current_price and self._history:
                current_price = self._history[-1].price
            return self._ledger.snapshot(current_price)
