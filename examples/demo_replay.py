from datetime import datetime, timedelta, timezone
from pathlib import Path

from sma_trader.market_data import ReplayPriceSource
from sma_trader.monitoring import AuditLog, LogNotifier, Monitor
from sma_trader.runtime import ManualScheduler
from sma_trader.simulator import SimulationConfig, SimulationController

prices = [90, 90, 90, 90, 100, 200, 200, 200, 120, None, 110, 105]
start = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
clock_times = iter(start + timedelta(seconds=10 * i) for i in range(len(prices)))

audit = AuditLog(Path("runtime") / "demo_audit.log")
scheduler = ManualScheduler()
controller = SimulationController(
    ReplayPriceSource(prices),
    scheduler,
    config=SimulationConfig(short_window=2, long_window=4, polling_interval_ms=10000),
    audit_log=audit,
    monitor=Monitor(LogNotifier()),
    clock=lambda: next(clock_times),
)

controller.start()
scheduler.fire(len(prices) - 1)
controller.stop()

print("Trades:", controller.trades())
print("Portfolio:", controller.portfolio())
