"""Human-facing notices for the running simulation."""

from __future__ import annotations

from dataclasses import dataclass

from sma_trader.monitoring.notifier import Notifier


@dataclass
class Monitor:
    notifier: Notifier

    def started(self, asset_id: str, interval_seconds: float) -> None:
        self.notifier.notify("START", f"simulating {asset_id} every {interval_seconds:g}s")

    def stopped(self, asset_id: str) -> None:
        self.notifier.notify("STOP", f"simulation for {asset_id} stopped")

    def reset(self, asset_id: str) -> None:
        self.notifier.notify("RESET", f"simulation for {asset_id} reset")

    def tick(self, asset_id: str, price: float, short_sma: float, long_sma: float, signal: str) -> None:
        self.notifier.notify(
            "TICK",
            f"{asset_id}: ${price:.2f} | Short SMA: {short_sma:.2f} | Long SMA: {long_sma:.2f} | Signal: {signal}",
        )

    def trade(self, asset_id: str, side: str, quantity: float, price: float, total_value: float) -> None:
        self.notifier.notify(side, f"{quantity:.6f} {asset_id} @ ${price:.2f} = ${total_value:.2f}")

    def price_fetch_failed(self, asset_id: str, reason: str) -> None:
        self.notifier.notify("PRICE_FETCH", f"{asset_id}: {reason}")
