"""Helpers to produce simulation status snapshots."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sma_trader.monitoring.status import SimulationStatus
from sma_trader.simulator.controller import SimulationController


def build_simulation_status(
    controller: SimulationController,
    now: Optional[datetime] = None,
    max_points: Optional[int] = None,
) -> SimulationStatus:
    history = controller.history()
    if max_points is not None:
        history = history[-max_points:] if max_points > 0 else []
    latest = history[-1] if history else None
    return SimulationStatus(
        now=now or datetime.now(timezone.utc),
        asset_id=controller.asset_id,
        state=controller.state.value,
        price=latest.price if latest else None,
        short_sma=latest.short_sma if latest else 0.0,
        long_sma=latest.long_sma if latest else 0.0,
        signal=controller.signal.value,
        portfolio=controller.portfolio(),
        history=history,
        trades=controller.trades(),
    )
