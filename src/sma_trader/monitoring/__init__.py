"""Monitoring exports."""

from sma_trader.monitoring.audit import AuditLog
from sma_trader.monitoring.monitor import Monitor
from sma_trader.monitoring.notifier import LogNotifier, Notifier
from sma_trader.monitoring.runtime import build_simulation_status
from sma_trader.monitoring.status import SimulationStatus

__all__ = [
    "AuditLog",
    "LogNotifier",
    "Monitor",
    "Notifier",
    "SimulationStatus",
    "build_simulation_status",
]
