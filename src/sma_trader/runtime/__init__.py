"""Runtime scheduling and run context exports."""

from sma_trader.runtime.context import RunContext, create_run_context
from sma_trader.runtime.scheduler import ManualScheduler, ThreadedScheduler, TickScheduler

__all__ = [
    "ManualScheduler",
    "RunContext",
    "ThreadedScheduler",
    "TickScheduler",
    "create_run_context",
]
