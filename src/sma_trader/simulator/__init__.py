"""SMA crossover simulation."""

from sma_trader.simulator.controller import SimulationController
from sma_trader.simulator.models import PricePoint, SimulationConfig, SimulationState

__all__ = [
    "PricePoint",
    "SimulationConfig",
    "SimulationController",
    "SimulationState",
]
