"""Configuration models for simulation runs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sma_trader.market_data.coincap import DEFAULT_BASE_URL
from sma_trader.simulator.models import SimulationConfig

# Polling intervals offered by the presentation layer's selector.
ACCEPTED_POLLING_INTERVALS_MS = (10000, 30000, 60000, 300000)


@dataclass(frozen=True)
class PriceSourceConfig:
    base_url: str = DEFAULT_BASE_URL
    retry_attempts: int = 3
    retry_delay_seconds: float = 2.0
    timeout_seconds: float = 10.0
    api_key: Optional[str] = None


@dataclass(frozen=True)
class MonitoringConfig:
    audit_log_path: str = "runtime/audit.log"


@dataclass(frozen=True)
class RuntimeConfig:
    status_path: str = "runtime/status.json"
    status_interval_seconds: float = 1.0
    max_chart_points: int = 50


@dataclass(frozen=True)
class BotConfig:
    name: str
    version: str
    run_id_prefix: str
    simulation: SimulationConfig
    price_source: PriceSourceConfig = PriceSourceConfig()
    monitoring: MonitoringConfig = MonitoringConfig()
    runtime: RuntimeConfig = RuntimeConfig()
