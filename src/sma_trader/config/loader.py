"""Load configuration files."""

from __future__ import annotations

import hashlib
from dataclasses import asdict
from pathlib import Path
from typing import Any

import yaml

from sma_trader.config.models import (
    BotConfig,
    MonitoringConfig,
    PriceSourceConfig,
    RuntimeConfig,
)
from sma_trader.market_data.coincap import DEFAULT_BASE_URL
from sma_trader.simulator.models import SimulationConfig


def load_config(path: str | Path) -> BotConfig:
    path = Path(path)
    data = _load_yaml(path)

    name = str(_require(data, "name"))
    version = str(_require(data, "version"))
    run_id_prefix = str(data.get("run_id_prefix", name))

    return BotConfig(
        name=name,
        version=version,
        run_id_prefix=run_id_prefix,
        simulation=_parse_simulation(_require(data, "simulation")),
        price_source=_parse_price_source(data.get("price_source", {})),
        monitoring=_parse_monitoring(data.get("monitoring", {})),
        runtime=_parse_runtime(data.get("runtime", {})),
    )


def compute_config_hash(path: str | Path) -> str:
    path = Path(path)
    content = path.read_bytes()
    return hashlib.sha256(content).hexdigest()


def _load_yaml(path: Path) -> dict[str, Any]:
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Config must be a mapping")
    return data


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"Missing required config key: {key}")
    return data[key]


def _section(data: Any, key: str) -> dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config section {key} must be a mapping")
    return data


def _parse_simulation(data: Any) -> SimulationConfig:
    data = _section(data, "simulation")
    config = SimulationConfig(
        asset_id=str(data.get("asset_id", "bitcoin")),
        short_window=int(data.get("short_window", 5)),
        long_window=int(data.get("long_window", 20)),
        polling_interval_ms=int(data.get("polling_interval_ms", 60000)),
        initial_balance=float(data.get("initial_balance", 10000.0)),
        buy_fraction=float(data.get("buy_fraction", 0.9)),
    )
    if config.short_window < 1 or config.long_window < 1:
        raise ValueError("Window sizes must be >= 1")
    if config.polling_interval_ms <= 0:
        raise ValueError(f"Invalid polling_interval_ms: {config.polling_interval_ms}")
    if config.initial_balance < 0:
        raise ValueError(f"Invalid initial_balance: {config.initial_balance}")
    if not 0 < config.buy_fraction <= 1:
        raise ValueError(f"Invalid buy_fraction: {config.buy_fraction}")
    return config


def _parse_price_source(data: Any) -> PriceSourceConfig:
    data = _section(data, "price_source")
    config = PriceSourceConfig(
        base_url=str(data.get("base_url", DEFAULT_BASE_URL)),
        retry_attempts=int(data.get("retry_attempts", 3)),
        retry_delay_seconds=float(data.get("retry_delay_seconds", 2.0)),
        timeout_seconds=float(data.get("timeout_seconds", 10.0)),
        api_key=data.get("api_key"),
    )
    if config.retry_attempts < 1:
        raise ValueError(f"Invalid retry_attempts: {config.retry_attempts}")
    return config


def _parse_monitoring(data: Any) -> MonitoringConfig:
    data = _section(data, "monitoring")
    return MonitoringConfig(
        audit_log_path=str(data.get("audit_log_path", "runtime/audit.log")),
    )


def _parse_runtime(data: Any) -> RuntimeConfig:
    data = _section(data, "runtime")
    return RuntimeConfig(
        status_path=str(data.get("status_path", "runtime/status.json")),
        status_interval_seconds=float(data.get("status_interval_seconds", 1.0)),
        max_chart_points=int(data.get("max_chart_points", 50)),
    )


def serialize_config(config: BotConfig) -> dict[str, Any]:
    payload = asdict(config)
    if payload["price_source"].get("api_key"):
        payload["price_source"]["api_key"] = "***"
    return payload
