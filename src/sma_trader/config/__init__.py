"""Config loading."""

from sma_trader.config.loader import compute_config_hash, load_config, serialize_config
from sma_trader.config.models import (
    ACCEPTED_POLLING_INTERVALS_MS,
    BotConfig,
    MonitoringConfig,
    PriceSourceConfig,
    RuntimeConfig,
)

__all__ = [
    "ACCEPTED_POLLING_INTERVALS_MS",
    "BotConfig",
    "MonitoringConfig",
    "PriceSourceConfig",
    "RuntimeConfig",
    "compute_config_hash",
    "load_config",
    "serialize_config",
]
