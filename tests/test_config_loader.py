from datetime import datetime, timezone
from pathlib import Path

import pytest

yaml = pytest.importorskip("yaml")

from sma_trader.config import load_config, serialize_config
from sma_trader.runtime import create_run_context


def test_load_config_sample():
    config = load_config(Path("configs") / "sma_default.yaml")
    assert config.simulation.asset_id == "bitcoin"
    assert config.simulation.short_window == 5
    assert config.simulation.long_window == 20
    assert config.simulation.polling_interval_seconds == 60.0
    assert config.simulation.buy_fraction == 0.9
    assert config.price_source.retry_attempts == 3
    assert config.runtime.max_chart_points == 50


def test_load_config_defaults(tmp_path):
    path = tmp_path / "minimal.yaml"
    path.write_text("name: demo\nversion: 2\nsimulation:\n  asset_id: ethereum\n", encoding="utf-8")
    config = load_config(path)
    assert config.run_id_prefix == "demo"
    assert config.version == "2"
    assert config.simulation.asset_id == "ethereum"
    assert config.simulation.initial_balance == 10000.0
    assert config.monitoring.audit_log_path == "runtime/audit.log"


@pytest.mark.parametrize(
    "body, message",
    [
        ("- just\n- a list\n", "mapping"),
        ("name: demo\nsimulation: {}\n", "version"),
        ("name: demo\nversion: 1\nsimulation:\n  short_window: 0\n", "Window"),
        ("name: demo\nversion: 1\nsimulation:\n  buy_fraction: 1.5\n", "buy_fraction"),
        ("name: demo\nversion: 1\nsimulation:\n  polling_interval_ms: 0\n", "polling_interval_ms"),
    ],
)
def test_load_config_rejects_invalid(tmp_path, body, message):
    path = tmp_path / "bad.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ValueError, match=message):
        load_config(path)


def test_serialize_masks_api_key(tmp_path):
    path = tmp_path / "keyed.yaml"
    path.write_text(
        "name: demo\nversion: 1\nsimulation: {}\nprice_source:\n  api_key: abc\n",
        encoding="utf-8",
    )
    payload = serialize_config(load_config(path))
    assert payload["price_source"]["api_key"] == "***"
    assert payload["simulation"]["long_window"] == 20


def test_run_context_tags_asset_and_config_hash(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("name: demo\nversion: 1\nsimulation: {}\n", encoding="utf-8")
    started = datetime(2024, 6, 1, 12, 30, 5, tzinfo=timezone.utc)
    context = create_run_context(path, "sma", "Wrapped Bitcoin", started_at=started)

    assert context.asset_id == "Wrapped Bitcoin"
    assert context.run_id == f"sma-wrapped-bitcoin-20240601T123005Z-{context.config_hash[:8]}"
    assert context.started_at == started
