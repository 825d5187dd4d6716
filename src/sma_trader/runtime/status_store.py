"""Helpers to store simulation status snapshots for the HUD."""

from __future__ import annotations

import json
import os
from dataclasses import asdict
from pathlib import Path

from sma_trader.monitoring.status import SimulationStatus


def status_to_dict(status: SimulationStatus) -> dict:
    payload = asdict(status)
    payload["now"] = status.now.isoformat()
    for point in payload["history"]:
        point["time"] = point["time"].isoformat()
        point["signal"] = point["signal"].value
    for trade in payload["trades"]:
        trade["time"] = trade["time"].isoformat()
        trade["side"] = trade["side"].value
    return payload


def write_simulation_status(path: str | Path, status: SimulationStatus) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    tmp_path.write_text(json.dumps(status_to_dict(status), indent=2), encoding="utf-8")
    os.replace(tmp_path, path)


def read_simulation_status(path: str | Path) -> dict | None:
    path = Path(path)
    if not path.exists():
        return None
    return json.loads(path.read_text(encoding="utf-8"))
