"""Run identifiers for simulation sessions."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from sma_trader.config.loader import compute_config_hash


@dataclass(frozen=True)
class RunContext:
    run_id: str
    asset_id: str
    config_path: Path
    config_hash: str
    started_at: datetime


def _slug(value: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-") or "asset"


def create_run_context(
    config_path: str | Path,
    run_id_prefix: str,
    asset_id: str,
    started_at: Optional[datetime] = None,
) -> RunContext:
    """Tag a session as ``<prefix>-<asset>-<UTC stamp>-<config hash[:8]>``."""
    path = Path(config_path)
    config_hash = compute_config_hash(path)
    started_at = started_at or datetime.now(timezone.utc)
    stamp = started_at.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    return RunContext(
        run_id=f"{run_id_prefix}-{_slug(asset_id)}-{stamp}-{config_hash[:8]}",
        asset_id=asset_id,
        config_path=path,
        config_hash=config_hash,
        started_at=started_at,
    )
