from __future__ import annotations

import argparse
import os
import time
from dataclasses import replace
from pathlib import Path

from sma_trader.config import load_config
from sma_trader.config.models import BotConfig
from sma_trader.market_data import CoinCapPriceSource, HISTORY_INTERVALS, PriceFetchError, ReplayPriceSource
from sma_trader.monitoring import AuditLog, LogNotifier, Monitor, build_simulation_status
from sma_trader.runtime import ManualScheduler, ThreadedScheduler, create_run_context
from sma_trader.runtime.status_store import write_simulation_status
from sma_trader.simulator import SimulationController


def _build_price_source(config: BotConfig) -> CoinCapPriceSource:
    settings = config.price_source
    return CoinCapPriceSource(
        base_url=settings.base_url,
        retry_attempts=settings.retry_attempts,
        retry_delay_seconds=settings.retry_delay_seconds,
        timeout_seconds=settings.timeout_seconds,
        api_key=os.getenv("COINCAP_API_KEY") or settings.api_key,
    )


def _print_summary(controller: SimulationController) -> None:
    portfolio = controller.portfolio()
    trades = controller.trades()
    print(f"Ticks: {len(controller.history())}  Trades: {len(trades)}  Signal: {controller.signal.value}")
    for trade in trades:
        print(
            f"  {trade.time.isoformat()} {trade.side.value:<4} {trade.quantity:.6f} "
            f"@ ${trade.price:.2f} = ${trade.total_value:.2f}"
        )
    print(
        f"Cash: ${portfolio.cash_balance:,.2f}  Asset: ${portfolio.asset_value:,.2f} "
        f"({portfolio.asset_quantity:.6f})  Total: ${portfolio.total_value:,.2f}"
    )


def _run_replay(config: BotConfig, source: CoinCapPriceSource, interval: str, audit: AuditLog, monitor: Monitor) -> None:
    history = source.fetch_history(config.simulation.asset_id, interval=interval)
    replay = ReplayPriceSource(point.price for point in history)
    times = iter([point.time for point in history])
    controller = SimulationController(
        replay,
        ManualScheduler(),
        config=config.simulation,
        audit_log=audit,
        monitor=monitor,
        clock=lambda: next(times),
    )
    while replay.remaining:
        controller.tick()
    _print_summary(controller)


def _run_live(config: BotConfig, source: CoinCapPriceSource, audit: AuditLog, monitor: Monitor, max_ticks: int | None) -> None:
    controller = SimulationController(
        source,
        ThreadedScheduler(audit_log=audit),
        config=config.simulation,
        audit_log=audit,
        monitor=monitor,
    )
    status_path = Path(config.runtime.status_path)
    try:
        controller.start()
    except PriceFetchError as exc:
        print(f"Warning: {exc}; retrying on the next tick")

    try:
        while True:
            status = build_simulation_status(controller, max_points=config.runtime.max_chart_points)
            write_simulation_status(status_path, status)
            if max_ticks is not None and len(controller.history()) >= max_ticks:
                break
            time.sleep(config.runtime.status_interval_seconds)
    except KeyboardInterrupt:
        pass
    finally:
        controller.stop()
        write_simulation_status(
            status_path,
            build_simulation_status(controller, max_points=config.runtime.max_chart_points),
        )
    _print_summary(controller)


def main() -> None:
    parser = argparse.ArgumentParser(description="Paper-trade an SMA crossover on live crypto prices")
    parser.add_argument("--config", default="configs/sma_default.yaml")
    parser.add_argument("--asset", help="Override simulation.asset_id")
    parser.add_argument("--interval-ms", type=int, help="Override simulation.polling_interval_ms")
    parser.add_argument("--list-assets", action="store_true", help="Print the top 20 assets and exit")
    parser.add_argument("--replay", choices=HISTORY_INTERVALS, help="Replay price history at this interval offline")
    parser.add_argument("--max-ticks", type=int, help="Stop after this many recorded ticks")
    args = parser.parse_args()

    config = load_config(args.config)
    simulation = config.simulation
    if args.asset:
        simulation = replace(simulation, asset_id=args.asset)
    if args.interval_ms:
        if args.interval_ms <= 0:
            parser.error("--interval-ms must be > 0")
        simulation = replace(simulation, polling_interval_ms=args.interval_ms)
    config = replace(config, simulation=simulation)

    source = _build_price_source(config)
    if args.list_assets:
        for asset in source.list_assets():
            price = f"${asset.price_usd:,.2f}" if asset.price_usd is not None else "n/a"
            print(f"{asset.id:<24} {asset.symbol:<8} {asset.name:<24} {price}")
        return

    context = create_run_context(args.config, config.run_id_prefix, config.simulation.asset_id)
    audit = AuditLog(config.monitoring.audit_log_path, run_id=context.run_id, config_hash=context.config_hash)
    monitor = Monitor(LogNotifier())
    print(f"Run {context.run_id}")

    if args.replay:
        _run_replay(config, source, args.replay, audit, monitor)
    else:
        _run_live(config, source, audit, monitor, args.max_ticks)


if __name__ == "__main__":
    main()
