from datetime import datetime, timezone

import pytest

from sma_trader.execution import TradeLedger
from sma_trader.monitoring import AuditLog
from sma_trader.strategy import Signal

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def test_buy_spends_fraction_of_cash():
    ledger = TradeLedger(initial_balance=10000, buy_fraction=0.9)
    record = ledger.execute_trade(Signal.BUY, 100.0, NOW)

    assert record is not None
    assert record.side == Signal.BUY
    assert record.quantity == pytest.approx(90.0)
    assert record.total_value == pytest.approx(9000.0)
    assert ledger.cash_balance == pytest.approx(1000.0)
    assert ledger.asset_quantity == pytest.approx(90.0)


def test_sell_liquidates_everything():
    ledger = TradeLedger(initial_balance=10000, buy_fraction=0.9)
    ledger.execute_trade(Signal.BUY, 100.0, NOW)
    record = ledger.execute_trade(Signal.SELL, 120.0, NOW)

    assert record.quantity == pytest.approx(90.0)
    assert record.total_value == pytest.approx(10800.0)
    assert ledger.cash_balance == pytest.approx(11800.0)
    assert ledger.asset_quantity == 0.0
    assert [trade.side for trade in ledger.trades()] == [Signal.BUY, Signal.SELL]


def test_noop_trades_append_nothing():
    ledger = TradeLedger(initial_balance=0.0)
    assert ledger.execute_trade(Signal.BUY, 100.0, NOW) is None

    ledger = TradeLedger(initial_balance=500.0)
    assert ledger.execute_trade(Signal.SELL, 100.0, NOW) is None
    assert ledger.trades() == []
    assert ledger.cash_balance == 500.0


def test_hold_is_not_tradeable():
    ledger = TradeLedger()
    with pytest.raises(ValueError):
        ledger.execute_trade(Signal.HOLD, 100.0, NOW)


def test_snapshot_values():
    ledger = TradeLedger(initial_balance=10000, buy_fraction=0.5)
    assert ledger.snapshot().total_value == 10000.0
    ledger.execute_trade(Signal.BUY, 50.0, NOW)

    snapshot = ledger.snapshot(60.0)
    assert snapshot.cash_balance == pytest.approx(5000.0)
    assert snapshot.asset_quantity == pytest.approx(100.0)
    assert snapshot.asset_value == pytest.approx(6000.0)
    assert snapshot.total_value == pytest.approx(11000.0)
    assert ledger.snapshot().asset_value == 0.0


def test_reset_restores_initial_state():
    ledger = TradeLedger(initial_balance=2500)
    ledger.execute_trade(Signal.BUY, 10.0, NOW)
    ledger.reset()
    assert ledger.cash_balance == 2500.0
    assert ledger.asset_quantity == 0.0
    assert ledger.trades() == []


def test_invalid_buy_fraction():
    with pytest.raises(ValueError):
        TradeLedger(buy_fraction=0.0)
    with pytest.raises(ValueError):
        TradeLedger(buy_fraction=1.5)


def test_trades_are_audited(tmp_path):
    audit = AuditLog(tmp_path / "audit.log")
    ledger = TradeLedger(audit_log=audit)
    ledger.execute_trade(Signal.BUY, 100.0, NOW)

    events = audit.read_events()
    assert [event["event"] for event in events] == ["trade_executed"]
    assert events[0]["payload"]["side"] == "BUY"


@pytest.mark.parametrize("price", [0.0, -10.0, float("nan"), float("inf")])
def test_buy_rejects_invalid_price(price):
    ledger = TradeLedger(initial_balance=10000)
    with pytest.raises(ValueError, match="positive"):
        ledger.execute_trade(Signal.BUY, price, NOW)
    assert ledger.trades() == []
    assert ledger.cash_balance == 10000.0


@pytest.mark.parametrize("price", [0.0, -10.0, float("nan")])
def test_sell_rejects_invalid_price(price):
    ledger = TradeLedger(initial_balance=10000)
    ledger.execute_trade(Signal.BUY, 100.0, NOW)
    with pytest.raises(ValueError, match="positive"):
        ledger.execute_trade(Signal.SELL, price, NOW)
    assert len(ledger.trades()) == 1
    assert ledger.asset_quantity == pytest.approx(90.0)
