import pytest

from sma_trader.strategy import Signal, is_trade_transition, next_signal, simple_moving_average


def test_average_edge_cases():
    assert simple_moving_average([]) == 0
    assert simple_moving_average([7.5]) == 7.5
    assert simple_moving_average([1.0, 2.0, 4.0]) == pytest.approx(7.0 / 3.0)


@pytest.mark.parametrize("previous", list(Signal))
def test_insufficient_data_forces_hold(previous):
    assert next_signal(0, 123.0, previous) == Signal.HOLD
    assert next_signal(123.0, 0, previous) == Signal.HOLD


def test_crossover_transitions():
    assert next_signal(5, 3, Signal.HOLD) == Signal.BUY
    assert next_signal(5, 3, Signal.SELL) == Signal.BUY
    assert next_signal(5, 3, Signal.BUY) == Signal.BUY
    assert next_signal(3, 5, Signal.BUY) == Signal.SELL
    assert next_signal(3, 5, Signal.HOLD) == Signal.SELL
    assert next_signal(3, 5, Signal.SELL) == Signal.SELL


@pytest.mark.parametrize("previous", list(Signal))
def test_equal_averages_keep_previous(previous):
    assert next_signal(5, 5, previous) == previous


def test_trade_transition_only_on_change_to_buy_or_sell():
    assert is_trade_transition(Signal.HOLD, Signal.BUY) is True
    assert is_trade_transition(Signal.BUY, Signal.SELL) is True
    assert is_trade_transition(Signal.BUY, Signal.BUY) is False
    assert is_trade_transition(Signal.BUY, Signal.HOLD) is False
