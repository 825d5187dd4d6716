import pytest

from sma_trader.strategy import RollingWindow


@pytest.mark.parametrize("capacity", [1, 2, 5, 20])
def test_window_partial_fill_keeps_push_order(capacity):
    window = RollingWindow(capacity)
    pushed = [float(i) for i in range(capacity - 1)]
    for value in pushed:
        window.push(value)
    assert window.snapshot() == pushed
    assert window.is_full() is False
    assert len(window) == capacity - 1


@pytest.mark.parametrize("capacity", [1, 3, 5])
def test_window_full_and_eviction(capacity):
    window = RollingWindow(capacity)
    for value in range(capacity):
        window.push(value)
    assert window.is_full() is True
    assert window.snapshot() == list(range(capacity))

    window.push(capacity)
    snapshot = window.snapshot()
    assert 0 not in snapshot
    assert snapshot == list(range(1, capacity + 1))
    assert len(snapshot) == capacity


def test_window_snapshot_is_chronological_after_many_wraps():
    window = RollingWindow(4)
    for value in range(11):
        window.push(value)
    assert window.snapshot() == [7, 8, 9, 10]
    assert window.is_full() is True


def test_window_snapshot_is_a_copy():
    window = RollingWindow(3)
    window.push(1.0)
    snapshot = window.snapshot()
    snapshot.append(99.0)
    assert window.snapshot() == [1.0]


def test_window_clear_matches_fresh_window():
    window = RollingWindow(3)
    for value in range(5):
        window.push(value)
    window.clear()
    assert window.snapshot() == []
    assert window.is_full() is False
    window.push(42)
    assert window.snapshot() == [42]


def test_window_rejects_zero_capacity():
    with pytest.raises(ValueError):
        RollingWindow(0)
