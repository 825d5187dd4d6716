from sma_trader.market_data import ReplayPriceSource
from sma_trader.monitoring import Monitor, Notifier
from sma_trader.runtime import ManualScheduler
from sma_trader.simulator import SimulationConfig, SimulationController


class RecordingNotifier(Notifier):
    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def notify(self, event: str, message: str) -> None:
        self.events.append((event, message))


def test_monitor_receives_ticks_trades_and_failures():
    notifier = RecordingNotifier()
    controller = SimulationController(
        ReplayPriceSource([90, 90, 90, 90, 100, None]),
        ManualScheduler(),
        config=SimulationConfig(short_window=2, long_window=4),
        monitor=Monitor(notifier),
    )
    for _ in range(6):
        controller.tick()
    controller.reset()

    kinds = [event for event, _ in notifier.events]
    assert kinds.count("TICK") == 5
    assert kinds.count("BUY") == 1
    assert kinds.count("PRICE_FETCH") == 1
    assert kinds[-1] == "RESET"
    buy_message = dict(notifier.events)["BUY"]
    assert buy_message == "90.000000 bitcoin @ $100.00 = $9000.00"
