"""Paper-trading ledger."""

from sma_trader.execution.ledger import TradeLedger
from sma_trader.execution.models import PortfolioSnapshot, TradeRecord

__all__ = [
    "PortfolioSnapshot",
    "TradeLedger",
    "TradeRecord",
]
