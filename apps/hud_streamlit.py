from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

import streamlit as st

from sma_trader.config import ACCEPTED_POLLING_INTERVALS_MS
from sma_trader.runtime.status_store import read_simulation_status


def _format_currency(value: float) -> str:
    return f"${value:,.2f}"


def _format_time(value: str) -> str:
    try:
        return datetime.fromisoformat(value).strftime("%Y-%m-%d %H:%M:%S")
    except ValueError:
        return value


def main() -> None:
    st.set_page_config(page_title="SMA Crossover Simulator", layout="wide")
    st.title("Cryptocurrency Trading Simulator")
    st.caption("Simulates trading based on a Simple Moving Average (SMA) crossover strategy")

    default_status_path = os.getenv("SMA_STATUS_PATH", "runtime/status.json")
    status_path = Path(st.sidebar.text_input("Status path", value=default_status_path))
    max_points = st.sidebar.number_input("Chart points", min_value=5, max_value=500, value=50, step=5)
    st.sidebar.caption(
        "Polling intervals: " + ", ".join(f"{ms // 1000}s" for ms in ACCEPTED_POLLING_INTERVALS_MS)
    )
    if st.sidebar.button("Refresh"):
        st.rerun()

    try:
        status = read_simulation_status(status_path)
    except ValueError:
        status = None
    if status is None:
        st.warning(f"No status found at {status_path}")
        return

    asset_id = status.get("asset_id", "")
    price = status.get("price")
    portfolio = status.get("portfolio", {})

    if price:
        st.subheader(f"Current {asset_id.upper()} Price: {_format_currency(price)}")
        st.caption(f"Last updated: {_format_time(status.get('now', ''))}  |  State: {status.get('state')}")

    st.subheader("Portfolio Summary")
    col_a, col_b, col_c = st.columns(3)
    col_a.metric("Cash Balance", _format_currency(portfolio.get("cash_balance", 0.0)))
    col_b.metric("Asset Value", _format_currency(portfolio.get("asset_value", 0.0)))
    col_b.caption(f"{portfolio.get('asset_quantity', 0.0):.6f} {asset_id.upper()} @ {_format_currency(price or 0.0)}")
    col_c.metric("Total Value", _format_currency(portfolio.get("total_value", 0.0)))

    st.subheader("Price and Moving Averages")
    history = status.get("history", [])[-int(max_points):]
    if history:
        st.line_chart(
            {
                "price": [point["price"] for point in history],
                "short_sma": [point["short_sma"] or None for point in history],
                "long_sma": [point["long_sma"] or None for point in history],
            }
        )
        st.caption(f"Signal: {status.get('signal')}")
    else:
        st.info("Waiting for price data.")

    st.subheader("Trade History")
    trades = sorted(status.get("trades", []), key=lambda trade: trade["time"], reverse=True)
    if not trades:
        st.info("No trades executed yet.")
    else:
        st.table(
            [
                {
                    "Time": _format_time(trade["time"]),
                    "Type": trade["side"],
                    "Price": _format_currency(trade["price"]),
                    "Quantity": f"{trade['quantity']:.6f}",
                    "Total Value": _format_currency(trade["total_value"]),
                }
                for trade in trades
            ]
        )

    st.subheader("Trading Strategy Explanation")
    st.markdown(
        "- Short-term SMA: average of the most recent short-window prices\n"
        "- Long-term SMA: average of the most recent long-window prices\n"
        "- Buy signal: short-term SMA crosses above long-term SMA\n"
        "- Sell signal: short-term SMA crosses below long-term SMA\n\n"
        "Prices are kept in fixed-size rolling windows, so each update costs the same "
        "no matter how long the simulation runs."
    )


if __name__ == "__main__":
    main()
