"""Derived market data: candlesticks, volumes, mean prices and trade counts."""

from __future__ import annotations

import math
from collections import Counter, defaultdict

from merkelrex.candlestick import Candlestick
from merkelrex.order_book import OrderBook, high_price, low_price
from merkelrex.order_book_entry import OrderBookType


def _round_half_away(value: float, digits: int) -> float:
    scale = 10.0**digits
    return math.copysign(math.floor(abs(value) * scale + 0.5), value) / scale


def _timestamps(book: OrderBook) -> list[str]:
    return sorted({order.timestamp for order in book})


def trades_per_product(book: OrderBook) -> dict[str, int]:
    """Count the orders in the book for each product, keyed in sorted order."""
    counts = Counter(order.product for order in book)
    return dict(sorted(counts.items()))


def mean_price_data(
    book: OrderBook, order_type: OrderBookType, product: str
) -> list[tuple[str, float]]:
    """Average price per "HH:MM" minute, rounded to 6 decimals, sorted by minute."""
    prices_by_minute: dict[str, list[float]] = defaultdict(list)
    for order in book:
        if order.order_type is order_type and order.product == product:
            prices_by_minute[order.timestamp[11:16]].append(order.price)
    return [
        (minute, _round_half_away(sum(prices) / len(prices), 6))
        for minute, prices in sorted(prices_by_minute.items())
        if prices
    ]


def candlestick_data(
    book: OrderBook, side: OrderBookType, product: str
) -> list[Candlestick]:
    """One candle per timestamp that has orders on ``side`` for ``product``.

    The close is the amount-weighted mean price; the open is the previous
    candle's close, or the candle's own close for the first one.
    """
    candles: list[Candlestick] = []
    for timestamp in _timestamps(book):
        entries = book.get_orders(side, product, timestamp)
        if not entries:
            continue
        total_value = sum(e.price * e.amount for e in entries)
        total_amount = sum(e.amount for e in entries)
        close = total_value / total_amount if total_amount else math.nan
        open_ = candles[-1].close if candles else close
        candles.append(
            Candlestick(timestamp, open_, high_price(entries), low_price(entries), close)
        )
    return candles


def volume_data(
    book: OrderBook, side: OrderBookType, product: str
) -> list[tuple[str, float]]:
    """Total amount on ``side`` for ``product`` at every timestamp in the book."""
    return [
        (timestamp, sum(e.amount for e in book.get_orders(side, product, timestamp)))
        for timestamp in _timestamps(book)
    ]