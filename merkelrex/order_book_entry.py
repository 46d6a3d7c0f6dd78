"""Order book entries and their side/type."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OrderBookType(Enum):
    """Kind of an order book entry: a live order or an executed sale."""

    BID = "bid"
    ASK = "ask"
    UNKNOWN = "unknown"
    ASKSALE = "asksale"
    BIDSALE = "bidsale"


@dataclass
class OrderBookEntry:
    """A single order in the book, or a sale produced by matching."""

    price: float
    amount: float
    timestamp: str
    product: str
    order_type: OrderBookType
    username: str = "dataset"


def string_to_order_book_type(s: str) -> OrderBookType:
    """Map "ask" or "bid" to the matching type; anything else is UNKNOWN."""
    if s == "ask":
        return OrderBookType.ASK
    if s == "bid":
        return OrderBookType.BID
    return OrderBookType.UNKNOWN