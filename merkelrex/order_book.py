"""The order book: loading, querying and matching orders."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from dataclasses import replace

from merkelrex.csv_reader import read_csv
from merkelrex.order_book_entry import OrderBookEntry, OrderBookType

log = logging.getLogger(__name__)

SIM_USER = "simuser"


def high_price(orders: Iterable[OrderBookEntry]) -> float:
    """Return the highest price among ``orders``; empty input raises ValueError."""
    prices = [order.price for order in orders]
    if not prices:
        raise ValueError("no orders to take a high price from")
    return max(prices)


def low_price(orders: Iterable[OrderBookEntry]) -> float:
    """Return the lowest price among ``orders``; empty input raises ValueError."""
    prices = [order.price for order in orders]
    if not prices:
        raise ValueError("no orders to take a low price from")
    return min(prices)


def _by_timestamp(entry: OrderBookEntry) -> str:
    return entry.timestamp


class OrderBook:
    """All orders from two CSV files, kept sorted by timestamp."""

    def __init__(
        self,
        file1: str | os.PathLike[str],
        file2: str | os.PathLike[str],
    ) -> None:
        self._orders: list[OrderBookEntry] = sorted(
            [*read_csv(file1), *read_csv(file2)], key=_by_timestamp
        )

    def __iter__(self) -> Iterator[OrderBookEntry]:
        return iter(self._orders)

    def __len__(self) -> int:
        return len(self._orders)

    @property
    def orders(self) -> list[OrderBookEntry]:
        """A copy of the list of orders, in timestamp order."""
        return list(self._orders)

    def known_products(self) -> list[str]:
        """Return every distinct product in the book, sorted."""
        return sorted({order.product for order in self._orders})

    def get_orders(
        self, order_type: OrderBookType, product: str, timestamp: str
    ) -> list[OrderBookEntry]:
        """Return copies of the orders matching side, product and exact timestamp."""
        return [
            replace(order)
            for order in self._orders
            if order.order_type is order_type
            and order.product == product
            and order.timestamp == timestamp
        ]

    def _first_timestamp(self) -> str:
        if not self._orders:
            raise ValueError("the order book is empty")
        return self._orders[0].timestamp

    def earliest_time(self) -> str:
        """Return the earliest timestamp in the book."""
        return self._first_timestamp()

    def next_time(self, timestamp: str) -> str:
        """Return the first timestamp after ``timestamp``, wrapping to the earliest."""
        first = self._first_timestamp()
        return next(
            (order.timestamp for order in self._orders if order.timestamp > timestamp),
            first,
        )

    def insert_order(self, order: OrderBookEntry) -> None:
        """Add an order, keeping the book sorted by timestamp."""
        self._orders.append(order)
        self._orders.sort(key=_by_timestamp)

    def match_asks_to_bids(self, product: str, timestamp: str) -> list[OrderBookEntry]:
        """Match asks against bids for one product at one time and return the sales.

        The book itself is left unchanged; matching works on copies.
        """
        asks = self.get_orders(OrderBookType.ASK, product, timestamp)
        bids = self.get_orders(OrderBookType.BID, product, timestamp)
        sales: list[OrderBookEntry] = []
        if not asks or not bids:
            log.debug("match_asks_to_bids: no bids or asks")
            return sales

        asks.sort(key=lambda e: e.price)
        bids.sort(key=lambda e: e.price, reverse=True)
        log.debug(
            "max ask %s, min ask %s, max bid %s, min bid %s",
            asks[-1].price,
            asks[0].price,
            bids[0].price,
            bids[-1].price,
        )

        for ask in asks:
            for bid in bids:
                if bid.price < ask.price:
                    continue
                sale = OrderBookEntry(
                    ask.price, 0.0, timestamp, product, OrderBookType.ASKSALE
                )
                if bid.username == SIM_USER:
                    sale.username = SIM_USER
                    sale.order_type = OrderBookType.BIDSALE
                if ask.username == SIM_USER:
                    sale.username = SIM_USER
                    sale.order_type = OrderBookType.ASKSALE

                if bid.amount == ask.amount:
                    sale.amount = ask.amount
                    sales.append(sale)
                    bid.amount = 0.0
                    break
                if bid.amount > ask.amount:
                    sale.amount = ask.amount
                    sales.append(sale)
                    bid.amount -= ask.amount
                    break
                if bid.amount > 0.0:
                    sale.amount = bid.amount
                    sales.append(sale)
                    ask.amount -= bid.amount
                    bid.amount = 0.0
        return sales