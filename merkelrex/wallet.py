"""Currency balances held by a trader."""

from __future__ import annotations

import logging

from merkelrex.csv_reader import tokenise
from merkelrex.order_book_entry import OrderBookEntry, OrderBookType

log = logging.getLogger(__name__)


class Wallet:
    """Balances of several currencies, keyed by ticker."""

    def __init__(self) -> None:
        self._currencies: dict[str, float] = {}

    def insert_currency(self, currency: str, amount: float) -> None:
        """Add ``amount`` of ``currency``; a negative amount raises ValueError."""
        if amount < 0:
            raise ValueError(f"cannot insert a negative amount: {amount}")
        self._currencies[currency] = self._currencies.get(currency, 0.0) + amount

    def remove_currency(self, currency: str, amount: float) -> bool:
        """Take ``amount`` of ``currency`` out; return False if that is not possible."""
        if amount < 0 or currency not in self._currencies:
            return False
        if not self.contains_currency(currency, amount):
            return False
        self._currencies[currency] -= amount
        return True

    def contains_currency(self, currency: str, amount: float) -> bool:
        """Return True if the wallet holds at least ``amount`` of ``currency``."""
        if currency not in self._currencies:
            return False
        return self._currencies[currency] >= amount

    def can_fulfill_order(self, order: OrderBookEntry) -> bool:
        """Check that the wallet can cover an ask (base) or a bid (quote)."""
        currencies = tokenise(order.product, "/")
        if order.order_type is OrderBookType.ASK:
            base = currencies[0]
            log.info("can_fulfill_order %s : %s", base, order.amount)
            return self.contains_currency(base, order.amount)
        if order.order_type is OrderBookType.BID:
            quote = currencies[1]
            needed = order.amount * order.price
            log.info("can_fulfill_order %s : %s", quote, needed)
            return self.contains_currency(quote, needed)
        return False

    def process_sale(self, sale: OrderBookEntry) -> None:
        """Update balances after one of the owner's orders was matched."""
        currencies = tokenise(sale.product, "/")
        if sale.order_type not in (OrderBookType.ASKSALE, OrderBookType.BIDSALE):
            return
        base, quote = currencies[0], currencies[1]
        quote_value = sale.amount * sale.price
        if sale.order_type is OrderBookType.ASKSALE:
            self._currencies[quote] = self._currencies.get(quote, 0.0) + quote_value
            self._currencies[base] = self._currencies.get(base, 0.0) - sale.amount
        else:
            self._currencies[base] = self._currencies.get(base, 0.0) + sale.amount
            self._currencies[quote] = self._currencies.get(quote, 0.0) - quote_value

    def __str__(self) -> str:
        return "".join(
            f"{currency} : {amount:f}\n"
            for currency, amount in sorted(self._currencies.items())
        )