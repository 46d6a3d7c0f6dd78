from merkelrex.order_book_entry import (
    OrderBookEntry,
    OrderBookType,
    string_to_order_book_type,
)

import pytest


@pytest.mark.parametrize(
    "text, expected",
    [
        ("ask", OrderBookType.ASK),
        ("bid", OrderBookType.BID),
        ("ASK", OrderBookType.UNKNOWN),
        ("", OrderBookType.UNKNOWN),
        ("asksale", OrderBookType.UNKNOWN),
        ("bidsale", OrderBookType.UNKNOWN),
        (" ask", OrderBookType.UNKNOWN),
    ],
)
def test_string_to_order_book_type(text, expected):
    assert string_to_order_book_type(text) is expected


def test_entry_default_username_is_dataset():
    entry = OrderBookEntry(200.0, 0.5, "2020/03/17 12:00:00", "ETH/USDT", OrderBookType.ASK)
    assert entry.username == "dataset"


def test_entry_fields_kept():
    entry = OrderBookEntry(
        1.5, 2.5, "2020/06/01 12:00:00.000000", "ETH/BTC", OrderBookType.BID, "simuser"
    )
    assert (entry.price, entry.amount) == (1.5, 2.5)
    assert entry.timestamp == "2020/06/01 12:00:00.000000"
    assert entry.product == "ETH/BTC"
    assert entry.order_type is OrderBookType.BID
    assert entry.username == "simuser"


def test_entry_is_mutable_amount():
    entry = OrderBookEntry(1.0, 3.0, "t", "ETH/BTC", OrderBookType.BID)
    entry.amount -= 1.0
    assert entry.amount == 2.0


def test_entries_sort_by_timestamp_and_price():
    a = OrderBookEntry(3.0, 1.0, "2020/03/17 17:01:24", "X/Y", OrderBookType.ASK)
    b = OrderBookEntry(1.0, 1.0, "2020/03/17 17:01:30", "X/Y", OrderBookType.ASK)
    c = OrderBookEntry(2.0, 1.0, "2020/03/17 17:01:00", "X/Y", OrderBookType.ASK)
    by_time = sorted([a, b, c], key=lambda e: e.timestamp)
    assert [e.timestamp for e in by_time] == sorted(e.timestamp for e in (a, b, c))
    by_price = sorted([a, b, c], key=lambda e: e.price)
    assert [e.price for e in by_price] == [1.0, 2.0, 3.0]