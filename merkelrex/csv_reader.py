"""Reading order book CSV files and turning fields into entries."""

from __future__ import annotations

import logging
import math
import os
import re
from collections.abc import Iterable
from itertools import takewhile

from merkelrex.order_book_entry import (
    OrderBookEntry,
    OrderBookType,
    string_to_order_book_type,
)

log = logging.getLogger(__name__)

DEFAULT_FILES = ("20200317.csv", "20200601.csv")

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _parse_float(text: str) -> float:
    """Parse the leading number of ``text``, ignoring anything after it."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    number = match.group(0)
    value = float(number)
    if math.isinf(value) and "inf" not in number.lower():
        raise ValueError(f"number out of range: {text!r}")
    return value


def tokenise(line: str, separator: str) -> list[str]:
    """Split ``line`` on ``separator``.

    Leading separators are skipped, and splitting stops at the first empty
    field, so a trailing separator or a doubled one ends the token list.
    """
    fields = line.lstrip(separator).split(separator)
    return list(takewhile(bool, fields))


def strings_to_obe(
    price: str,
    amount: str,
    timestamp: str,
    product: str,
    order_type: OrderBookType,
) -> OrderBookEntry:
    """Build an entry from price and amount strings plus the other fields."""
    try:
        price_value = _parse_float(price)
        amount_value = _parse_float(amount)
    except ValueError:
        log.warning("bad float: %r / %r", price, amount)
        raise
    return OrderBookEntry(price_value, amount_value, timestamp, product, order_type)


def tokens_to_obe(tokens: list[str]) -> OrderBookEntry:
    """Build an entry from timestamp, product, side, price and amount tokens."""
    if len(tokens) != 5:
        raise ValueError(f"bad line: expected 5 fields, got {len(tokens)}")
    timestamp, product, side, price, amount = tokens
    return strings_to_obe(
        price, amount, timestamp, product, string_to_order_book_type(side)
    )


def read_csv(path: str | os.PathLike[str]) -> list[OrderBookEntry]:
    """Read every well-formed line of a CSV file; malformed lines are skipped.

    A file that cannot be opened yields an empty list.
    """
    entries: list[OrderBookEntry] = []
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            for line in handle:
                try:
                    entries.append(tokens_to_obe(tokenise(line.rstrip("\n"), ",")))
                except ValueError:
                    log.warning("bad data in %s: %r", path, line)
    except OSError:
        log.error("could not open file: %s", path)
    log.info("read %d entries from %s", len(entries), path)
    return entries


def get_all_timestamps(
    files: Iterable[str | os.PathLike[str]] = DEFAULT_FILES,
) -> list[str]:
    """Return every distinct timestamp found in ``files``, sorted ascending."""
    return sorted({entry.timestamp for path in files for entry in read_csv(path)})