"""Command-line entry point: load the data, choose products, run the menu."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence
from typing import TextIO

from merkelrex.csv_reader import DEFAULT_FILES
from merkelrex.merkel_main import MerkelMain
from merkelrex.order_book import OrderBook
from merkelrex.wallet import Wallet


def select_products(
    products: Sequence[str],
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> list[str]:
    """Ask which products to trade, by number or name; empty input cancels."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stdout.write("Select trading pairs:\n")
    for number, product in enumerate(products, start=1):
        stdout.write(f"  {number}. {product}\n")
    stdout.write("Enter numbers or names, comma separated (empty to cancel): ")
    chosen: set[str] = set()
    for token in re.split(r"[,\s]+", stdin.readline().strip()):
        if token in products:
            chosen.add(token)
        elif token.isdigit() and 1 <= int(token) <= len(products):
            chosen.add(products[int(token) - 1])
    return [product for product in products if product in chosen]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the exchange simulation."""
    parser = argparse.ArgumentParser(description="Text-based exchange simulation.")
    parser.add_argument("file1", nargs="?", default=DEFAULT_FILES[0])
    parser.add_argument("file2", nargs="?", default=DEFAULT_FILES[1])
    args = parser.parse_args(argv)

    book = OrderBook(args.file1, args.file2)
    if len(book) == 0:
        sys.stderr.write("No orders could be loaded.\n")
        return 1
    wallet = Wallet()
    wallet.insert_currency("BTC", 10)

    chosen = select_products(book.known_products())
    if not chosen:
        return 0
    MerkelMain(book, wallet, chosen).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())