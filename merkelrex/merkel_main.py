"""Interactive text menu driving the exchange simulation."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterable
from typing import TextIO

from merkelrex.csv_reader import strings_to_obe, tokenise
from merkelrex.market_data import (
    candlestick_data,
    mean_price_data,
    trades_per_product,
    volume_data,
)
from merkelrex.order_book import SIM_USER, OrderBook, high_price, low_price
from merkelrex.order_book_entry import OrderBookType
from merkelrex.text_plotter import (
    render_candlesticks,
    render_mean_price_chart,
    render_volume_chart,
)
from merkelrex.wallet import Wallet

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
MAX_CANDLES = 50

_MENU = (
    "1: Print help\n"
    "2: Print exchange stats\n"
    "3: Make an offer\n"
    "4: Make a bid\n"
    "5: Print wallet\n"
    "6: Continue\n"
    "7: Print candlestick chart\n"
    "8: Print volume chart\n"
    "9: Print average price chart\n"
    "10: Print number of trades per product\n"
    "0: Quit\n"
    "Enter option: "
)


class MerkelMain:
    """Menu loop over an order book and the simulated user's wallet."""

    def __init__(
        self,
        order_book: OrderBook,
        wallet: Wallet,
        products: Iterable[str],
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.order_book = order_book
        self.wallet = wallet
        self.products = list(products)
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self.current_time = order_book.earliest_time()
        self._actions: dict[int, Callable[[], None]] = {
            1: self._print_help,
            2: self._print_market_stats,
            3: self._enter_ask,
            4: self._enter_bid,
            5: self._print_wallet,
            6: self._goto_next_timeframe,
            7: self._print_candlestick_chart,
            8: self._print_volume_chart,
            9: self._print_mean_price_chart,
            10: self._print_trades_per_product,
        }

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _read_line(self) -> str:
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _read_product(self) -> str:
        product = self._read_line()
        return product or self._read_line()

    def print_menu(self) -> None:
        """Write the menu and the option prompt."""
        self._write(_MENU)

    def get_user_option(self) -> int:
        """Read an option number; input without a leading integer gives -1."""
        match = _INT_PREFIX.match(self._read_line())
        return int(match.group(1)) if match else -1

    def process_user_option(self, choice: int) -> None:
        """Run the action for ``choice``; 0 exits the program."""
        if choice == 0:
            raise SystemExit(0)
        action = self._actions.get(choice)
        if action is None:
            self._write("Invalid choice, please type 0–10\n")
            return
        action()

    def run(self) -> None:
        """Show the menu and handle options until 0 or end of input."""
        while True:
            self.print_menu()
            try:
                choice = self.get_user_option()
                if choice == 0:
                    break
                self.process_user_option(choice)
            except EOFError:
                break

    def _print_help(self) -> None:
        self._write(
            "Help - your aim is to make money. "
            "Analyse the market and make bids and offers.\n"
        )

    def _print_market_stats(self) -> None:
        for product in self.order_book.known_products():
            self._write(f"Product: {product}\n")
            asks = self.order_book.get_orders(
                OrderBookType.ASK, product, self.current_time
            )
            self._write(f"Asks seen: {len(asks)}\n")
            if asks:
                self._write(f"Max ask: {high_price(asks):g}\n")
                self._write(f"Min ask: {low_price(asks):g}\n")

    def _enter_order(self, side: OrderBookType, label: str, done: str) -> None:
        self._write(
            f"Make {label} - enter product,price,amount (e.g. ETH/BTC,200,0.5):\n"
        )
        line = self._read_line()
        tokens = tokenise(line, ",")
        if len(tokens) != 3:
            self._write(f"Bad input: {line}\n")
            return
        product, price, amount = tokens
        try:
            order = strings_to_obe(price, amount, self.current_time, product, side)
        except ValueError:
            self._write("Error parsing input.\n")
            return
        order.username = SIM_USER
        try:
            affordable = self.wallet.can_fulfill_order(order)
        except IndexError:
            self._write("Error parsing input.\n")
            return
        if affordable:
            self.order_book.insert_order(order)
            self._write(f"{done}\n")
        else:
            self._write("Insufficient funds.\n")

    def _enter_ask(self) -> None:
        self._enter_order(OrderBookType.ASK, "an ask", "Ask placed.")

    def _enter_bid(self) -> None:
        self._enter_order(OrderBookType.BID, "a bid", "Bid placed.")

    def _print_wallet(self) -> None:
        self._write(f"{self.wallet}\n")

    def _goto_next_timeframe(self) -> None:
        self._write("Going to next time frame...\n")
        for product in self.order_book.known_products():
            for sale in self.order_book.match_asks_to_bids(product, self.current_time):
                self._write(
                    f"Sale {product} price: {sale.price:g} amount: {sale.amount:g}\n"
                )
                if sale.username == SIM_USER:
                    self.wallet.process_sale(sale)
        self.current_time = self.order_book.next_time(self.current_time)

    def _print_candlestick_chart(self) -> None:
        self._write("Enter product for candlestick (e.g. ETH/USDT): ")
        product = self._read_product()
        candles = candlestick_data(self.order_book, OrderBookType.ASK, product)
        self._write(render_candlesticks(candles[-MAX_CANDLES:]))

    def _print_volume_chart(self) -> None:
        self._write("Enter product for volume chart (e.g. ETH/USDT): ")
        product = self._read_product()
        volume = volume_data(self.order_book, OrderBookType.ASK, product)
        self._write(render_volume_chart(volume))

    def _print_mean_price_chart(self) -> None:
        self._write("Available products:\n")
        for product in self.order_book.known_products():
            self._write(f"  - {product}\n")
        self._write("Enter product (e.g. ETH/USDT): ")
        product = self._read_product()
        self._write("Plot mean price for (1) ask  or  (2) bid?  Enter 1 or 2: ")
        choice = self._read_line()
        side = OrderBookType.ASK if choice == "1" else OrderBookType.BID
        data = mean_price_data(self.order_book, side, product)
        if not data:
            self._write(f'No mean price data for "{product}" on that side.\n')
            return
        self._write(render_mean_price_chart(data))

    def _print_trades_per_product(self) -> None:
        self._write("Total trades per product:\n")
        for product, count in trades_per_product(self.order_book).items():
            self._write(f"{product}: {count} orders\n")