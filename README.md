# merkelrex

A small exchange simulator for the terminal. It loads historical order-book
data from two CSV files and lets you look at market statistics, place asks
and bids from a simulated wallet, step through time frames in which orders
are matched, and draw text charts of the market.

## Installing

```
pip install .
```

## Data files

Each CSV line describes one order with five comma-separated fields:

```
timestamp,product,side,price,amount
2020/03/17 17:01:24.884492,ETH/BTC,bid,0.02187308,7.44564869
```

`side` is `ask` or `bid`; any other value is read as `OrderBookType.UNKNOWN`.
Lines that do not have five fields, or whose price or amount is not a number,
are skipped. A file that cannot be opened contributes no orders. Warnings
about skipped lines and missing files go through the `logging` module.

No data files are shipped with the package.

## Running

```
merkelrex [FILE1] [FILE2]
```

`FILE1` and `FILE2` default to `20200317.csv` and `20200601.csv` in the
current directory. If neither file yields any orders, the command prints
"No orders could be loaded." to standard error and exits with status 1.

The program starts a wallet holding 10 BTC and lists the products found in
the data, numbered. Enter the pairs to work with, by number or name,
separated by commas or spaces; an empty answer (or one that matches nothing)
ends the program. It then shows its menu:

```
1: Print help
2: Print exchange stats
3: Make an offer
4: Make a bid
5: Print wallet
6: Continue
7: Print candlestick chart
8: Print volume chart
9: Print average price chart
10: Print number of trades per product
0: Quit
```

- **Exchange stats** shows, for each product, how many asks exist at the
  current time and their highest and lowest price.
- **Make an offer / Make a bid** take `product,price,amount`, for example
  `ETH/BTC,200,0.5`. The order is placed at the current time for the user
  `simuser` only if the wallet holds enough of the base currency (for an ask)
  or of `price * amount` of the quote currency (for a bid).
- **Continue** matches asks against bids for every product at the current
  time, prints the sales, applies sales involving `simuser` to the wallet,
  and moves to the next timestamp, wrapping round to the earliest after the
  last.
- **Candlestick chart** draws the last 50 ask-side candles of a product.
- **Volume chart** draws the total ask amount at each timestamp.
- **Average price chart** draws the mean ask or bid price per `HH:MM` minute.
- **Trades per product** counts the orders of each product.

The menu ends on option 0 or at the end of input.

## Using the library

```python
from merkelrex.order_book import OrderBook
from merkelrex.wallet import Wallet
from merkelrex.market_data import candlestick_data, trades_per_product
from merkelrex.order_book_entry import OrderBookType
from merkelrex.text_plotter import render_candlesticks

book = OrderBook("20200317.csv", "20200601.csv")
print(trades_per_product(book))
print(render_candlesticks(candlestick_data(book, OrderBookType.ASK, "ETH/USDT")))

wallet = Wallet()
wallet.insert_currency("BTC", 10)
print(wallet)
```

Modules:

- `merkelrex.order_book_entry`: `OrderBookType`, `OrderBookEntry`,
  `string_to_order_book_type`.
- `merkelrex.candlestick`: `Candlestick`.
- `merkelrex.csv_reader`: `tokenise`, `tokens_to_obe`, `strings_to_obe`,
  `read_csv`, `get_all_timestamps`.
- `merkelrex.wallet`: `Wallet`.
- `merkelrex.order_book`: `OrderBook`, `high_price`, `low_price`.
- `merkelrex.market_data`: `candlestick_data`, `volume_data`,
  `mean_price_data`, `trades_per_product`.
- `merkelrex.text_plotter`: `render_candlesticks`, `render_volume_chart`,
  `render_mean_price_chart`, each returning the chart as a string.
- `merkelrex.merkel_main`: `MerkelMain`, the menu loop, which can be given
  its own input and output streams.
- `merkelrex.cli`: `select_products` and `main`.

## What it does not do

There is no graphical window: choosing trading pairs is a text prompt. The
chosen pairs are only a starting filter for the session; the menu actions
work over every product in the book. Orders placed during a session and the
wallet are kept in memory only and are not saved.

## Tests

```
pip install .[test]
pytest
```