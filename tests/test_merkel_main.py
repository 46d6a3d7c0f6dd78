import io

import pytest

from merkelrex.merkel_main import MerkelMain
from merkelrex.order_book import OrderBook
from merkelrex.wallet import Wallet

T1 = "2020/03/17 17:01:24.884492"
T2 = "2020/03/17 17:01:30.000000"


@pytest.fixture
def book(tmp_path):
    first = tmp_path / "a.csv"
    second = tmp_path / "b.csv"
    first.write_text(
        f"{T1},ETH/BTC,ask,0.02,1\n"
        f"{T1},ETH/BTC,bid,0.019,2\n"
        f"{T1},BTC/USDT,ask,5000,0.5\n"
    )
    second.write_text(f"{T2},ETH/BTC,ask,0.021,1\n")
    return OrderBook(first, second)


def make_app(book, text):
    wallet = Wallet()
    wallet.insert_currency("BTC", 10)
    out = io.StringIO()
    app = MerkelMain(book, wallet, ["ETH/BTC"], io.StringIO(text), out)
    return app, wallet, out


def test_starts_at_earliest_time(book):
    app, _, _ = make_app(book, "")
    assert app.current_time == T1


def test_print_menu(book):
    app, _, out = make_app(book, "")
    app.print_menu()
    assert "0: Quit\n" in out.getvalue()
    assert out.getvalue().endswith("Enter option: ")


@pytest.mark.parametrize(
    "text, expected", [("3\n", 3), ("abc\n", -1), (" 7x\n", 7), ("\n", -1)]
)
def test_get_user_option(book, text, expected):
    app, _, _ = make_app(book, text)
    assert app.get_user_option() == expected


def test_print_wallet(book):
    app, _, out = make_app(book, "")
    app.process_user_option(5)
    assert "BTC : 10.000000" in out.getvalue()


def test_bid_with_insufficient_funds(book):
    app, _, out = make_app(book, "BTC/USDT,5000,1\n")
    app.process_user_option(4)
    assert "Insufficient funds." in out.getvalue()
    assert len(book) == 4


def test_ask_is_placed(book):
    app, _, out = make_app(book, "BTC/USDT,5000,1\n")
    app.process_user_option(3)
    assert "Ask placed." in out.getvalue()
    assert len(book) == 5


def test_bad_input(book):
    app, _, out = make_app(book, "ETH/BTC,1\n")
    app.process_user_option(3)
    assert "Bad input: ETH/BTC,1" in out.getvalue()


def test_unparsable_number(book):
    app, _, out = make_app(book, "ETH/BTC,abc,1\n")
    app.process_user_option(4)
    assert "Error parsing input." in out.getvalue()


def test_bid_matched_updates_wallet(book):
    app, wallet, out = make_app(book, "ETH/BTC,0.03,1\n")
    app.process_user_option(4)
    app.process_user_option(6)
    text = out.getvalue()
    assert "Bid placed." in text
    assert "Sale ETH/BTC price: 0.02 amount: 1" in text
    assert "ETH : 1.000000" in str(wallet)
    assert "BTC : 9.980000" in str(wallet)
    assert app.current_time == T2


def test_next_timeframe_wraps(book):
    app, _, _ = make_app(book, "")
    app.process_user_option(6)
    app.process_user_option(6)
    assert app.current_time == T1


def test_market_stats(book):
    app, _, out = make_app(book, "")
    app.process_user_option(2)
    text = out.getvalue()
    assert "Product: ETH/BTC\nAsks seen: 1\nMax ask: 0.02\nMin ask: 0.02\n" in text


def test_invalid_choice(book):
    app, _, out = make_app(book, "")
    app.process_user_option(42)
    assert "Invalid choice" in out.getvalue()


def test_zero_exits(book):
    app, _, _ = make_app(book, "")
    with pytest.raises(SystemExit):
        app.process_user_option(0)


def test_run_trades_per_product(book):
    app, _, out = make_app(book, "10\n0\n")
    app.run()
    text = out.getvalue()
    assert "ETH/BTC: 3 orders\n" in text
    assert "BTC/USDT: 1 orders\n" in text


def test_run_stops_at_end_of_input(book):
    app, _, out = make_app(book, "1\n")
    app.run()
    assert out.getvalue().count("Enter option: ") == 2
    assert "Help - your aim is to make money." in out.getvalue()


def test_mean_price_chart_without_data(book):
    app, _, out = make_app(book, "NOPE/NONE\n2\n")
    app.process_user_option(9)
    assert 'No mean price data for "NOPE/NONE" on that side.' in out.getvalue()


def test_candlestick_chart_retries_empty_product(book):
    app, _, out = make_app(book, "\nETH/BTC\n")
    app.process_user_option(7)
    assert "17:01:24" in out.getvalue()


def test_volume_chart(book):
    app, _, out = make_app(book, "ETH/BTC\n")
    app.process_user_option(8)
    assert f"{T1} | " in out.getvalue()