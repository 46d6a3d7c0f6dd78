"""Plain-text charts of candlesticks, volume and mean prices."""

from __future__ import annotations

from collections.abc import Sequence

from merkelrex.candlestick import Candlestick

_ROWS = 20
_PRECISION = 6
_LABEL_WIDTH = _PRECISION + 3
_LABEL_EVERY = 5
_TIME_WIDTH = 8
_BAR_WIDTH = 50


def render_candlesticks(candles: Sequence[Candlestick]) -> str:
    """Draw candles as columns: '*' for the body, '|' for the wick."""
    if not candles:
        return "No data to plot\n"

    global_high = max(c.high for c in candles)
    global_low = min(c.low for c in candles)
    raw_span = global_high - global_low
    step = (raw_span if raw_span != 0.0 else 1.0) / _ROWS

    lines = []
    for row in range(_ROWS, -1, -1):
        level = global_low + row * step
        cells = []
        for c in candles:
            in_body = min(c.open, c.close) <= level <= max(c.open, c.close)
            in_wick = c.low <= level <= c.high
            cells.append("*" if in_body else "|" if in_wick else " ")
        lines.append(f"{level:{_LABEL_WIDTH}.{_PRECISION}f} |" + "".join(cells))

    indent = " " * (_LABEL_WIDTH + 3)
    lines.append(indent + "-" * len(candles))
    labels = (
        c.timestamp[11 : 11 + _TIME_WIDTH] if i % _LABEL_EVERY == 0 else " " * _TIME_WIDTH
        for i, c in enumerate(candles)
    )
    lines.append(indent + "".join(labels))
    return "\n".join(lines) + "\n"


def render_volume_chart(volume: Sequence[tuple[str, float]]) -> str:
    """Draw one bar per timestamp, scaled so the largest volume is 50 stars."""
    if not volume:
        return "No volume data\n"
    max_volume = max(0.0, *(v for _, v in volume))
    lines = []
    for timestamp, v in volume:
        length = int(v / max_volume * _BAR_WIDTH) if max_volume else 0
        lines.append(f"{timestamp} | {'*' * max(length, 0)} ({v:g})")
    return "\n".join(lines) + "\n"


def render_mean_price_chart(data: Sequence[tuple[str, float]]) -> str:
    """Draw one bar per time bucket, scaled between the lowest and highest mean."""
    if not data:
        return "No mean price data.\n"
    prices = [avg for _, avg in data]
    min_price, max_price = min(prices), max(prices)
    span = 1.0 if max_price == min_price else max_price - min_price
    lines = []
    for minute, avg in data:
        length = int((avg - min_price) / span * _BAR_WIDTH)
        lines.append(f"{minute} | {'*' * length} ({avg:.6f})")
    return "\n".join(lines) + "\n"