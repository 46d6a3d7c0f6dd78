"""OHLC candlestick record."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Candlestick:
    """One candle: open, high, low and volume-weighted close at a timestamp."""

    timestamp: str
    open: float
    high: float
    low: float
    close: float