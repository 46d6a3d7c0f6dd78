"""Text-mode currency exchange simulator built on historical order-book data."""

__version__ = "0.1.0"