"""Load Tradovate performance and cash CSV reports into an SQLite database."""

__version__ = "0.1.0"