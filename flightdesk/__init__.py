"""Register aircraft, pilots, passengers and flights from the terminal, stored as CSV."""

__version__ = "0.1.0"