"""Day, week, month and year progress gauges."""

__version__ = "0.1.0"
