"""RECOV - natural-language command interpreter for the business assistant."""

__version__ = "0.3.0"
