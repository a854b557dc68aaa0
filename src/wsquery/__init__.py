"""Command dispatch for the wspack / wsstack workspace query tools."""

__all__ = ["__version__"]

__version__ = "0.3.0"
