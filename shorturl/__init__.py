"""URL shortener service with sequential numeric short codes."""

__version__ = "0.1.0"
