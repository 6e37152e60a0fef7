"""HTTP middleware for the URL shortener application."""

from shorturl.middleware.logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
