"""Exceptions for the URL shortener service layer.

This module contains the exception hierarchy for the service layer,
providing domain-specific exceptions that abstract underlying implementation details.
"""


class ServiceError(Exception):
    """Base exception for all service-level errors."""
    pass


class URLError(ServiceError):
    """Base exception for URL-related errors."""
    pass


class URLValidationError(URLError):
    """The submitted URL is not a well-formed absolute URI."""
    pass


class ShortCodeFormatError(URLError):
    """The short code parameter is not a base-10 integer."""
    pass


class URLNotFoundError(URLError):
    """No entry exists for the requested short code."""
    pass


class ShortCodeAllocationError(URLError):
    """Every attempt to claim the next short code lost to a concurrent insert."""
    pass
