"""
Data models for the URL shortener application.

This module imports and exports all SQLModel models used in the application.
"""

from shorturl.models.entry import UrlEntry, UrlEntryBase, UrlEntryCreate

__all__ = [
    "UrlEntry",
    "UrlEntryBase",
    "UrlEntryCreate",
]
