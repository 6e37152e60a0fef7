"""Test utilities for URL shortener tests."""

import random
import string
from typing import Optional

from shorturl.models.entry import UrlEntry


def random_string(length: int = 10) -> str:
    """Generate a random alphanumeric string."""
    return ''.join(random.choice(string.ascii_letters + string.digits) for _ in range(length))


def random_url() -> str:
    """Generate a random URL for testing."""
    domain = f"{random_string(8).lower()}.com"
    path = random_string(12)
    return f"https://{domain}/{path}"


async def create_test_entry(
    db,
    short_code: int,
    original_url: Optional[str] = None,
) -> UrlEntry:
    """Create and commit a test UrlEntry in the database."""
    entry = UrlEntry(original_url=original_url or random_url(), short_code=short_code)
    db.add(entry)
    await db.commit()
    await db.refresh(entry)
    return entry
