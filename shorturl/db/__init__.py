"""Database module for the URL shortener application."""
from shorturl.db.base import engine, get_engine, create_tables, DatabaseHealthCheck
from shorturl.db.session import get_db, db_transaction
from shorturl.db.resilience import initialize_database_connection

__all__ = [
    "engine",
    "get_engine",
    "create_tables",
    "DatabaseHealthCheck",
    "get_db",
    "db_transaction",
    "initialize_database_connection",
]
