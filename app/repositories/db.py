"""DuckDB connection management."""

import threading
from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL
from settings import DB_PATH

_local = threading.local()


def db_exists(db_path: str = DB_PATH) -> bool:
    """Check if database file exists."""
    return Path(db_path).exists()


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Create all tables and indexes (idempotent - uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.debug("DB tables initialized")


def _ensure_db_exists(db_path: str) -> None:
    """Create DB with tables if it doesn't exist."""
    if not db_exists(db_path):
        logger.warning("DB not found: {}. Creating empty DB.", db_path)
        conn = duckdb.connect(db_path)
        init_tables(conn)
        conn.close()


def get_db(read_only: bool = True, db_path: str = DB_PATH) -> duckdb.DuckDBPyConnection:
    """Get thread-local connection."""
    if getattr(_local, "conn", None) is None:
        _ensure_db_exists(db_path)
        _local.conn = duckdb.connect(db_path, read_only=read_only)
        logger.debug("DB connected: {} (read_only={})", db_path, read_only)
    return _local.conn


def close_db() -> None:
    """Close thread-local connection."""
    if getattr(_local, "conn", None) is not None:
        _local.conn.close()
        _local.conn = None
        logger.debug("DB connection closed")


def get_write_connection(db_path: str = DB_PATH) -> duckdb.DuckDBPyConnection:
    """Get a writable connection (for seeding)."""
    conn = duckdb.connect(db_path)
    init_tables(conn)
    return conn
