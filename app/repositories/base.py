"""Base repository class."""

from typing import Any

import duckdb
from loguru import logger

from app.repositories.db import get_db


class BaseRepository:
    """Base repository with common query helpers.

    Every query runs on its own cursor (a duplicate connection to the same
    database), so repository methods may be called from worker threads.
    """

    def __init__(self, db: duckdb.DuckDBPyConnection | None = None, read_only: bool = True):
        self._db = db if db is not None else get_db(read_only)
        self._read_only = read_only
        logger.debug("{} initialized", self.__class__.__name__)

    def execute(self, query: str, params: list | None = None) -> duckdb.DuckDBPyConnection:
        """Execute SQL query on a fresh cursor."""
        cursor = self._db.cursor()
        if params:
            return cursor.execute(query, params)
        return cursor.execute(query)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        cursor = self.execute(query, params)
        try:
            return cursor.fetchall()
        finally:
            cursor.close()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        cursor = self.execute(query, params)
        try:
            return cursor.fetchone()
        finally:
            cursor.close()

    def fetchdicts(self, query: str, params: list | None = None) -> list[dict[str, Any]]:
        """Execute and fetch all rows as dicts keyed by column name."""
        cursor = self.execute(query, params)
        try:
            columns = [col[0] for col in cursor.description]
            return [dict(zip(columns, row)) for row in cursor.fetchall()]
        finally:
            cursor.close()
