"""Shared fixtures - in-memory DuckDB databases."""

import duckdb
import pytest

from app.repositories.db import init_tables
from etl import seed_demo_data


@pytest.fixture
def db():
    conn = duckdb.connect(":memory:")
    init_tables(conn)
    yield conn
    conn.close()


@pytest.fixture
def seeded_db(db):
    seed_demo_data(db)
    return db
