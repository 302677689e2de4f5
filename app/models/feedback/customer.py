"""Customer (feedback author) model."""

CUSTOMER_DDL = """
CREATE TABLE IF NOT EXISTS customer (
    id VARCHAR PRIMARY KEY,
    name VARCHAR,
    email VARCHAR,
    created_at TIMESTAMP NOT NULL
)
"""
