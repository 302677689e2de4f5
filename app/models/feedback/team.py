"""Team model."""

TEAM_DDL = """
CREATE TABLE IF NOT EXISTS team (
    id VARCHAR PRIMARY KEY,
    name VARCHAR NOT NULL,
    description VARCHAR,
    created_at TIMESTAMP NOT NULL
)
"""
