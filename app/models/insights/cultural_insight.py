"""Cultural insight model - per team/language observations."""

CULTURAL_INSIGHT_DDL = """
CREATE TABLE IF NOT EXISTS cultural_insight (
    id VARCHAR PRIMARY KEY,
    team_id VARCHAR NOT NULL,
    language VARCHAR NOT NULL,
    region VARCHAR,
    insight_type VARCHAR NOT NULL,
    insight VARCHAR NOT NULL,
    confidence DOUBLE,
    feedback_count INTEGER DEFAULT 0,
    created_at TIMESTAMP NOT NULL
)
"""
