"""Feedback model - one widget submission plus its AI analysis."""

FEEDBACK_DDL = """
CREATE TABLE IF NOT EXISTS feedback (
    id VARCHAR PRIMARY KEY,
    team_id VARCHAR NOT NULL,
    customer_id VARCHAR,
    original_text VARCHAR NOT NULL,
    translated_text VARCHAR,
    detected_language VARCHAR,
    sentiment VARCHAR,
    cultural_notes VARCHAR,
    summary VARCHAR,
    rate INTEGER,
    is_resolved BOOLEAN DEFAULT FALSE,
    stream_source VARCHAR,
    created_at TIMESTAMP NOT NULL
)
"""

FEEDBACK_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_feedback_team ON feedback(team_id)",
    "CREATE INDEX IF NOT EXISTS idx_feedback_created ON feedback(created_at)",
]
