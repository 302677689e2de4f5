"""Stream event model - events emitted by the streaming agents."""

ANOMALY_EVENT = "anomaly_detected"

STREAM_EVENT_DDL = """
CREATE TABLE IF NOT EXISTS stream_event (
    id VARCHAR PRIMARY KEY,
    event_type VARCHAR NOT NULL,
    payload JSON,
    status VARCHAR,
    created_at TIMESTAMP NOT NULL,
    processed_at TIMESTAMP
)
"""

STREAM_EVENT_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_stream_event_type ON stream_event(event_type, created_at)",
]
