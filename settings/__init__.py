"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("FEEDBACK_DB_PATH", "feedback.duckdb")

# Logging
LOG_DIR = Path("logs")
LOG_LEVEL = os.getenv("FEEDBACK_LOG_LEVEL", "INFO")

# API server
API_HOST = os.getenv("FEEDBACK_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("FEEDBACK_API_PORT", "8000"))

# API client
CONTEXT_API_URL = os.getenv("FEEDBACK_CONTEXT_API_URL", f"http://{API_HOST}:{API_PORT}/api")
API_TIMEOUT = 30

# Context tables: seconds
CONTEXT_TABLES = {
    "feedback_context": {"ttl": 5 * 60, "refresh_interval": 30},
    "cultural_insights": {"ttl": 15 * 60, "refresh_interval": 2 * 60},
    "team_stats": {"ttl": 10 * 60, "refresh_interval": 60},
    "anomaly_alerts": {"ttl": 2 * 60, "refresh_interval": 15},
}

# Loader windows
FEEDBACK_WINDOW_HOURS = 24
FEEDBACK_LIMIT = 1000
INSIGHTS_WINDOW_DAYS = 7
ANOMALY_WINDOW_HOURS = 1
ANOMALY_LIMIT = 100
