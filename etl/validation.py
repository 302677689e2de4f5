"""Data validation functions."""

import duckdb

from app.models.insights import ANOMALY_EVENT


def validate_database(conn: duckdb.DuckDBPyConnection) -> dict:
    """Validate integrity of the data the context loaders read."""
    issues = []
    stats = {}

    for table in ("team", "customer", "feedback", "cultural_insight", "stream_event"):
        stats[table] = conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]

    if stats["team"] == 0:
        issues.append("No teams found")

    orphans = conn.execute(
        """
        SELECT COUNT(*) FROM feedback f
        LEFT JOIN team t ON t.id = f.team_id
        WHERE t.id IS NULL
        """
    ).fetchone()[0]
    stats["orphan_feedback"] = orphans
    if orphans > 0:
        issues.append(f"{orphans} feedback rows reference unknown teams")

    unanalyzed = conn.execute("SELECT COUNT(*) FROM feedback WHERE sentiment IS NULL").fetchone()[0]
    stats["unanalyzed_feedback"] = unanalyzed
    if unanalyzed > 0:
        issues.append(f"{unanalyzed} feedback rows have no sentiment yet")

    bad_alerts = conn.execute(
        """
        SELECT COUNT(*) FROM stream_event
        WHERE event_type = ? AND (payload IS NULL OR json_extract_string(payload, '$.teamId') IS NULL)
        """,
        [ANOMALY_EVENT],
    ).fetchone()[0]
    stats["alerts_without_team"] = bad_alerts
    if bad_alerts > 0:
        issues.append(f"{bad_alerts} anomaly events have no teamId in payload")

    return {
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }
