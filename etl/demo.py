"""Demo data - multilingual feedback, insights and anomaly events."""

import json
from datetime import datetime, timedelta

import duckdb
import polars as pl
from loguru import logger

from app.models.common import db_utcnow
from app.models.insights import ANOMALY_EVENT

DEMO_TEAM_ID = "demo-team"
TABLES = ["stream_event", "cultural_insight", "feedback", "customer", "team"]


def _insert(conn: duckdb.DuckDBPyConnection, table: str, rows: list[dict]) -> int:
    """Upsert rows through a registered polars frame (with transaction)."""
    if not rows:
        return 0

    df = pl.DataFrame(rows)
    view = f"{table}_df"
    cols = ", ".join(df.columns)
    conn.execute("BEGIN TRANSACTION")
    try:
        conn.register(view, df)
        conn.execute(f"INSERT OR REPLACE INTO {table} ({cols}) SELECT {cols} FROM {view}")
        conn.unregister(view)
        conn.execute("COMMIT")
    except Exception:
        conn.execute("ROLLBACK")
        raise
    logger.info("{}: {} rows", table, len(rows))
    return len(rows)


def demo_rows(now: datetime) -> dict[str, list[dict]]:
    """Demo dataset anchored at `now` so every row falls inside the loader windows."""
    teams = [
        {"id": DEMO_TEAM_ID, "name": "Demo Team", "description": "Multilingual demo workspace", "created_at": now},
        {"id": "support-team", "name": "Support Team", "description": "Customer support", "created_at": now},
    ]

    customers = [
        {"id": "cust-yuki", "name": "Yuki Tanaka", "email": "yuki@example.jp", "created_at": now},
        {"id": "cust-lena", "name": "Lena Vogel", "email": "lena@example.de", "created_at": now},
        {"id": "cust-omar", "name": "Omar Haddad", "email": "omar@example.ae", "created_at": now},
    ]

    def feedback(idx, team, customer, text, translated, lang, sentiment, notes, summary, rate, source, minutes_ago):
        return {
            "id": f"demo-feedback-{idx}",
            "team_id": team,
            "customer_id": customer,
            "original_text": text,
            "translated_text": translated,
            "detected_language": lang,
            "sentiment": sentiment,
            "cultural_notes": notes,
            "summary": summary,
            "rate": rate,
            "is_resolved": False,
            "stream_source": source,
            "created_at": now - timedelta(minutes=minutes_ago),
        }

    feedbacks = [
        feedback(
            1, DEMO_TEAM_ID, "cust-yuki",
            "素晴らしいサービスでした！スタッフの対応がとても丁寧で感動しました。",
            "It was a wonderful service! I was impressed by the very polite response of the staff.",
            "ja", "positive",
            "Japanese customers use indirect communication; high praise indicates genuine satisfaction",
            "Highly satisfied customer praising service quality and staff politeness",
            5, "demo", 5,
        ),
        feedback(
            2, DEMO_TEAM_ID, "cust-lena",
            "Der Service war akzeptabel, aber die Lieferzeit könnte verbessert werden.",
            "The service was acceptable, but the delivery time could be improved.",
            "de", "neutral",
            "German customers are direct; a moderate rating with detail indicates engagement",
            "Constructive feedback on delivery time",
            3, "kafka", 20,
        ),
        feedback(
            3, DEMO_TEAM_ID, "cust-omar",
            "الخدمة ممتازة والفريق محترف جداً. شكراً لكم على الاهتمام الكبير!",
            "The service is excellent and the team is very professional. Thank you for your great attention!",
            "ar", "positive",
            "Strong appreciation signals a relationship-building opportunity",
            "Very satisfied customer expressing gratitude",
            5, "kafka", 45,
        ),
        feedback(
            4, "support-team", None,
            "Pelayanannya lumayan sih, tapi mungkin bisa lebih cepat lagi ya. Terima kasih.",
            "The service is pretty good, but maybe it could be faster. Thank you.",
            "id", "positive",
            'Indonesian customers avoid direct criticism; "lumayan" may hint at issues',
            "Polite feedback with a subtle request for faster service",
            4, "widget", 90,
        ),
        feedback(
            5, "support-team", None,
            "The app crashed twice during checkout and nobody answered my ticket.",
            None,
            "en", "negative",
            None,
            "Checkout crash with no support response",
            1, "kafka", 30,
        ),
    ]

    insights = [
        {
            "id": "insight-1",
            "team_id": DEMO_TEAM_ID,
            "language": "ja",
            "region": "Japan",
            "insight_type": "communication_style",
            "insight": "Japanese customers use indirect communication; high praise indicates genuine satisfaction",
            "confidence": 0.95,
            "feedback_count": 1,
            "created_at": now - timedelta(hours=2),
        },
        {
            "id": "insight-2",
            "team_id": DEMO_TEAM_ID,
            "language": "de",
            "region": "Germany",
            "insight_type": "communication_style",
            "insight": "German customers are direct and precise",
            "confidence": 0.92,
            "feedback_count": 1,
            "created_at": now - timedelta(days=1),
        },
    ]

    events = [
        {
            "id": "event-anomaly-1",
            "event_type": ANOMALY_EVENT,
            "payload": json.dumps(
                {
                    "feedbackId": "demo-feedback-5",
                    "teamId": "support-team",
                    "anomalyType": "sentiment_anomaly",
                    "severity": "high",
                    "reasoning": "Sudden negative feedback about checkout crashes",
                }
            ),
            "status": "processed",
            "created_at": now - timedelta(minutes=25),
            "processed_at": now - timedelta(minutes=24),
        },
        {
            "id": "event-trend-1",
            "event_type": "trend_forecast",
            "payload": json.dumps({"teamId": DEMO_TEAM_ID, "language": "ja", "trend": "rising", "confidence": 0.7}),
            "status": "processed",
            "created_at": now - timedelta(minutes=10),
            "processed_at": now - timedelta(minutes=10),
        },
    ]

    return {
        "team": teams,
        "customer": customers,
        "feedback": feedbacks,
        "cultural_insight": insights,
        "stream_event": events,
    }


def clear_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Delete all rows from the feedback tables."""
    for table in TABLES:
        conn.execute(f"DELETE FROM {table}")
    logger.info("All feedback tables cleared")


def seed_demo_data(conn: duckdb.DuckDBPyConnection, now: datetime | None = None) -> dict[str, int]:
    """Insert the demo dataset; returns row counts per table."""
    rows = demo_rows(now or db_utcnow())
    return {table: _insert(conn, table, table_rows) for table, table_rows in rows.items()}
