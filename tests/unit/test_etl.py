"""Tests for demo data loading and validation."""

from app.models.common import db_utcnow
from etl import clear_tables, seed_demo_data, validate_database


class TestSeed:
    def test_counts(self, db):
        counts = seed_demo_data(db)
        assert counts == {"team": 2, "customer": 3, "feedback": 5, "cultural_insight": 2, "stream_event": 2}

    def test_idempotent(self, db):
        seed_demo_data(db)
        seed_demo_data(db)
        assert db.execute("SELECT COUNT(*) FROM feedback").fetchone()[0] == 5

    def test_clear(self, seeded_db):
        clear_tables(seeded_db)
        assert seeded_db.execute("SELECT COUNT(*) FROM team").fetchone()[0] == 0


class TestValidation:
    def test_seeded_is_valid(self, seeded_db):
        result = validate_database(seeded_db)
        assert result["valid"], result["issues"]
        assert result["stats"]["feedback"] == 5

    def test_empty_db(self, db):
        result = validate_database(db)
        assert not result["valid"]
        assert "No teams found" in result["issues"]

    def test_orphan_feedback(self, seeded_db):
        seeded_db.execute(
            "INSERT INTO feedback (id, team_id, original_text, sentiment, created_at) VALUES (?, ?, ?, ?, ?)",
            ["lost", "ghost-team", "hi", "neutral", db_utcnow()],
        )
        result = validate_database(seeded_db)
        assert result["stats"]["orphan_feedback"] == 1
        assert not result["valid"]
