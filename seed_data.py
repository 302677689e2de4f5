#!/usr/bin/env python3
"""
Load demo data into the feedback database.

Usage:
    python seed_data.py              # Insert (upsert) demo rows
    python seed_data.py --reset      # Delete all rows first, then insert
    python seed_data.py --validate   # Check data integrity only
"""

import sys

from app.repositories.db import get_write_connection
from etl import clear_tables, seed_demo_data, validate_database
from settings import DB_PATH
from settings.logging import setup_logging

logger = setup_logging(level="INFO", to_file=True)


def run_validation(conn) -> bool:
    """Print a validation report for the database."""
    result = validate_database(conn)

    print("\n" + "=" * 60)
    print("DATA VALIDATION REPORT")
    print("=" * 60)
    for name, value in result["stats"].items():
        print(f"  {name}: {value:,}")
    for issue in result["issues"]:
        print(f"  ⚠️  {issue}")
    print("\n" + ("✅ All data valid!" if result["valid"] else "❌ Some issues found."))
    print("=" * 60 + "\n")

    return result["valid"]


def main():
    args = sys.argv[1:]
    unknown = [a for a in args if a not in ("--reset", "--validate")]
    if unknown:
        print(__doc__)
        sys.exit(1)

    conn = get_write_connection(DB_PATH)
    try:
        if "--validate" in args:
            valid = run_validation(conn)
            sys.exit(0 if valid else 1)

        if "--reset" in args:
            clear_tables(conn)

        counts = seed_demo_data(conn)
        logger.info("Demo data loaded into {}: {}", DB_PATH, counts)
        run_validation(conn)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
