"""ETL package - demo data loading and validation for the feedback database."""

from etl.demo import clear_tables, seed_demo_data
from etl.validation import validate_database

__all__ = [
    "seed_demo_data",
    "clear_tables",
    "validate_database",
]
