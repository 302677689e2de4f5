#!/usr/bin/env python3
"""
Inspect a running context engine API.

Usage:
    python inspect_context.py                 # Table info and health
    python inspect_context.py team_stats      # Plus schema and entries of one table
"""

import asyncio
import sys

from context_client import ApiError, ContextClient
from settings import CONTEXT_API_URL
from settings.logging import setup_logging

logger = setup_logging(level="INFO", to_file=False)


async def inspect(table: str | None) -> None:
    async with ContextClient(CONTEXT_API_URL) as client:
        health = await client.health()
        tables = await client.tables_info()

        print("\n" + "=" * 60)
        print(f"CONTEXT ENGINE @ {CONTEXT_API_URL} [{health['status']}]")
        print("=" * 60)
        for t in tables:
            print(f"  {t['name']:<20} {t['recordCount']:>6} records  updated {t['lastUpdated']}  ttl {t['ttl']}s")

        if table:
            schema = await client.table_schema(table)
            entries = await client.query_all(table)
            print(f"\n{table}: primary key {schema['primaryKey'] if schema else '-'}")
            for entry in entries[:10]:
                print(f"  {entry}")
            if len(entries) > 10:
                print(f"  ... {len(entries) - 10} more")
        print("=" * 60 + "\n")


def main():
    args = sys.argv[1:]
    if len(args) > 1:
        print(__doc__)
        sys.exit(1)

    try:
        asyncio.run(inspect(args[0] if args else None))
    except ApiError as e:
        logger.error("API error: {}", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
