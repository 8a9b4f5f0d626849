#!/usr/bin/env python3
"""
Table Column Inspection Script for Guide Validator

Prints column metadata for a table and one sample row, straight from Postgres.
The connection string comes from --dsn or the DATABASE_URL environment variable.
"""

import argparse
import os
import sys
from typing import Any, Dict, List, Optional

import psycopg2
import psycopg2.extras
from psycopg2 import sql
import structlog

from shared.utils.logger import configure_logging

logger = structlog.get_logger(__name__)

SAMPLE_VALUE_LIMIT = 50

COLUMNS_QUERY = """
    SELECT column_name, data_type, is_nullable
    FROM information_schema.columns
    WHERE table_name = %s
    ORDER BY ordinal_position
"""


def format_column(column: Dict[str, Any]) -> str:
    """``name (type[, NOT NULL])``"""
    not_null = ", NOT NULL" if column.get("is_nullable") == "NO" else ""
    return f"{column['column_name']} ({column['data_type']}{not_null})"


def format_sample_value(value: Any) -> str:
    if value is None:
        return "(null)"
    if isinstance(value, str) and len(value) > SAMPLE_VALUE_LIMIT:
        return value[:SAMPLE_VALUE_LIMIT] + "..."
    return str(value)


def check_table_columns(dsn: str, table: str, sslmode: str = "require") -> Optional[List[Dict[str, Any]]]:
    """
    Print the table's columns and a sample row

    Returns:
        The column rows, or None when the inspection failed
    """
    conn = None
    try:
        conn = psycopg2.connect(dsn, sslmode=sslmode)
        print(f"✅ Connected, inspecting '{table}'\n")

        with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cursor:
            cursor.execute(COLUMNS_QUERY, (table,))
            columns = cursor.fetchall()

            print(f"{table} table columns:\n")
            for column in columns:
                print(f"  - {format_column(column)}")

            if not columns:
                print("  (no columns found)")
                return columns

            cursor.execute(sql.SQL("SELECT * FROM {} LIMIT 1").format(sql.Identifier(table)))
            sample = cursor.fetchone()

            print(f"\nSample {table} record:\n")
            if sample:
                for key, value in sample.items():
                    print(f"  {key}: {format_sample_value(value)}")
            else:
                print("  (table is empty)")

        return columns

    except Exception as e:
        logger.error("Column inspection failed", table=table, error=str(e))
        return None
    finally:
        if conn is not None:
            conn.close()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Print column metadata for a Postgres table")
    parser.add_argument("table", nargs="?", default="guides", help="Table or view name (default: guides)")
    parser.add_argument("--dsn", default=os.getenv("DATABASE_URL"), help="Postgres connection string (default: $DATABASE_URL)")
    parser.add_argument("--sslmode", default=os.getenv("PGSSLMODE", "require"), help="libpq sslmode (default: require)")
    args = parser.parse_args(argv)

    configure_logging(log_level=os.getenv("LOG_LEVEL", "INFO"))

    if not args.dsn:
        parser.error("no connection string: pass --dsn or set DATABASE_URL")

    columns = check_table_columns(args.dsn, args.table, args.sslmode)
    return 0 if columns is not None else 1


if __name__ == "__main__":
    sys.exit(main())
