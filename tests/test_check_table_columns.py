"""
Tests for the table column inspection script
"""

from unittest.mock import MagicMock, patch

import psycopg2
import pytest

from app.scripts import check_table_columns as script

COLUMNS = [
    {"column_name": "id", "data_type": "uuid", "is_nullable": "NO"},
    {"column_name": "headline", "data_type": "text", "is_nullable": "YES"},
]


@pytest.fixture
def connection():
    conn = MagicMock()
    cursor = conn.cursor.return_value.__enter__.return_value
    cursor.fetchall.return_value = COLUMNS
    cursor.fetchone.return_value = {"id": "guide-1", "headline": None, "bio": "x" * 60}
    return conn, cursor


class TestCheckTableColumns:
    def test_prints_columns_and_sample(self, connection, capsys):
        conn, cursor = connection
        with patch("app.scripts.check_table_columns.psycopg2.connect", return_value=conn) as connect:
            columns = script.check_table_columns("postgresql://db/postgres", "guides")

        assert columns == COLUMNS
        connect.assert_called_once_with("postgresql://db/postgres", sslmode="require")
        out = capsys.readouterr().out
        assert "  - id (uuid, NOT NULL)" in out
        assert "  - headline (text)" in out
        assert "  headline: (null)" in out
        assert "  bio: " + "x" * 50 + "..." in out
        assert cursor.execute.call_args_list[0].args[1] == ("guides",)
        conn.close.assert_called_once()

    def test_connection_closed_when_query_fails(self, connection):
        conn, cursor = connection
        cursor.execute.side_effect = psycopg2.ProgrammingError("permission denied")

        with patch("app.scripts.check_table_columns.psycopg2.connect", return_value=conn):
            assert script.check_table_columns("postgresql://db/postgres", "guides") is None

        conn.close.assert_called_once()

    def test_connect_failure_is_logged(self):
        with patch("app.scripts.check_table_columns.psycopg2.connect", side_effect=psycopg2.OperationalError("no route")):
            assert script.check_table_columns("postgresql://db/postgres", "guides") is None

    def test_unknown_table_skips_sample(self, connection, capsys):
        conn, cursor = connection
        cursor.fetchall.return_value = []

        with patch("app.scripts.check_table_columns.psycopg2.connect", return_value=conn):
            assert script.check_table_columns("postgresql://db/postgres", "nope") == []

        assert cursor.execute.call_count == 1
        assert "(no columns found)" in capsys.readouterr().out
        conn.close.assert_called_once()


class TestMain:
    def test_requires_connection_string(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        with pytest.raises(SystemExit) as exc:
            script.main([])

        assert exc.value.code == 2

    def test_reads_database_url(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://env/postgres")
        monkeypatch.delenv("PGSSLMODE", raising=False)

        with patch.object(script, "check_table_columns", return_value=COLUMNS) as check:
            assert script.main(["guides_browse_v"]) == 0

        check.assert_called_once_with("postgresql://env/postgres", "guides_browse_v", "require")

    def test_failure_exit_code(self):
        with patch.object(script, "check_table_columns", return_value=None):
            assert script.main(["--dsn", "postgresql://x/y", "--sslmode", "disable"]) == 1
