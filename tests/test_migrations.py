"""
Smoke test for the Alembic baseline against a throwaway SQLite file.
"""
from sqlalchemy import create_engine, inspect

from app.db.migrate import run_migrations


def test_upgrade_head_creates_schema(tmp_path):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"

    run_migrations(url)

    engine = create_engine(url)
    try:
        tables = set(inspect(engine).get_table_names())
    finally:
        engine.dispose()

    assert {"users", "aptitude_tests", "test_attempts", "questions", "interviews"} <= tables


def test_upgrade_is_idempotent(tmp_path):
    url = f"sqlite:///{tmp_path / 'twice.db'}"

    run_migrations(url)
    run_migrations(url)
