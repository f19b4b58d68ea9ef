"""The initial Alembic revision must build the same tables as the models."""

from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest
from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy import create_engine, inspect

from edusphere.models import Base

MIGRATION = Path(__file__).resolve().parent.parent / "alembic" / "versions" / "001_initial_schema.py"


@pytest.fixture
def revision():
    spec = importlib.util.spec_from_file_location("initial_schema", MIGRATION)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'migrate.db'}")
    yield engine
    engine.dispose()


def _run(engine, step) -> None:
    with engine.begin() as conn:
        ctx = MigrationContext.configure(conn)
        with Operations.context(ctx):
            step()


def test_upgrade_matches_models(engine, revision):
    _run(engine, revision.upgrade)

    inspector = inspect(engine)
    assert set(inspector.get_table_names()) == set(Base.metadata.tables)
    for name, table in Base.metadata.tables.items():
        columns = {c["name"] for c in inspector.get_columns(name)}
        assert columns == set(table.columns.keys()), name


def test_email_is_unique(engine, revision):
    _run(engine, revision.upgrade)

    indexes = {ix["name"]: ix for ix in inspect(engine).get_indexes("users")}
    assert indexes["ix_users_email"]["unique"]


def test_downgrade_drops_everything(engine, revision):
    _run(engine, revision.upgrade)
    _run(engine, revision.downgrade)

    assert inspect(engine).get_table_names() == []
