"""
Unit tests for the initial alembic migration.

Runs the migration against a throwaway SQLite database and checks that it
produces the same tables and columns as the ORM models.
"""

import importlib.util
from pathlib import Path

import pytest
import sqlalchemy as sa
from alembic.migration import MigrationContext
from alembic.operations import Operations

from clipstack.core.database import Base
import clipstack.models  # noqa: F401  (registers tables on Base.metadata)


MIGRATION_PATH = (
    Path(__file__).parents[2] / "alembic" / "versions" / "20261018_001_initial_schema.py"
)


def load_migration():
    module_spec = importlib.util.spec_from_file_location("initial_schema", MIGRATION_PATH)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


@pytest.fixture
def engine():
    engine = sa.create_engine("sqlite://")
    yield engine
    engine.dispose()


def run_migration(engine, direction: str) -> None:
    migration = load_migration()
    with engine.begin() as conn:
        ctx = MigrationContext.configure(conn)
        with Operations.context(ctx):
            getattr(migration, direction)()


class TestInitialSchema:

    def test_is_root_revision(self):
        migration = load_migration()
        assert migration.revision == "001"
        assert migration.down_revision is None

    def test_upgrade_creates_model_tables(self, engine):
        run_migration(engine, "upgrade")

        inspector = sa.inspect(engine)
        assert set(inspector.get_table_names()) == set(Base.metadata.tables)

        for name, table in Base.metadata.tables.items():
            migrated = {c["name"] for c in inspector.get_columns(name)}
            assert migrated == {c.name for c in table.columns}, name

    def test_upgrade_creates_unique_user_indexes(self, engine):
        run_migration(engine, "upgrade")

        indexes = {i["name"]: i for i in sa.inspect(engine).get_indexes("users")}
        assert indexes["ix_users_username"]["unique"]
        assert indexes["ix_users_email"]["unique"]

    def test_upgrade_cascades_timeline_foreign_keys(self, engine):
        run_migration(engine, "upgrade")

        foreign_keys = sa.inspect(engine).get_foreign_keys("timeline_items")
        referred = {fk["referred_table"]: fk for fk in foreign_keys}
        assert set(referred) == {"projects", "media_assets"}
        for fk in foreign_keys:
            assert fk["options"].get("ondelete") == "CASCADE"

    @pytest.mark.parametrize("table", ["projects", "media_assets"])
    def test_upgrade_cascades_owner_foreign_keys(self, engine, table):
        run_migration(engine, "upgrade")

        foreign_keys = sa.inspect(engine).get_foreign_keys(table)
        assert len(foreign_keys) == 1
        assert foreign_keys[0]["referred_table"] == "users"
        assert foreign_keys[0]["constrained_columns"] == ["user_id"]
        assert foreign_keys[0]["options"].get("ondelete") == "CASCADE"

    def test_downgrade_drops_everything(self, engine):
        run_migration(engine, "upgrade")
        run_migration(engine, "downgrade")

        assert sa.inspect(engine).get_table_names() == []
