"""
Alembic Environment Configuration

Runs the catalog's schema migrations.

- The database URL comes from catalog_api settings (DATABASE_URL / .env),
  not from alembic.ini.
- Importing catalog_api.models registers every table on Base.metadata so
  autogenerate can diff against it.
- SQLite databases are migrated in batch mode, since SQLite cannot ALTER
  most column properties in place.

Usage:
    alembic upgrade head
    alembic revision --autogenerate -m "describe the change"
    alembic upgrade head --sql > migration.sql   # offline
"""

from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool

from alembic import context

from catalog_api.config import get_settings
from catalog_api.database import Base
from catalog_api.models import Author, Book, Publisher  # noqa: F401 - needed for autogenerate

settings = get_settings()

config = context.config
config.set_main_option("sqlalchemy.url", settings.database_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """
    Run migrations in 'offline' mode.

    Emits SQL to stdout instead of connecting to the database.
    """
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        render_as_batch=settings.is_sqlite,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations against a live connection."""
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            render_as_batch=settings.is_sqlite,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
