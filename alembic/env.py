"""Alembic env: migrates the studyhub models over the sync counterpart of the app's URL."""
from logging.config import fileConfig
import os

from alembic import context
from sqlalchemy import engine_from_config, pool

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

from studyhub.db.base import Base  # noqa: E402
from studyhub.db.session import to_sync_url  # noqa: E402
from studyhub.core.config import get_settings  # noqa: E402

target_metadata = Base.metadata


def migration_url() -> str:
    """ALEMBIC_DATABASE_URL wins; otherwise the app's own database_url."""
    return os.getenv("ALEMBIC_DATABASE_URL") or to_sync_url(get_settings().database_url)


def run_migrations_offline() -> None:
    context.configure(
        url=migration_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = engine_from_config(
        {"sqlalchemy.url": migration_url()},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
        future=True,
    )

    with connectable.connect() as connection:
        # SQLite cannot ALTER most constraints in place
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            render_as_batch=connection.dialect.name == "sqlite",
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
