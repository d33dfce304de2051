"""
Alembic migration environment.
Supports both online (connected to DB) and offline (SQL script generation) modes.
SQLite targets use batch mode, since SQLite cannot ALTER most constraints in place.
"""

from logging.config import fileConfig
from sqlalchemy import engine_from_config, pool
from alembic import context

from meetx.db.base import Base
from meetx.models import User, Activity, Booking  # noqa: F401 - Import models for autogenerate
from meetx.core.config import get_settings

config = context.config
settings = get_settings()

# Migrations run on a synchronous driver
config.set_main_option("sqlalchemy.url", settings.DATABASE_URL_SYNC)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _configure_options(url: str) -> dict:
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "render_as_batch": url.startswith("sqlite"),
    }


def run_migrations_offline() -> None:
    """Generate SQL script without connecting to the database."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_options(url),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations against a live database connection."""
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            **_configure_options(str(connectable.url)),
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
