from logging.config import fileConfig
from sqlalchemy import engine_from_config, pool
from alembic import context

from bizcards.db.base import Base
from bizcards.db.models.user_model import User  # noqa: F401
from bizcards.db.models.card_model import Card  # noqa: F401
from bizcards.core.config import settings

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# alembic needs a sync driver; the app itself talks to postgres through asyncpg
config.set_main_option(
    "sqlalchemy.url", settings.database_url.replace("+asyncpg", "").replace("%", "%%")
)

target_metadata = Base.metadata


def run_migrations_offline():
    """Emit SQL for the users/cards schema without a live connection."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata, compare_type=True)

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
