from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool, text

from config.config import load_config
from internal.model import new_tables

# Alembic Config object
config = context.config
app_config = load_config()

# Allow overriding DB URL via -x db_url
db_url = context.get_x_argument(as_dictionary=True).get("db_url") or app_config.database.url_sync
config.set_main_option("sqlalchemy.url", db_url)

# Table names and schema are configurable; revisions read them from here
config.attributes["content_table"] = app_config.table.content_metadata
config.attributes["user_table"] = app_config.table.user_analytics
schema = app_config.database.schema
config.attributes["schema"] = schema

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = new_tables(
    content_table=app_config.table.content_metadata,
    user_table=app_config.table.user_analytics,
    schema=schema,
).metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode (no DB connection needed)."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        version_table_schema=schema,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode (with DB connection)."""
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.begin() as connection:
        connection.execute(text(f'CREATE SCHEMA IF NOT EXISTS "{schema}"'))
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            version_table_schema=schema,
            include_schemas=True,
        )
        context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
