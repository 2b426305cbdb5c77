# alembic/env.py
from logging.config import fileConfig
from alembic import context

# Use the application's engine & metadata
from coffeeshop.core.db import engine as app_engine, Base
# (metadata is filled once the models are imported)
from coffeeshop import models  # noqa: F401

# Alembic config & logging
config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

def _url() -> str:
    return config.get_main_option("sqlalchemy.url") or app_engine.url.render_as_string(hide_password=False)

def run_migrations_offline():
    """Run migrations in 'offline' mode."""
    context.configure(
        url=_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        render_as_batch=_url().startswith("sqlite"),
    )
    with context.begin_transaction():
        context.run_migrations()

def _run_with(connection):
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=(connection.dialect.name == "sqlite"),
    )
    with context.begin_transaction():
        context.run_migrations()

def run_migrations_online():
    """Run migrations in 'online' mode."""
    # A caller (tests, scripts) may hand over an open connection
    connection = config.attributes.get("connection")
    if connection is not None:
        _run_with(connection)
        return
    with app_engine.connect() as connection:
        _run_with(connection)

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
