"""
Alembic environment configuration for admin-console's database migrations.

This script sets up the migration context, connects to the database using
settings.DATABASE_URL, and defines the target metadata for SQLModel models.
"""
from logging.config import fileConfig  # For configuring logging
from sqlalchemy import engine_from_config, pool  # For database connection
from alembic import context  # For migration context

from admin_console.core.config.settings import settings
from admin_console.domain.entities.user import AdminUser  # noqa: F401  AdminUser model
from sqlmodel import SQLModel  # For metadata

# Alembic Config object, provides access to alembic.ini
config = context.config

# Set database URL from settings for consistency with the console commands
config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)

# Configure logging from alembic.ini
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Target metadata for SQLModel models, includes all defined tables
target_metadata = SQLModel.metadata

def run_migrations_offline() -> None:
    """
    Run migrations in 'offline' mode, generating SQL scripts without a database connection.
    """
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,  # Use literal SQL values
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()

def run_migrations_online() -> None:
    """
    Run migrations in 'online' mode, connecting to the database.

    Uses a non-pooled connection to avoid conflicts during migrations.
    """
    connectable = engine_from_config(
        config.get_section(config.config_ini_section),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,  # Disable pooling for migrations
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
        )

        with context.begin_transaction():
            context.run_migrations()

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
