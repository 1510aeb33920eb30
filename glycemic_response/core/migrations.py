"""Schema migration helpers for the meal/glucose tables."""

from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.script import ScriptDirectory
from sqlalchemy import text

from glycemic_response.database import get_engine
from glycemic_response.logging_config import get_logger

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


def get_alembic_config() -> Config:
    """Build the Alembic config from the project's alembic.ini."""
    alembic_ini = PROJECT_ROOT / "alembic.ini"
    if not alembic_ini.exists():
        raise FileNotFoundError(f"alembic.ini not found at {alembic_ini}")

    config = Config(str(alembic_ini))
    config.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    return config


def run_migrations() -> None:
    """Upgrade the database to the latest revision.

    Run before the API starts serving; the service itself only reads.
    """
    logger.info("Running database migrations")
    try:
        command.upgrade(get_alembic_config(), "head")
    except Exception:
        logger.exception("Database migration failed")
        raise
    logger.info("Database migrations completed")


def get_head_revision() -> str | None:
    """Latest revision known to the migration scripts."""
    return ScriptDirectory.from_config(get_alembic_config()).get_current_head()


async def get_database_revision() -> str | None:
    """Revision currently applied to the database, None if never migrated."""
    try:
        async with get_engine().connect() as conn:
            result = await conn.execute(
                text("SELECT version_num FROM alembic_version LIMIT 1")
            )
            row = result.fetchone()
    except Exception:
        return None
    return row[0] if row is not None else None


async def check_migrations_current() -> bool:
    """True when the database is at the head revision."""
    current = await get_database_revision()
    return current is not None and current == get_head_revision()
