# shopgraph/database.py
import logging
import urllib.parse

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import declarative_base

from . import config

logger = logging.getLogger(__name__)

engine = create_async_engine(config.DATABASE_URL, echo=config.SQL_ECHO, future=True)

Base = declarative_base()


def ensure_database_exists(url: str = config.DATABASE_URL) -> bool:
    """
    Create the database named in DATABASE_URL if it is missing, by connecting
    to the maintenance DB (postgres) with psycopg2.

    Only applies to PostgreSQL URLs. Returns True when the database was created.
    """
    parsed = urllib.parse.urlparse(url)
    if not parsed.scheme.startswith("postgresql"):
        return False
    dbname = parsed.path.lstrip("/") if parsed.path else ""
    if not dbname:
        return False

    import psycopg2
    import psycopg2.extensions

    conn = psycopg2.connect(
        dbname="postgres",
        user=parsed.username or "postgres",
        password=parsed.password or "",
        host=parsed.hostname or "localhost",
        port=parsed.port or 5432,
    )
    try:
        conn.autocommit = True
        cur = conn.cursor()
        cur.execute("SELECT 1 FROM pg_database WHERE datname = %s", (dbname,))
        exists = cur.fetchone() is not None
        if not exists:
            cur.execute("CREATE DATABASE %s", (psycopg2.extensions.AsIs(dbname),))
            logger.info("Created database %s on %s", dbname, parsed.hostname)
        cur.close()
        return not exists
    finally:
        conn.close()


async def create_tables(db_engine=engine) -> None:
    # development convenience; use alembic migrations in production
    from . import models  # noqa: F401  register tables on Base.metadata

    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
