"""
Database engine lifecycle.

The engine is the process-wide storage handle. It is built once by the
application lifespan (or the CLI), handed to repositories by reference,
and disposed at shutdown. Nothing in this module holds a global engine.
"""

import logging

from sqlalchemy import MetaData, create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from promotion_tracking.core.config import Settings

logger = logging.getLogger(__name__)

metadata = MetaData()


def build_engine(settings: Settings) -> Engine:
    """Build a SQLAlchemy engine from application settings.

    SQLite gets a StaticPool so an in-memory database is shared by every
    connection; other backends get a pre-pinged QueuePool.
    """
    dsn = settings.get_database_dsn()
    if dsn.startswith("sqlite"):
        engine = create_engine(
            dsn,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
            echo=settings.db_echo,
        )
    else:
        engine = create_engine(
            dsn,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=True,
            echo=settings.db_echo,
        )
    logger.info(
        "Database engine created for %s",
        engine.url.render_as_string(hide_password=True),
    )
    return engine


def create_schema(engine: Engine) -> None:
    """Create every table registered on ``metadata`` that does not exist yet."""
    # Registers the promotion tables on the shared metadata.
    from promotion_tracking.infrastructure.promotion import tables  # noqa: F401

    metadata.create_all(engine)
    logger.info("Database schema ensured: %s", ", ".join(sorted(metadata.tables)))


def check_connection(engine: Engine) -> bool:
    """Return True if the database answers a trivial query."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("Database health check failed: %s", type(exc).__name__)
        return False
    return True
