from contextlib import contextmanager
from functools import lru_cache
from typing import Any, Generator, Optional

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from projects.config import get_settings
from projects.exceptions import DbException, ProjectsException
from projects.logging_config import get_logger

# Registers the tables on SQLModel.metadata
from projects import models  # noqa: F401

logger = get_logger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def make_engine(
    database_url: Optional[str] = None,
    echo: Optional[bool] = None,
    **engine_kwargs: Any,
) -> Engine:
    """
    Create an engine for the configured store.

    Server databases get a bounded connection pool; SQLite keeps the
    dialect's default pool. Extra keyword arguments go to ``create_engine``.
    """
    settings = get_settings()
    url = database_url or settings.database_url

    options: dict[str, Any] = {
        "echo": settings.debug if echo is None else echo,
        "pool_pre_ping": True,  # Verify connection health before use
    }
    if not url.startswith("sqlite"):
        options.update(
            pool_size=5,
            max_overflow=10,
            pool_timeout=30,
            pool_recycle=1800,  # Recycle connections after 30 min
        )
    options.update(engine_kwargs)

    engine = create_engine(url, **options)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    logger.debug(f"Created engine for {engine.url.render_as_string(hide_password=True)}")
    return engine


@lru_cache
def get_engine() -> Engine:
    """Process-wide engine built from settings."""
    return make_engine()


def init_db(engine: Optional[Engine] = None) -> None:
    """Create any missing tables."""
    engine = engine or get_engine()
    try:
        SQLModel.metadata.create_all(engine)
    except SQLAlchemyError as exc:
        raise DbException(f"Could not create schema: {exc}", cause=exc) from exc


@contextmanager
def transaction(engine: Optional[Engine] = None) -> Generator[Session, None, None]:
    """
    Run one unit of work on one connection.

    Commits when the block finishes, rolls back when it raises. Any error
    other than a ProjectsException is re-raised as DbException with the
    original attached.
    """
    engine = engine or get_engine()
    try:
        with Session(engine, expire_on_commit=False) as session:
            try:
                yield session
                session.commit()
            except Exception:
                session.rollback()
                raise
    except ProjectsException:
        raise
    except Exception as exc:
        logger.error(f"Transaction rolled back: {exc}")
        raise DbException(str(exc), cause=exc) from exc
