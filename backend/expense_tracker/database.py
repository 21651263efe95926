"""
Database engine, session factory and declarative base.
"""

import logging
import os
import time
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from expense_tracker.config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()


# SQLite VM instructions between deadline checks
SQLITE_PROGRESS_STEPS = 1000


def _limit_sqlite_statements(engine: Engine, timeout: float) -> None:
    """
    Interrupt SQLite statements running longer than `timeout` seconds.

    The deadline is armed for each statement and cleared once it returns,
    so COMMIT and ROLLBACK issued by the driver are never interrupted.
    Rows fetched after execute() returns are not covered.
    """

    @event.listens_for(engine, "connect")
    def install_progress_handler(dbapi_connection, connection_record):
        info = connection_record.info

        def check_deadline():
            deadline = info.get("statement_deadline")
            return 1 if deadline is not None and time.monotonic() > deadline else 0

        dbapi_connection.set_progress_handler(check_deadline, SQLITE_PROGRESS_STEPS)

    @event.listens_for(engine, "before_cursor_execute")
    def arm_deadline(conn, cursor, statement, parameters, context, executemany):
        conn.info["statement_deadline"] = time.monotonic() + timeout

    @event.listens_for(engine, "after_cursor_execute")
    def clear_deadline(conn, cursor, statement, parameters, context, executemany):
        conn.info.pop("statement_deadline", None)

    @event.listens_for(engine, "handle_error")
    def clear_deadline_on_error(exception_context):
        if exception_context.connection is not None:
            exception_context.connection.info.pop("statement_deadline", None)


def build_engine(database_url: str, timeout: float) -> Engine:
    """
    Create an engine whose queries give up after `timeout` seconds.

    SQLite takes the timeout both as a lock-wait limit and as a running-time
    limit enforced by a progress handler. PostgreSQL takes it as a
    server-side statement timeout. An expired query raises OperationalError.
    """
    backend = make_url(database_url).get_backend_name()
    connect_args = {}

    if backend == "sqlite":
        connect_args = {"check_same_thread": False, "timeout": timeout}
    elif backend == "postgresql":
        connect_args = {"options": f"-c statement_timeout={int(timeout * 1000)}"}

    engine = create_engine(database_url, connect_args=connect_args, pool_pre_ping=True)
    if backend == "sqlite":
        _limit_sqlite_statements(engine, timeout)
    return engine


engine = build_engine(settings.database_url, settings.db_timeout_seconds)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    """Create tables for all registered models."""
    # Register models on Base.metadata
    from expense_tracker import models  # noqa: F401

    url = make_url(settings.database_url)
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        directory = os.path.dirname(url.database)
        if directory:
            os.makedirs(directory, exist_ok=True)

    logger.info("Creating database tables")
    Base.metadata.create_all(bind=engine)


def close_db() -> None:
    """Release pooled connections."""
    logger.info("Disposing database engine")
    engine.dispose()


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for getting database sessions.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
