"""Database connection and session management."""
from typing import Generator

from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from football_api.app_logging import get_logger
from football_api.storage.base import Base

logger = get_logger(__name__)


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def _is_memory(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, echo: bool = False, pool_size: int = 10, max_overflow: int = 20) -> Engine:
    """Create the engine for ``url`` with pool settings suited to the backend."""
    if _is_sqlite(url):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if _is_memory(url):
            # One shared connection, otherwise every session sees an empty database
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, echo=echo, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_engine(
        url,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_pre_ping=True,  # Verify connections before using
        echo=echo,
    )


class Database:
    """Owns the engine and session factory for one storage location.

    Built once at startup and handed to whoever needs sessions.
    """

    def __init__(self, url: str, echo: bool = False, pool_size: int = 10, max_overflow: int = 20):
        self.url = url
        self.engine = build_engine(url, echo=echo, pool_size=pool_size, max_overflow=max_overflow)
        self.session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
            class_=Session,
            expire_on_commit=False,
        )

    def get_session(self) -> Generator[Session, None, None]:
        """
        Yield a session and make sure it is closed afterwards.
        Suitable as a FastAPI dependency body.
        """
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    def init_db(self) -> None:
        """Create tables that don't exist yet."""
        # Make sure every model is registered on Base.metadata
        import football_api.storage.models  # noqa: F401

        logger.info("Initializing database...")
        for table in Base.metadata.sorted_tables:
            logger.info(f"Running migration: {table.name}")
            table.create(bind=self.engine, checkfirst=True)
        logger.info("Database initialized successfully")

    def table_exists(self, table_name: str) -> bool:
        return inspect(self.engine).has_table(table_name)

    def check_connection(self) -> bool:
        """Check if database is accessible."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database connection failed: {e}")
            return False

    def dispose(self) -> None:
        self.engine.dispose()
