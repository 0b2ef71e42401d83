"""
Persistence gateway

Owns the SQLAlchemy engine and its connection pool. Every call to
``Database.execute`` is one statement in one autocommitted round-trip.
"""
import logging
from typing import Any, Dict, List, Optional, Union

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from vendor_console.config import Settings

logger = logging.getLogger(__name__)

# Base class for declarative models
Base = declarative_base()


class StorageError(Exception):
    """Raised for any failure reported by the storage layer"""


def _build_engine(settings: Settings) -> Engine:
    url = settings.database_url
    if url.startswith("sqlite"):
        kwargs: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, otherwise each checkout sees an empty database
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=settings.db_echo, **kwargs)

    return create_engine(
        url,
        echo=settings.db_echo,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
    )


class Database:
    """Storage handle passed explicitly to repositories"""

    def __init__(self, settings: Settings):
        self.engine = _build_engine(settings)

    def execute(
        self, statement, parameters: Optional[Dict[str, Any]] = None
    ) -> Union[List[RowMapping], int]:
        """
        Execute a single statement

        Args:
            statement: SQLAlchemy Core statement or ``text()`` clause
            parameters: Bound parameters for the statement

        Returns:
            List of row mappings for statements returning rows,
            otherwise the affected row count

        Raises:
            StorageError: On any database failure
        """
        try:
            with self.engine.begin() as conn:
                result = conn.execute(statement, parameters or {})
                if result.returns_rows:
                    return list(result.mappings().all())
                return result.rowcount
        except SQLAlchemyError as e:
            logger.error(f"Storage failure: {e}")
            raise StorageError(str(e)) from e

    def insert(self, statement, parameters: Optional[Dict[str, Any]] = None) -> int:
        """Execute an INSERT and return the generated primary key"""
        try:
            with self.engine.begin() as conn:
                result = conn.execute(statement, parameters or {})
                return result.inserted_primary_key[0]
        except SQLAlchemyError as e:
            logger.error(f"Storage failure: {e}")
            raise StorageError(str(e)) from e

    def ping(self) -> bool:
        """Round-trip check against the database"""
        rows = self.execute(text("SELECT 1 AS ok"))
        return bool(rows) and rows[0]["ok"] == 1

    def create_all(self) -> None:
        """Create all tables (safe to call repeatedly)"""
        # Import models so they register with Base.metadata
        import vendor_console.models  # noqa: F401

        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            logger.error(f"Failed to initialize schema: {e}")
            raise StorageError(str(e)) from e

    def dispose(self) -> None:
        """Close all pooled connections"""
        self.engine.dispose()
        logger.info("Database connection pool closed")


def get_db(request: Request) -> Database:
    """Dependency returning the application's storage handle"""
    return request.app.state.database
