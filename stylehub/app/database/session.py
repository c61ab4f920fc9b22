"""Database session management for the StyleHub application.

This module handles all aspects of database connection management including:
- Async SQLAlchemy engine and session factory creation
- Connection pooling configuration
- Explicit lifecycle: ``init_database`` builds the store handle and runs the
  startup migration before the application serves requests
- Per-request session dependency for FastAPI
- Tracing of repository operations

The implementation uses SQLAlchemy 2.0 async patterns. No engine exists at
import time; the handle lives on ``app.state.database`` for the lifetime of
the application.
"""

from contextlib import asynccontextmanager
from functools import wraps
from typing import AsyncGenerator
import time

from fastapi import Request
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    create_async_engine,
    AsyncSession,
    AsyncEngine,
    async_sessionmaker
)

from app.core.config import Settings
from app.core.logging import get_logger
from app.database.migrations import run_startup_migrations

logger = get_logger(__name__)
tracer = trace.get_tracer(__name__)


class DatabaseMetrics:
    """Track database performance metrics."""

    def __init__(self):
        self.query_count = 0
        self.slow_queries = 0
        self.error_count = 0

        # Configure thresholds
        self.slow_query_threshold = 1.0  # seconds

    def record_query(self, duration: float):
        """Record query execution metrics."""
        self.query_count += 1
        if duration > self.slow_query_threshold:
            self.slow_queries += 1

    def record_error(self):
        """Record database error."""
        self.error_count += 1


class SessionManager:
    """Manage database sessions and connections."""

    def __init__(self, settings: Settings):
        """Initialize session manager with configuration."""
        self.settings = settings
        self.engine = self._create_engine()
        self.session_factory = self._create_session_factory()
        self.metrics = DatabaseMetrics()

        # Set up event listeners
        self._setup_engine_events()

    def _create_engine(self) -> AsyncEngine:
        """Create SQLAlchemy engine with proper configuration."""
        options = {
            "echo": self.settings.SQL_ECHO,
            "pool_pre_ping": True,
        }
        if not self.settings.is_sqlite:
            options.update(
                pool_size=self.settings.DB_POOL_SIZE,
                max_overflow=self.settings.DB_MAX_OVERFLOW,
                pool_timeout=self.settings.DB_POOL_TIMEOUT,
                pool_recycle=self.settings.DB_POOL_RECYCLE,
            )
        return create_async_engine(self.settings.DATABASE_URL, **options)

    def _create_session_factory(self) -> async_sessionmaker:
        """Create session factory with proper configuration."""
        return async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False
        )

    def _setup_engine_events(self):
        """Set up SQLAlchemy engine event listeners."""
        sync_engine = self.engine.sync_engine

        if sync_engine.dialect.name == "sqlite":
            @event.listens_for(sync_engine, 'connect')
            def enable_foreign_keys(dbapi_connection, connection_record):
                # Profile and item cascades rely on enforced foreign keys
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

        @event.listens_for(sync_engine, 'before_cursor_execute')
        def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
            conn.info.setdefault('query_start_time', []).append(time.time())

        @event.listens_for(sync_engine, 'after_cursor_execute')
        def after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
            start_time = conn.info['query_start_time'].pop()
            duration = time.time() - start_time
            self.metrics.record_query(duration)

            if duration > self.metrics.slow_query_threshold:
                logger.warning(
                    "Slow query detected",
                    duration=duration,
                    statement=statement
                )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get database session with automatic cleanup."""
        session: AsyncSession = self.session_factory()
        try:
            yield session
        except Exception:
            self.metrics.record_error()
            await session.rollback()
            raise
        finally:
            await session.close()

    def get_metrics(self) -> dict:
        """Get current database metrics."""
        return {
            "query_count": self.metrics.query_count,
            "slow_queries": self.metrics.slow_queries,
            "error_count": self.metrics.error_count,
        }

    async def healthcheck(self) -> bool:
        """Perform database health check."""
        try:
            async with self.session() as session:
                await session.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error("Database health check failed", error=e)
            return False

    async def close(self) -> None:
        await self.engine.dispose()


async def init_database(settings: Settings) -> SessionManager:
    """Create the store handle and bring the schema up to date.

    Runs to completion before the application starts accepting requests.
    """
    database = SessionManager(settings)
    if settings.FEATURES.ENABLE_STARTUP_MIGRATIONS:
        await run_startup_migrations(database.engine)
    logger.info("Database initialized", url=database.engine.url.render_as_string(hide_password=True))
    return database


# Dependency for FastAPI
async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding a request-scoped session."""
    database: SessionManager = request.app.state.database
    async with database.session() as session:
        yield session


def with_tracing(func):
    """Decorator for database operation tracing."""
    @wraps(func)
    async def wrapper(*args, **kwargs):
        with tracer.start_as_current_span(
            f"db_{func.__name__}",
            kind=trace.SpanKind.CLIENT
        ) as span:
            try:
                result = await func(*args, **kwargs)
                span.set_status(Status(StatusCode.OK))
                return result
            except Exception as e:
                span.set_status(
                    Status(StatusCode.ERROR, str(e))
                )
                raise
    return wrapper
