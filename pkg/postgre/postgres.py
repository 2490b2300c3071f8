import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from asyncpg.exceptions import QueryCanceledError  # type: ignore
from loguru import logger
from sqlalchemy import exc as sa_exc
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from .interface import IDatabase
from .type import PostgresConfig
from .constant import *

# Exceptions a repository call can raise for database reasons
DATABASE_ERRORS = (sa_exc.SQLAlchemyError, asyncio.TimeoutError, OSError)

_SYNC_PREFIXES = ("postgresql://", "postgres://")


def _async_url(url: str) -> str:
    for prefix in _SYNC_PREFIXES:
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix):]
    return url


def _is_statement_timeout(orig: Optional[BaseException]) -> bool:
    # The asyncpg dialect re-raises driver errors as an adapted Error that
    # keeps the sqlstate and chains the original asyncpg exception
    if orig is None:
        return False
    if getattr(orig, "sqlstate", None) == SQLSTATE_QUERY_CANCELED:
        return True
    return isinstance(orig, QueryCanceledError) or isinstance(orig.__cause__, QueryCanceledError)


def classify_error(error: BaseException) -> DatabaseErrorKind:
    """Map a driver / SQLAlchemy exception onto a DatabaseErrorKind."""
    if isinstance(error, (asyncio.TimeoutError, TimeoutError, sa_exc.TimeoutError)):
        return DatabaseErrorKind.TIMEOUT
    if isinstance(error, sa_exc.IntegrityError):
        return DatabaseErrorKind.CONFLICT
    if isinstance(error, sa_exc.DBAPIError):
        if _is_statement_timeout(error.orig):
            return DatabaseErrorKind.TIMEOUT
        if error.connection_invalidated or isinstance(
            error, (sa_exc.OperationalError, sa_exc.InterfaceError)
        ):
            return DatabaseErrorKind.UNAVAILABLE
        return DatabaseErrorKind.UNKNOWN
    if isinstance(error, (ConnectionError, OSError)):
        return DatabaseErrorKind.UNAVAILABLE
    return DatabaseErrorKind.UNKNOWN


class PostgresDatabase(IDatabase):
    """Async engine and session factory for the metadata store.

    Statements are bounded by command_timeout and pool checkouts by
    pool_timeout, so a stalled database surfaces as a TIMEOUT instead of
    blocking a consumer worker.
    """

    def __init__(self, config: PostgresConfig):
        self.config = config
        self.engine: AsyncEngine = create_async_engine(
            _async_url(config.database_url), **self._engine_options()
        )
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.info(
            f"PostgreSQL engine ready (schema={config.schema}, pool_size={config.pool_size})"
        )

    def _engine_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {
            "echo": self.config.echo,
            "echo_pool": self.config.echo_pool,
            "pool_pre_ping": self.config.pool_pre_ping,
            "pool_recycle": self.config.pool_recycle,
            "connect_args": {
                "command_timeout": self.config.command_timeout,
                "timeout": self.config.pool_timeout,
            },
        }
        if self.config.echo:
            # SQL echo is a debugging aid; skip pooling so every checkout is visible
            options["poolclass"] = NullPool
            return options

        options.update(
            pool_size=self.config.pool_size,
            max_overflow=self.config.max_overflow,
            pool_timeout=self.config.pool_timeout,
        )
        return options

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session; it is rolled back if the caller raises.

        Raises:
            RuntimeError: If the engine has been closed
        """
        if self.session_factory is None:
            raise RuntimeError(ERROR_DATABASE_NOT_INITIALIZED)

        async with self.session_factory() as session:
            try:
                if self.config.schema != DEFAULT_SCHEMA:
                    await session.execute(
                        text(f'SET search_path TO "{self.config.schema}", {DEFAULT_SCHEMA}')
                    )
                yield session
            except BaseException:
                await session.rollback()
                raise

    async def health_check(self) -> bool:
        try:
            async with self.get_session() as session:
                return (await session.execute(text("SELECT 1"))).scalar() == 1
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return False

    async def get_pool_status(self) -> Dict[str, Any]:
        pool = self.engine.pool
        if not hasattr(pool, "size"):
            return {"error": "Pool not available"}

        size, overflow = pool.size(), pool.overflow()
        return {
            "pool_size": size,
            "checked_in": pool.checkedin(),
            "checked_out": pool.checkedout(),
            "overflow": overflow,
            "total": size + overflow,
        }

    async def close(self) -> None:
        """Dispose of the engine; later get_session() calls fail."""
        await self.engine.dispose()
        self.session_factory = None
        logger.info("PostgreSQL engine closed")


__all__ = [
    "DATABASE_ERRORS",
    "PostgresDatabase",
    "classify_error",
]
