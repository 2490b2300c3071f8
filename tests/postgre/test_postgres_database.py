"""Unit tests for the Postgres database wrapper."""

import asyncio

import pytest  # type: ignore
from asyncpg.exceptions import QueryCanceledError  # type: ignore
from sqlalchemy import exc as sa_exc

from pkg.postgre.constant import DatabaseErrorKind
from pkg.postgre.postgres import PostgresDatabase, classify_error
from pkg.postgre.type import PostgresConfig


def _dialect_error(cause: BaseException, sqlstate=None) -> sa_exc.DBAPIError:
    """Wrap a driver error the way the asyncpg dialect surfaces it."""

    class Error(Exception):
        pass

    adapted = Error(f"{type(cause).__name__}: {cause}")
    adapted.sqlstate = sqlstate
    adapted.__cause__ = cause
    return sa_exc.DBAPIError("SELECT 1", {}, adapted)


class TestPostgresConfig:
    def test_defaults(self):
        config = PostgresConfig(database_url="postgresql+asyncpg://u:p@localhost/db")

        assert config.pool_size == 20
        assert config.command_timeout == 15.0
        assert config.schema == "public"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"database_url": ""},
            {"database_url": "mysql://u:p@localhost/db"},
            {"pool_size": 0},
            {"max_overflow": -1},
            {"command_timeout": 0},
            {"schema": " "},
        ],
    )
    def test_invalid(self, kwargs):
        values = {"database_url": "postgresql://u:p@localhost/db"}
        values.update(kwargs)
        with pytest.raises(ValueError):
            PostgresConfig(**values)


class TestClassifyError:
    @pytest.mark.parametrize(
        "error,kind",
        [
            (asyncio.TimeoutError(), DatabaseErrorKind.TIMEOUT),
            (sa_exc.TimeoutError("pool exhausted"), DatabaseErrorKind.TIMEOUT),
            (
                _dialect_error(QueryCanceledError("canceling statement due to statement timeout"), "57014"),
                DatabaseErrorKind.TIMEOUT,
            ),
            (_dialect_error(QueryCanceledError("canceling statement")), DatabaseErrorKind.TIMEOUT),
            (_dialect_error(Exception("syntax error"), "42601"), DatabaseErrorKind.UNKNOWN),
            (sa_exc.IntegrityError("INSERT", {}, Exception("duplicate")), DatabaseErrorKind.CONFLICT),
            (sa_exc.OperationalError("SELECT", {}, Exception("refused")), DatabaseErrorKind.UNAVAILABLE),
            (sa_exc.InterfaceError("SELECT", {}, Exception("closed")), DatabaseErrorKind.UNAVAILABLE),
            (
                sa_exc.DBAPIError("SELECT", {}, Exception("gone"), connection_invalidated=True),
                DatabaseErrorKind.UNAVAILABLE,
            ),
            (sa_exc.ProgrammingError("SELECT", {}, Exception("syntax")), DatabaseErrorKind.UNKNOWN),
            (ConnectionRefusedError(), DatabaseErrorKind.UNAVAILABLE),
            (ValueError("other"), DatabaseErrorKind.UNKNOWN),
        ],
    )
    def test_kinds(self, error, kind):
        assert classify_error(error) == kind


class TestPostgresDatabase:
    async def test_url_is_switched_to_asyncpg(self):
        db = PostgresDatabase(PostgresConfig(database_url="postgresql://u:p@localhost:5432/db"))
        try:
            assert db.engine.url.drivername == "postgresql+asyncpg"
            assert db.engine.url.database == "db"
        finally:
            await db.close()

    async def test_pool_status(self):
        db = PostgresDatabase(PostgresConfig(database_url="postgresql+asyncpg://u:p@localhost/db", pool_size=3))
        try:
            status = await db.get_pool_status()
            assert status["pool_size"] == 3
            assert status["checked_out"] == 0
        finally:
            await db.close()
