from dataclasses import dataclass

from .constant import *

_URL_SCHEMES = ("postgresql+asyncpg://", "postgresql://", "postgres://")


@dataclass
class PostgresConfig:
    """Engine settings for PostgresDatabase.

    database_url may use the plain postgresql:// scheme; the engine switches
    it to asyncpg. pool_timeout bounds a connection checkout and
    command_timeout bounds a single statement, both in seconds. echo turns
    on SQL logging and disables pooling.
    """

    database_url: str
    schema: str = DEFAULT_SCHEMA
    pool_size: int = DEFAULT_POOL_SIZE
    max_overflow: int = DEFAULT_MAX_OVERFLOW
    pool_recycle: int = DEFAULT_POOL_RECYCLE
    pool_timeout: float = DEFAULT_POOL_TIMEOUT
    command_timeout: float = DEFAULT_COMMAND_TIMEOUT
    pool_pre_ping: bool = DEFAULT_POOL_PRE_PING
    echo: bool = DEFAULT_ECHO
    echo_pool: bool = DEFAULT_ECHO_POOL

    def __post_init__(self):
        checks = (
            (bool(self.database_url), ERROR_DATABASE_URL_EMPTY),
            (self.database_url.startswith(_URL_SCHEMES), ERROR_INVALID_DATABASE_URL),
            (self.pool_size > 0, ERROR_POOL_SIZE_POSITIVE),
            (self.max_overflow >= 0, ERROR_MAX_OVERFLOW_NON_NEGATIVE),
            (self.pool_recycle > 0, ERROR_POOL_RECYCLE_POSITIVE),
            (self.pool_timeout > 0 and self.command_timeout > 0, ERROR_TIMEOUT_POSITIVE),
            (bool(self.schema and self.schema.strip()), ERROR_SCHEMA_EMPTY),
        )
        for ok, message in checks:
            if not ok:
                raise ValueError(message)


__all__ = ["PostgresConfig"]
