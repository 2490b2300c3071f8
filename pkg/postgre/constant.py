from enum import Enum

# PostgreSQL Defaults
DEFAULT_POOL_SIZE = 20
DEFAULT_MAX_OVERFLOW = 10
DEFAULT_POOL_RECYCLE = 3600
DEFAULT_POOL_TIMEOUT = 10.0
DEFAULT_COMMAND_TIMEOUT = 15.0
DEFAULT_POOL_PRE_PING = True
DEFAULT_ECHO = False
DEFAULT_ECHO_POOL = False
DEFAULT_SCHEMA = "public"

# query_canceled, raised when command_timeout / statement_timeout fires
SQLSTATE_QUERY_CANCELED = "57014"


class DatabaseErrorKind(str, Enum):
    """Failure classification for database errors."""

    TIMEOUT = "timeout"
    UNAVAILABLE = "unavailable"
    CONFLICT = "conflict"
    UNKNOWN = "unknown"


# Error Messages
ERROR_DATABASE_URL_EMPTY = "database_url is required"
ERROR_INVALID_DATABASE_URL = "database_url must be a PostgreSQL connection string"
ERROR_POOL_SIZE_POSITIVE = "pool_size must be > 0"
ERROR_MAX_OVERFLOW_NON_NEGATIVE = "max_overflow must be >= 0"
ERROR_POOL_RECYCLE_POSITIVE = "pool_recycle must be > 0"
ERROR_TIMEOUT_POSITIVE = "pool_timeout and command_timeout must be > 0"
ERROR_SCHEMA_EMPTY = "schema cannot be empty"
ERROR_DATABASE_NOT_INITIALIZED = "Database not initialized"
