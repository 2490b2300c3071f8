from enum import Enum
from typing import Final


class ContentStatus(str, Enum):
    PROCESSED = "processed"
    FAILED = "failed"


class ErrorKind(str, Enum):
    """Failure classification carried by pipeline and query errors.

    Values line up with the object store and database adapter kinds so an
    adapter kind converts with ErrorKind(adapter_kind.value).
    """

    NOT_FOUND = "not_found"
    ACCESS_DENIED = "access_denied"
    TIMEOUT = "timeout"
    UNAVAILABLE = "unavailable"
    CONFLICT = "conflict"
    INVALID_NOTIFICATION = "invalid_notification"
    INVALID_IMAGE = "invalid_image"
    INVALID_DATA = "invalid_data"
    UNKNOWN = "unknown"


# Default table names, overridable through configuration
DEFAULT_CONTENT_TABLE: Final[str] = "content_metadata"
DEFAULT_USER_TABLE: Final[str] = "user_analytics"

# Processed artifacts live under this prefix in the destination bucket
PROCESSED_KEY_PREFIX: Final[str] = "processed/"

# Column sizes
ID_LENGTH: Final[int] = 64
USER_ID_LENGTH: Final[int] = 255
BUCKET_LENGTH: Final[int] = 255
KEY_LENGTH: Final[int] = 1024
STATUS_LENGTH: Final[int] = 32


def user_index_name(table_name: str) -> str:
    """Index backing per-user queries; named after the table."""
    return f"idx_{table_name}_user_id"


def created_at_index_name(table_name: str) -> str:
    return f"idx_{table_name}_created_at"


def source_index_name(table_name: str) -> str:
    return f"idx_{table_name}_source"


def kind_of(exc: BaseException) -> ErrorKind:
    """ErrorKind of an adapter or repository error, UNKNOWN when it has none."""
    kind = getattr(exc, "kind", None)
    if kind is None:
        return ErrorKind.UNKNOWN
    try:
        return ErrorKind(getattr(kind, "value", kind))
    except ValueError:
        return ErrorKind.UNKNOWN
