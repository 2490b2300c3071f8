from .constant import (
    ContentStatus,
    ErrorKind,
    kind_of,
    DEFAULT_CONTENT_TABLE,
    DEFAULT_USER_TABLE,
    PROCESSED_KEY_PREFIX,
)
from .content_metadata import ContentMetadata, new_content_metadata_table
from .user_analytics import UserAnalytics, new_user_analytics_table
from .base import Tables, new_tables

__all__ = [
    "ContentStatus",
    "ErrorKind",
    "kind_of",
    "DEFAULT_CONTENT_TABLE",
    "DEFAULT_USER_TABLE",
    "PROCESSED_KEY_PREFIX",
    "ContentMetadata",
    "new_content_metadata_table",
    "UserAnalytics",
    "new_user_analytics_table",
    "Tables",
    "new_tables",
]
