"""Constants for the analytics aggregation query."""

DEFAULT_USER_ID = "example-user"

# Number of most recent records, across users, used for global stats
DEFAULT_GLOBAL_WINDOW = 50

# Top-N lists in the response
DEFAULT_RECENT_USER_ITEMS = 5
DEFAULT_RECENT_GLOBAL_ITEMS = 10

# Decimal places of compression_ratio
COMPRESSION_RATIO_PRECISION = 2

# Components named in QueryError
COMPONENT_USER_ANALYTICS = "user_analytics"
COMPONENT_CONTENT_METADATA = "content_metadata"

__all__ = [
    "DEFAULT_USER_ID",
    "DEFAULT_GLOBAL_WINDOW",
    "DEFAULT_RECENT_USER_ITEMS",
    "DEFAULT_RECENT_GLOBAL_ITEMS",
    "COMPRESSION_RATIO_PRECISION",
    "COMPONENT_USER_ANALYTICS",
    "COMPONENT_CONTENT_METADATA",
]
