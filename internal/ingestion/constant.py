"""Constants for the ingestion pipeline."""

from enum import Enum


class Outcome(str, Enum):
    PROCESSED = "processed"
    SKIPPED = "skipped"
    FAILED = "failed"


# Components named in item results and errors
COMPONENT_NOTIFICATION = "notification"
COMPONENT_OBJECT_STORE = "object_store"
COMPONENT_TRANSFORM = "transform"
COMPONENT_CONTENT_METADATA = "content_metadata"
COMPONENT_USER_ANALYTICS = "user_analytics"

# Skip reasons
SKIP_UNSUPPORTED_TYPE = "unsupported_type"
SKIP_UNSUPPORTED_EVENT = "unsupported_event"
SKIP_DUPLICATE = "duplicate"

# Defaults
DEFAULT_ACCEPTED_EXTENSIONS = (".jpg", ".jpeg")
DEFAULT_USER_ID = "example-user"
DEFAULT_PROCESSED_BUCKET = "processed-content-bucket"
DEFAULT_SKIP_DUPLICATES = True

# Event names that carry a newly created object
OBJECT_CREATED_PREFIXES = ("s3:ObjectCreated", "ObjectCreated")

# Batch status codes
STATUS_OK = 200
STATUS_PARTIAL = 207
STATUS_FAILED = 500

MESSAGE_COMPLETED = "Processing completed successfully"
MESSAGE_PARTIAL = "Processing completed with failures"
MESSAGE_FAILED = "Processing failed"
MESSAGE_EMPTY = "No records to process"

__all__ = [
    "Outcome",
    "COMPONENT_NOTIFICATION",
    "COMPONENT_OBJECT_STORE",
    "COMPONENT_TRANSFORM",
    "COMPONENT_CONTENT_METADATA",
    "COMPONENT_USER_ANALYTICS",
    "SKIP_UNSUPPORTED_TYPE",
    "SKIP_UNSUPPORTED_EVENT",
    "SKIP_DUPLICATE",
    "DEFAULT_ACCEPTED_EXTENSIONS",
    "DEFAULT_USER_ID",
    "DEFAULT_PROCESSED_BUCKET",
    "DEFAULT_SKIP_DUPLICATES",
    "OBJECT_CREATED_PREFIXES",
    "STATUS_OK",
    "STATUS_PARTIAL",
    "STATUS_FAILED",
    "MESSAGE_COMPLETED",
    "MESSAGE_PARTIAL",
    "MESSAGE_FAILED",
    "MESSAGE_EMPTY",
]
