from internal.model.constant import ContentStatus

# Status stamped on records produced by the pipeline
DEFAULT_STATUS = ContentStatus.PROCESSED

# Identifier fields that must be non-empty
REQUIRED_FIELDS = (
    "content_id",
    "user_id",
    "original_bucket",
    "original_key",
    "processed_key",
)

SIZE_FIELDS = ("original_size", "processed_size")
