from datetime import datetime, timezone
from typing import Optional

from pkg.logger.logger import Logger
from internal.model.content_metadata import ContentMetadata
from ..constant import DEFAULT_STATUS, REQUIRED_FIELDS, SIZE_FIELDS
from ..errors import ErrInvalidSize, ErrMissingField
from ..type import BuildInput


def _validate(input_data: BuildInput) -> None:
    for name in REQUIRED_FIELDS:
        value = getattr(input_data, name)
        if not isinstance(value, str) or not value.strip():
            raise ErrMissingField(f"{name} is required")

    for name in SIZE_FIELDS:
        value = getattr(input_data, name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ErrInvalidSize(f"{name} must be an integer, got {type(value).__name__}")
        if value < 0:
            raise ErrInvalidSize(f"{name} must be non-negative, got {value}")


def _as_utc(now: datetime) -> datetime:
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def process(input_data: BuildInput, logger: Optional[Logger] = None) -> ContentMetadata:
    _validate(input_data)

    now = _as_utc(input_data.now)
    record = ContentMetadata(
        content_id=input_data.content_id,
        user_id=input_data.user_id,
        original_bucket=input_data.original_bucket,
        original_key=input_data.original_key,
        processed_key=input_data.processed_key,
        original_size=input_data.original_size,
        processed_size=input_data.processed_size,
        status=DEFAULT_STATUS,
        created_at=now,
        updated_at=now,
        source_etag=input_data.source_etag,
        content_type=input_data.content_type,
        width=input_data.width,
        height=input_data.height,
    )

    if logger:
        logger.debug(
            f"internal.builder.usecase.process: built metadata content_id={record.content_id}"
        )
    return record


def build_content_metadata(
    content_id: str,
    user_id: str,
    original_bucket: str,
    original_key: str,
    processed_key: str,
    original_size: int,
    processed_size: int,
    now: datetime,
) -> ContentMetadata:
    """Convenience wrapper over process() for the core fields."""
    return process(
        BuildInput(
            content_id=content_id,
            user_id=user_id,
            original_bucket=original_bucket,
            original_key=original_key,
            processed_key=processed_key,
            original_size=original_size,
            processed_size=processed_size,
            now=now,
        )
    )


__all__ = ["process", "build_content_metadata"]
