from typing import Any, Dict, Mapping

from internal.model.constant import ContentStatus
from internal.model.content_metadata import ContentMetadata
from ..errors import ErrInvalidData


def to_row(data: ContentMetadata) -> Dict[str, Any]:
    if not isinstance(data, ContentMetadata):
        raise ErrInvalidData(f"expected ContentMetadata, got {type(data).__name__}")

    return {
        "content_id": data.content_id,
        "user_id": data.user_id,
        "original_bucket": data.original_bucket,
        "original_key": data.original_key,
        "processed_key": data.processed_key,
        "original_size": data.original_size,
        "processed_size": data.processed_size,
        "status": ContentStatus(data.status).value,
        "source_etag": data.source_etag,
        "content_type": data.content_type,
        "width": data.width,
        "height": data.height,
        "created_at": data.created_at,
        "updated_at": data.updated_at,
    }


def from_row(row: Mapping[str, Any]) -> ContentMetadata:
    return ContentMetadata(
        content_id=row["content_id"],
        user_id=row["user_id"],
        original_bucket=row["original_bucket"],
        original_key=row["original_key"],
        processed_key=row["processed_key"],
        original_size=int(row["original_size"] or 0),
        processed_size=int(row["processed_size"] or 0),
        status=ContentStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        source_etag=row.get("source_etag"),
        content_type=row.get("content_type"),
        width=row.get("width"),
        height=row.get("height"),
    )


__all__ = ["to_row", "from_row"]
