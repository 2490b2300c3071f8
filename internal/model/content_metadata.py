"""Content metadata record: one row per successfully ingested object."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import BigInteger, Column, DateTime, Index, Integer, MetaData, String, Table

from .constant import *


@dataclass
class ContentMetadata:
    """Metadata for one ingested object.

    content_id is assigned once per ingestion and shared by every write of it.
    """

    content_id: str
    user_id: str
    original_bucket: str
    original_key: str
    processed_key: str
    original_size: int
    processed_size: int
    status: ContentStatus
    created_at: datetime
    updated_at: datetime
    source_etag: Optional[str] = None
    content_type: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content_id": self.content_id,
            "user_id": self.user_id,
            "original_bucket": self.original_bucket,
            "original_key": self.original_key,
            "processed_key": self.processed_key,
            "original_size": self.original_size,
            "processed_size": self.processed_size,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "source_etag": self.source_etag,
            "content_type": self.content_type,
            "width": self.width,
            "height": self.height,
        }


def new_content_metadata_table(name: str = DEFAULT_CONTENT_TABLE, metadata: Optional[MetaData] = None) -> Table:
    metadata = metadata if metadata is not None else MetaData()
    return Table(
        name,
        metadata,
        Column("content_id", String(ID_LENGTH), primary_key=True),
        Column("user_id", String(USER_ID_LENGTH), nullable=False),
        Column("original_bucket", String(BUCKET_LENGTH), nullable=False),
        Column("original_key", String(KEY_LENGTH), nullable=False),
        Column("processed_key", String(KEY_LENGTH), nullable=False),
        Column("original_size", BigInteger, nullable=False, default=0),
        Column("processed_size", BigInteger, nullable=False, default=0),
        Column("status", String(STATUS_LENGTH), nullable=False, default=ContentStatus.PROCESSED.value),
        Column("source_etag", String(255), nullable=True),
        Column("content_type", String(127), nullable=True),
        Column("width", Integer, nullable=True),
        Column("height", Integer, nullable=True),
        Column("created_at", DateTime(timezone=True), nullable=False),
        Column("updated_at", DateTime(timezone=True), nullable=False),
        Index(user_index_name(name), "user_id"),
        Index(created_at_index_name(name), "created_at"),
        Index(source_index_name(name), "original_bucket", "original_key"),
    )


__all__ = ["ContentMetadata", "new_content_metadata_table"]
