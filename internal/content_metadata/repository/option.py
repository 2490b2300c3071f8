from dataclasses import dataclass
from typing import Optional

from internal.model.content_metadata import ContentMetadata
from internal.model.constant import ContentStatus


@dataclass
class CreateOptions:
    data: ContentMetadata


@dataclass
class ListByUserOptions:
    user_id: str
    limit: Optional[int] = None


@dataclass
class ListRecentOptions:
    limit: int = 50


@dataclass
class FindBySourceOptions:
    original_bucket: str
    original_key: str
    source_etag: str
    status: ContentStatus = ContentStatus.PROCESSED


__all__ = [
    "CreateOptions",
    "ListByUserOptions",
    "ListRecentOptions",
    "FindBySourceOptions",
]
