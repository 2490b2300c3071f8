"""Data types for the analytics aggregation query."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from .constant import *


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass
class Config:
    """Configuration for the analytics query."""

    default_user_id: str = DEFAULT_USER_ID
    global_window: int = DEFAULT_GLOBAL_WINDOW
    recent_user_items: int = DEFAULT_RECENT_USER_ITEMS
    recent_global_items: int = DEFAULT_RECENT_GLOBAL_ITEMS

    def __post_init__(self):
        if not self.default_user_id:
            raise ValueError("default_user_id cannot be empty")
        if self.global_window <= 0:
            raise ValueError(f"global_window must be positive, got {self.global_window}")
        if self.recent_user_items < 0 or self.recent_global_items < 0:
            raise ValueError("recent item counts must be non-negative")


@dataclass
class QueryInput:
    user_id: Optional[str] = None


@dataclass
class UserStats:
    upload_count: int = 0
    last_upload: Optional[datetime] = None
    total_original_size: int = 0
    total_processed_size: int = 0
    compression_ratio: float = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "upload_count": self.upload_count,
            "last_upload": _iso(self.last_upload),
            "total_original_size": self.total_original_size,
            "total_processed_size": self.total_processed_size,
            "compression_ratio": self.compression_ratio,
        }


@dataclass
class RecentContent:
    content_id: str
    original_key: str
    processed_key: str
    created_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content_id": self.content_id,
            "original_key": self.original_key,
            "processed_key": self.processed_key,
            "created_at": _iso(self.created_at),
        }


@dataclass
class UserContent:
    total_items: int = 0
    recent_content_ids: List[RecentContent] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_items": self.total_items,
            "recent_content_ids": [c.to_dict() for c in self.recent_content_ids],
        }


@dataclass
class RecentUpload:
    content_id: str
    user_id: str
    created_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content_id": self.content_id,
            "user_id": self.user_id,
            "created_at": _iso(self.created_at),
        }


@dataclass
class GlobalStats:
    """Statistics over the most recent window of records, not the whole table.

    is_approximate is True when the window was full, i.e. older records exist
    that were not counted.
    """

    total_content_items: int = 0
    total_users: int = 0
    recent_uploads: List[RecentUpload] = field(default_factory=list)
    window_size: int = DEFAULT_GLOBAL_WINDOW
    is_approximate: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_content_items": self.total_content_items,
            "total_users": self.total_users,
            "recent_uploads": [u.to_dict() for u in self.recent_uploads],
            "window_size": self.window_size,
            "is_approximate": self.is_approximate,
        }


@dataclass
class AnalyticsResult:
    user_id: str
    user_stats: UserStats
    user_content: UserContent
    global_stats: GlobalStats
    query_timestamp: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user_id": self.user_id,
            "user_stats": self.user_stats.to_dict(),
            "user_content": self.user_content.to_dict(),
            "global_stats": self.global_stats.to_dict(),
            "query_timestamp": _iso(self.query_timestamp),
        }


__all__ = [
    "Config",
    "QueryInput",
    "UserStats",
    "RecentContent",
    "UserContent",
    "RecentUpload",
    "GlobalStats",
    "AnalyticsResult",
]
