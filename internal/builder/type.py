from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class BuildInput:
    content_id: str
    user_id: str
    original_bucket: str
    original_key: str
    processed_key: str
    original_size: int
    processed_size: int
    now: datetime
    source_etag: Optional[str] = None
    content_type: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


__all__ = ["BuildInput"]
