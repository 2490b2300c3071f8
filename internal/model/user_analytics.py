"""Per-user upload counter."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import BigInteger, Column, DateTime, MetaData, String, Table

from .constant import *


@dataclass
class UserAnalytics:
    user_id: str
    upload_count: int = 0
    last_upload: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user_id": self.user_id,
            "upload_count": self.upload_count,
            "last_upload": self.last_upload.isoformat() if self.last_upload else None,
        }


def new_user_analytics_table(name: str = DEFAULT_USER_TABLE, metadata: Optional[MetaData] = None) -> Table:
    metadata = metadata if metadata is not None else MetaData()
    return Table(
        name,
        metadata,
        Column("user_id", String(USER_ID_LENGTH), primary_key=True),
        Column("upload_count", BigInteger, nullable=False, default=0),
        Column("last_upload", DateTime(timezone=True), nullable=True),
    )


__all__ = ["UserAnalytics", "new_user_analytics_table"]
