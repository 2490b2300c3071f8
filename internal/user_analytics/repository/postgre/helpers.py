from typing import Any, Mapping

from internal.model.user_analytics import UserAnalytics


def from_row(row: Mapping[str, Any]) -> UserAnalytics:
    return UserAnalytics(
        user_id=row["user_id"],
        upload_count=int(row["upload_count"] or 0),
        last_upload=row["last_upload"],
    )


__all__ = ["from_row"]
