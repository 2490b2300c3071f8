from typing import Iterable, List

from internal.model.content_metadata import ContentMetadata
from ..constant import COMPRESSION_RATIO_PRECISION


def compression_ratio(total_original: int, total_processed: int) -> float:
    """original / processed rounded to two places; 0 when nothing was processed."""
    if total_processed <= 0:
        return 0
    return round(total_original / total_processed, COMPRESSION_RATIO_PRECISION)


def newest_first(records: Iterable[ContentMetadata]) -> List[ContentMetadata]:
    # content_id breaks ties so the order is stable across calls
    return sorted(records, key=lambda r: (r.created_at, r.content_id), reverse=True)


def distinct_users(records: Iterable[ContentMetadata]) -> int:
    return len({r.user_id for r in records})


__all__ = ["compression_ratio", "newest_first", "distinct_users"]
