"""Delivery layer DTOs for the ingestion domain.

These mirror the wire format of S3 / MinIO bucket notifications and are
decoupled from the domain Notification type.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class EventRecord:
    """One entry of the Records array."""

    event_name: Optional[str] = None
    bucket: Optional[str] = None
    key: Optional[str] = None
    size: Optional[int] = None
    etag: Optional[str] = None
    principal_id: Optional[str] = None
    error: Optional[str] = None


@dataclass
class EventEnvelope:
    """Whole notification body."""

    records: list[EventRecord] = field(default_factory=list)
    raw: dict[str, Any] = field(default_factory=dict)


__all__ = ["EventRecord", "EventEnvelope"]
