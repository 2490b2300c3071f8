"""Presenters for the ingestion delivery layer.

Mappers between the notification wire format and domain types:
- parse_envelope(): raw JSON -> delivery DTOs
- to_notifications(): delivery DTOs -> usecase input
- new_*_resp(): usecase output -> response body
"""

from typing import Any, Dict, List, Optional

from internal.ingestion.type import BatchResult, Notification
from internal.ingestion.delivery.type import EventEnvelope, EventRecord
from internal.ingestion.delivery.constant import (
    FIELD_RECORDS,
    FIELD_EVENT_NAME,
    FIELD_S3,
    FIELD_BUCKET,
    FIELD_NAME,
    FIELD_OBJECT,
    FIELD_KEY,
    FIELD_SIZE,
    FIELD_ETAG,
    FIELD_ETAG_ALT,
    FIELD_USER_IDENTITY,
    FIELD_PRINCIPAL_ID,
)

ERROR_MISSING_LOCATION = "record is missing bucket name or object key"
ERROR_NOT_AN_OBJECT = "record is not a JSON object"


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_size(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return None


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


def parse_record(raw: Any) -> EventRecord:
    """Parse one Records entry; malformed entries come back with error set."""
    if not isinstance(raw, dict):
        return EventRecord(error=ERROR_NOT_AN_OBJECT)

    s3 = _as_dict(raw.get(FIELD_S3))
    bucket = _as_dict(s3.get(FIELD_BUCKET))
    obj = _as_dict(s3.get(FIELD_OBJECT))
    identity = _as_dict(raw.get(FIELD_USER_IDENTITY))

    record = EventRecord(
        event_name=_as_str(raw.get(FIELD_EVENT_NAME)),
        bucket=_as_str(bucket.get(FIELD_NAME)),
        key=_as_str(obj.get(FIELD_KEY)),
        size=_as_size(obj.get(FIELD_SIZE)),
        etag=_as_str(obj.get(FIELD_ETAG)) or _as_str(obj.get(FIELD_ETAG_ALT)),
        principal_id=_as_str(identity.get(FIELD_PRINCIPAL_ID)),
    )

    if not record.bucket or not record.key:
        record.error = ERROR_MISSING_LOCATION
    return record


def parse_envelope(body: Any) -> EventEnvelope:
    """Parse a notification body.

    Raises:
        ValueError: If the body is not an object with a Records array
    """
    if not isinstance(body, dict):
        raise ValueError("notification body must be a JSON object")

    records = body.get(FIELD_RECORDS)
    if not isinstance(records, list):
        raise ValueError(f"notification body must contain a '{FIELD_RECORDS}' array")

    return EventEnvelope(records=[parse_record(r) for r in records], raw=body)


def to_notifications(envelope: EventEnvelope) -> List[Notification]:
    return [
        Notification(
            bucket=record.bucket or "",
            key=record.key or "",
            size=record.size,
            etag=record.etag,
            user_id=record.principal_id,
            event_name=record.event_name,
            invalid_reason=record.error,
        )
        for record in envelope.records
    ]


def new_batch_resp(result: BatchResult) -> Dict[str, Any]:
    return result.to_dict()


__all__ = [
    "parse_record",
    "parse_envelope",
    "to_notifications",
    "new_batch_resp",
]
