"""Data types for the ingestion pipeline."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from internal.model.constant import ErrorKind
from .constant import *

# Failures worth redelivering: the dependency may recover on its own
TRANSIENT_ERROR_KINDS = frozenset({ErrorKind.TIMEOUT, ErrorKind.UNAVAILABLE})


@dataclass
class Config:
    """Configuration for the ingestion pipeline."""

    processed_bucket: str = DEFAULT_PROCESSED_BUCKET
    accepted_extensions: Tuple[str, ...] = DEFAULT_ACCEPTED_EXTENSIONS
    default_user_id: str = DEFAULT_USER_ID
    skip_duplicates: bool = DEFAULT_SKIP_DUPLICATES

    def __post_init__(self):
        if not self.processed_bucket:
            raise ValueError("processed_bucket cannot be empty")
        if not self.default_user_id:
            raise ValueError("default_user_id cannot be empty")

        normalized = []
        for ext in self.accepted_extensions:
            ext = ext.strip().lower()
            if not ext:
                continue
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        if not normalized:
            raise ValueError("accepted_extensions cannot be empty")
        self.accepted_extensions = tuple(normalized)


@dataclass
class Notification:
    """One object-created notification.

    key is kept as delivered (URL-encoded); the pipeline decodes it.
    invalid_reason is set by the presenter when the record is malformed.
    """

    bucket: str = ""
    key: str = ""
    size: Optional[int] = None
    etag: Optional[str] = None
    user_id: Optional[str] = None
    event_name: Optional[str] = None
    invalid_reason: Optional[str] = None


@dataclass
class ItemResult:
    """Outcome of one notification."""

    bucket: str
    key: str
    outcome: Outcome
    reason: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    error_message: Optional[str] = None
    component: Optional[str] = None
    content_id: Optional[str] = None
    processed_key: Optional[str] = None
    original_size: Optional[int] = None
    processed_size: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bucket": self.bucket,
            "key": self.key,
            "outcome": self.outcome.value,
            "reason": self.reason,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "error_message": self.error_message,
            "component": self.component,
            "content_id": self.content_id,
            "processed_key": self.processed_key,
            "original_size": self.original_size,
            "processed_size": self.processed_size,
        }


@dataclass
class BatchResult:
    """Aggregated outcome of a notification batch."""

    items: List[ItemResult] = field(default_factory=list)

    def _count(self, outcome: Outcome) -> int:
        return sum(1 for item in self.items if item.outcome == outcome)

    @property
    def accepted_count(self) -> int:
        return len(self.items)

    @property
    def processed(self) -> int:
        return self._count(Outcome.PROCESSED)

    @property
    def skipped(self) -> int:
        return self._count(Outcome.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(Outcome.FAILED)

    @property
    def retryable(self) -> bool:
        """True when something failed and every failure is transient."""
        failures = [item for item in self.items if item.outcome == Outcome.FAILED]
        return bool(failures) and all(item.error_kind in TRANSIENT_ERROR_KINDS for item in failures)

    @property
    def status_code(self) -> int:
        if self.failed == 0:
            return STATUS_OK
        if self.failed == self.accepted_count:
            return STATUS_FAILED
        return STATUS_PARTIAL

    @property
    def message(self) -> str:
        if not self.items:
            return MESSAGE_EMPTY
        return {
            STATUS_OK: MESSAGE_COMPLETED,
            STATUS_PARTIAL: MESSAGE_PARTIAL,
        }.get(self.status_code, MESSAGE_FAILED)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "status_code": self.status_code,
            "accepted_count": self.accepted_count,
            "processed": self.processed,
            "skipped": self.skipped,
            "failed": self.failed,
            "items": [item.to_dict() for item in self.items],
        }


__all__ = [
    "Config",
    "Notification",
    "ItemResult",
    "BatchResult",
]
