"""Interface for object storage operations."""

from typing import Dict, Optional, Protocol, runtime_checkable

from .type import UploadResult


@runtime_checkable
class IObjectStorage(Protocol):
    """Protocol for object storage operations.

    Implementations are blocking; async callers run them in a worker thread.
    """

    def get_object(self, bucket: str, object_path: str) -> bytes:
        """Download an object's full content."""
        ...

    def put_object(
        self,
        bucket: str,
        object_path: str,
        data: bytes,
        content_type: str,
        metadata: Optional[Dict[str, str]] = None,
    ) -> UploadResult:
        """Upload bytes under the given key."""
        ...

    def object_exists(self, bucket: str, object_path: str) -> bool:
        """Check if object exists."""
        ...

    def ensure_bucket(self, bucket: str) -> None:
        """Create the bucket when missing."""
        ...

    def health_check(self) -> bool:
        """Check connectivity to the object store."""
        ...


__all__ = ["IObjectStorage"]
