from dataclasses import dataclass, field
from typing import Dict, Optional

from .constant import *


@dataclass
class MinIOConfig:
    """MinIO client configuration.

    Attributes:
        endpoint: MinIO server endpoint (e.g., 'localhost:9000')
        access_key: Access key for authentication
        secret_key: Secret key for authentication
        secure: Whether to use HTTPS
        region: Optional region name
        connect_timeout: Seconds allowed to establish a connection
        read_timeout: Seconds allowed between bytes of a response
        max_retries: Retries for connection errors and 5xx responses
    """

    endpoint: str
    access_key: str
    secret_key: str
    secure: bool = False
    region: Optional[str] = None
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT_SECONDS
    read_timeout: float = DEFAULT_READ_TIMEOUT_SECONDS
    max_retries: int = DEFAULT_MAX_RETRIES

    def __post_init__(self):
        if not self.endpoint or not self.endpoint.strip():
            raise ValueError("endpoint cannot be empty")

        if not self.access_key or not self.access_key.strip():
            raise ValueError("access_key cannot be empty")

        if not self.secret_key or not self.secret_key.strip():
            raise ValueError("secret_key cannot be empty")

        if self.connect_timeout <= 0 or self.read_timeout <= 0:
            raise ValueError("timeouts must be positive")

        if self.max_retries < 0:
            raise ValueError(f"max_retries must be non-negative, got {self.max_retries}")

        self.endpoint = (
            self.endpoint.replace("http://", "").replace("https://", "").strip()
        )


@dataclass
class UploadResult:
    """Result of an upload.

    Attributes:
        bucket: Bucket name
        path: Object key
        size: Uploaded size in bytes
        content_type: Content-Type stored with the object
        etag: ETag returned by the server
        metadata: User metadata stored with the object
    """

    bucket: str
    path: str
    size: int
    content_type: str
    etag: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)


__all__ = [
    "MinIOConfig",
    "UploadResult",
]
