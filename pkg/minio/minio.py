from __future__ import annotations

import io
from typing import Dict, Optional

import urllib3  # type: ignore
from minio import Minio  # type: ignore
from minio.error import S3Error, ServerError  # type: ignore

from loguru import logger
from .interface import IObjectStorage
from .type import MinIOConfig, UploadResult
from .constant import *


class MinioAdapterError(Exception):
    """Base exception for MinIO adapter operations.

    Attributes:
        kind: Failure classification, callers match on this instead of text
        bucket: Bucket the operation targeted
        object_path: Object key the operation targeted, if any
    """

    def __init__(
        self,
        message: str,
        kind: MinioErrorKind = MinioErrorKind.UNKNOWN,
        bucket: Optional[str] = None,
        object_path: Optional[str] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.bucket = bucket
        self.object_path = object_path


class MinioObjectNotFoundError(MinioAdapterError):
    """Raised when requested object does not exist."""

    def __init__(self, message: str, bucket: Optional[str] = None, object_path: Optional[str] = None):
        super().__init__(message, MinioErrorKind.NOT_FOUND, bucket, object_path)


def classify_error(exc: BaseException) -> MinioErrorKind:
    """Map a client/transport exception onto a MinioErrorKind."""
    if isinstance(exc, S3Error):
        if exc.code in NOT_FOUND_CODES:
            return MinioErrorKind.NOT_FOUND
        if exc.code in ACCESS_DENIED_CODES:
            return MinioErrorKind.ACCESS_DENIED
        return MinioErrorKind.UNKNOWN
    if isinstance(exc, ServerError):
        return MinioErrorKind.UNAVAILABLE
    if isinstance(exc, urllib3.exceptions.MaxRetryError):
        if isinstance(exc.reason, urllib3.exceptions.TimeoutError):
            return MinioErrorKind.TIMEOUT
        return MinioErrorKind.UNAVAILABLE
    if isinstance(exc, (urllib3.exceptions.TimeoutError, TimeoutError)):
        return MinioErrorKind.TIMEOUT
    if isinstance(exc, (urllib3.exceptions.HTTPError, ConnectionError)):
        return MinioErrorKind.UNAVAILABLE
    return MinioErrorKind.UNKNOWN


class MinioAdapter(IObjectStorage):
    """Thin wrapper around the MinIO client for image objects.

    Every call is bounded by the configured connect/read timeouts. Failures
    surface as MinioAdapterError with a kind attached.

    Attributes:
        config: MinIO configuration
    """

    def __init__(self, config: MinIOConfig, client: Optional[Minio] = None):
        """Initialize MinIO adapter with configuration.

        Args:
            config: MinIO configuration
            client: Pre-built client, mainly for tests
        """
        self.config = config

        if client is not None:
            self._client = client
            return

        http_client = urllib3.PoolManager(
            timeout=urllib3.Timeout(
                connect=self.config.connect_timeout,
                read=self.config.read_timeout,
            ),
            retries=urllib3.Retry(
                total=self.config.max_retries,
                backoff_factor=RETRY_BACKOFF_FACTOR,
                status_forcelist=RETRY_STATUS_CODES,
            ),
        )

        self._client = Minio(
            self.config.endpoint,
            access_key=self.config.access_key,
            secret_key=self.config.secret_key,
            secure=self.config.secure,
            region=self.config.region,
            http_client=http_client,
        )

    def _wrap(
        self, exc: BaseException, action: str, bucket: str, object_path: Optional[str] = None
    ) -> MinioAdapterError:
        kind = classify_error(exc)
        target = f"{bucket}/{object_path}" if object_path else bucket
        message = f"MinIO {action} failed for {target}: {exc}"
        if kind == MinioErrorKind.NOT_FOUND:
            return MinioObjectNotFoundError(message, bucket, object_path)
        return MinioAdapterError(message, kind, bucket, object_path)

    def get_object(self, bucket: str, object_path: str) -> bytes:
        """Download an object's full content.

        Args:
            bucket: MinIO bucket name.
            object_path: Path to the object within the bucket.

        Returns:
            Raw object bytes.

        Raises:
            MinioObjectNotFoundError: If the bucket or object does not exist.
            MinioAdapterError: For any other failure, with kind set.
        """
        if not bucket or not object_path:
            raise ValueError("bucket and object_path are required")

        logger.debug(f"Downloading object from MinIO bucket={bucket}, path={object_path}")
        response = None
        try:
            response = self._client.get_object(bucket, object_path)
            return response.read()
        except Exception as exc:
            err = self._wrap(exc, "download", bucket, object_path)
            logger.error(f"{err} (kind={err.kind.value})")
            raise err from exc
        finally:
            if response is not None:
                response.close()
                response.release_conn()

    def put_object(
        self,
        bucket: str,
        object_path: str,
        data: bytes,
        content_type: str = DEFAULT_CONTENT_TYPE,
        metadata: Optional[Dict[str, str]] = None,
    ) -> UploadResult:
        """Upload bytes to MinIO.

        Args:
            bucket: MinIO bucket name.
            object_path: Path to store the object.
            data: Object content.
            content_type: Content-Type stored with the object.
            metadata: Optional user metadata.

        Returns:
            UploadResult with upload metadata.

        Raises:
            MinioAdapterError: If upload fails.
        """
        if not bucket or not object_path:
            raise ValueError("bucket and object_path are required")

        try:
            result = self._client.put_object(
                bucket,
                object_path,
                io.BytesIO(data),
                length=len(data),
                content_type=content_type,
                metadata=metadata or None,
            )
        except Exception as exc:
            err = self._wrap(exc, "upload", bucket, object_path)
            logger.error(f"{err} (kind={err.kind.value})")
            raise err from exc

        logger.info(
            f"Uploaded object to MinIO bucket={bucket}, path={object_path}, size={len(data)}"
        )

        return UploadResult(
            bucket=bucket,
            path=object_path,
            size=len(data),
            content_type=content_type,
            etag=getattr(result, "etag", None),
            metadata=dict(metadata or {}),
        )

    def object_exists(self, bucket: str, object_path: str) -> bool:
        """Check if object exists in MinIO.

        Args:
            bucket: MinIO bucket name
            object_path: Path to the object

        Returns:
            True if object exists, False otherwise
        """
        try:
            self._client.stat_object(bucket, object_path)
            return True
        except S3Error as exc:
            if exc.code in NOT_FOUND_CODES:
                return False
            raise self._wrap(exc, "stat", bucket, object_path) from exc
        except Exception as exc:
            raise self._wrap(exc, "stat", bucket, object_path) from exc

    def ensure_bucket(self, bucket: str) -> None:
        """Create the bucket when it does not exist yet."""
        try:
            if not self._client.bucket_exists(bucket):
                self._client.make_bucket(bucket)
                logger.info(f"Created MinIO bucket={bucket}")
        except Exception as exc:
            raise self._wrap(exc, "ensure bucket", bucket) from exc

    def health_check(self) -> bool:
        try:
            self._client.list_buckets()
            return True
        except Exception as exc:
            logger.warning(f"MinIO health check failed: {exc}")
            return False


__all__ = [
    "MinioAdapter",
    "MinioAdapterError",
    "MinioObjectNotFoundError",
    "classify_error",
]
