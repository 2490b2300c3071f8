"""In-memory stores, generated images and notification builders for tests.

The fakes mirror the adapters' contracts (typed errors included) so the
pipeline and the query can be exercised without PostgreSQL or MinIO.
"""

import asyncio
import io
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Set, Tuple

from PIL import Image  # type: ignore

from pkg.minio.constant import MinioErrorKind
from pkg.minio.minio import MinioAdapterError, MinioObjectNotFoundError
from pkg.minio.type import UploadResult
from pkg.postgre.constant import DatabaseErrorKind
from internal.content_metadata.repository.option import (
    CreateOptions,
    FindBySourceOptions,
    ListByUserOptions,
    ListRecentOptions,
)
from internal.model.content_metadata import ContentMetadata
from internal.model.constant import ContentStatus
from internal.model.user_analytics import UserAnalytics
from internal.user_analytics.repository.option import IncrementUploadOptions


BASE_TIME = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


# ============================================================================
# Fakes
# ============================================================================


class FakeObjectStorage:
    """Dict-backed object store keyed by (bucket, key)."""

    def __init__(self) -> None:
        self.objects: Dict[Tuple[str, str], bytes] = {}
        self.content_types: Dict[Tuple[str, str], str] = {}
        self.denied: Set[Tuple[str, str]] = set()
        self.put_error: Optional[MinioAdapterError] = None
        self.buckets: Set[str] = set()
        self.healthy = True

    def add(self, bucket: str, key: str, data: bytes) -> None:
        self.objects[(bucket, key)] = data

    def get_object(self, bucket: str, object_path: str) -> bytes:
        if (bucket, object_path) in self.denied:
            raise MinioAdapterError(
                "Access Denied.",
                kind=MinioErrorKind.ACCESS_DENIED,
                bucket=bucket,
                object_path=object_path,
            )
        if (bucket, object_path) not in self.objects:
            raise MinioObjectNotFoundError(
                f"Object not found: {bucket}/{object_path}", bucket=bucket, object_path=object_path
            )
        return self.objects[(bucket, object_path)]

    def put_object(self, bucket, object_path, data, content_type, metadata=None) -> UploadResult:
        if self.put_error is not None:
            raise self.put_error
        self.objects[(bucket, object_path)] = data
        self.content_types[(bucket, object_path)] = content_type
        return UploadResult(bucket=bucket, path=object_path, size=len(data), content_type=content_type)

    def object_exists(self, bucket: str, object_path: str) -> bool:
        return (bucket, object_path) in self.objects

    def ensure_bucket(self, bucket: str) -> None:
        self.buckets.add(bucket)

    def health_check(self) -> bool:
        return self.healthy

    def keys_in(self, bucket: str) -> List[str]:
        return sorted(key for (b, key) in self.objects if b == bucket)


class FakeContentMetadataRepository:
    """List-backed content metadata store."""

    def __init__(self) -> None:
        self.records: List[ContentMetadata] = []
        self.create_error: Optional[Exception] = None
        self.read_error: Optional[Exception] = None

    async def create(self, opt: CreateOptions) -> ContentMetadata:
        await asyncio.sleep(0)
        if self.create_error is not None:
            raise self.create_error
        self.records.append(opt.data)
        return opt.data

    async def detail(self, content_id: str) -> Optional[ContentMetadata]:
        if self.read_error is not None:
            raise self.read_error
        return next((r for r in self.records if r.content_id == content_id), None)

    async def list_by_user(self, opt: ListByUserOptions) -> List[ContentMetadata]:
        if self.read_error is not None:
            raise self.read_error
        rows = sorted(
            (r for r in self.records if r.user_id == opt.user_id),
            key=lambda r: (r.created_at, r.content_id),
            reverse=True,
        )
        return rows[: opt.limit] if opt.limit else rows

    async def list_recent(self, opt: ListRecentOptions) -> List[ContentMetadata]:
        if self.read_error is not None:
            raise self.read_error
        rows = sorted(self.records, key=lambda r: (r.created_at, r.content_id), reverse=True)
        return rows[: opt.limit]

    async def find_by_source(self, opt: FindBySourceOptions) -> Optional[ContentMetadata]:
        if self.read_error is not None:
            raise self.read_error
        return next(
            (
                r
                for r in self.records
                if r.original_bucket == opt.original_bucket
                and r.original_key == opt.original_key
                and r.source_etag == opt.source_etag
                and r.status == opt.status
            ),
            None,
        )


class FakeUserAnalyticsRepository:
    """Dict-backed counter store.

    increment_upload yields to the loop first, then applies the increment in
    one step, like the single upsert statement it stands in for.
    """

    def __init__(self) -> None:
        self.rows: Dict[str, UserAnalytics] = {}
        self.increment_error: Optional[Exception] = None
        self.read_error: Optional[Exception] = None

    async def increment_upload(self, opt: IncrementUploadOptions) -> UserAnalytics:
        await asyncio.sleep(0)
        if self.increment_error is not None:
            raise self.increment_error
        row = self.rows.get(opt.user_id)
        if row is None:
            row = UserAnalytics(user_id=opt.user_id, upload_count=1, last_upload=opt.uploaded_at)
        else:
            last = row.last_upload
            row = UserAnalytics(
                user_id=opt.user_id,
                upload_count=row.upload_count + 1,
                last_upload=max(last, opt.uploaded_at) if last else opt.uploaded_at,
            )
        self.rows[opt.user_id] = row
        return row

    async def detail(self, user_id: str) -> Optional[UserAnalytics]:
        if self.read_error is not None:
            raise self.read_error
        return self.rows.get(user_id)


class SequentialIds:
    def __init__(self, prefix: str = "00000000-0000-4000-8000-") -> None:
        self.prefix = prefix
        self.count = 0

    def __call__(self) -> str:
        self.count += 1
        return f"{self.prefix}{self.count:012d}"


class TickingClock:
    """Returns BASE_TIME, then one second later on every call."""

    def __init__(self, start: datetime = BASE_TIME) -> None:
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value


# ============================================================================
# Helpers
# ============================================================================


def make_image(width: int = 1600, height: int = 1200, fmt: str = "JPEG", mode: str = "RGB") -> bytes:
    image = Image.new(mode, (width, height), color=(200, 120, 40) if mode == "RGB" else None)
    buffer = io.BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


def make_record(
    content_id: str,
    user_id: str = "user-1",
    original_size: int = 1000,
    processed_size: int = 400,
    created_at: datetime = BASE_TIME,
    **overrides,
) -> ContentMetadata:
    values = dict(
        content_id=content_id,
        user_id=user_id,
        original_bucket="user-content-bucket",
        original_key=f"{content_id}.jpg",
        processed_key=f"processed/{content_id}.jpg",
        original_size=original_size,
        processed_size=processed_size,
        status=ContentStatus.PROCESSED,
        created_at=created_at,
        updated_at=created_at,
    )
    values.update(overrides)
    return ContentMetadata(**values)


def notification_body(*records: dict) -> dict:
    return {"Records": list(records)}


def s3_record(
    key: str,
    bucket: str = "user-content-bucket",
    size: Optional[int] = None,
    etag: Optional[str] = None,
    principal_id: Optional[str] = None,
    event_name: str = "s3:ObjectCreated:Put",
) -> dict:
    obj = {"key": key}
    if size is not None:
        obj["size"] = size
    if etag is not None:
        obj["eTag"] = etag
    record = {"eventName": event_name, "s3": {"bucket": {"name": bucket}, "object": obj}}
    if principal_id is not None:
        record["userIdentity"] = {"principalId": principal_id}
    return record


def db_failure(error_cls, kind: DatabaseErrorKind = DatabaseErrorKind.UNAVAILABLE):
    return error_cls("connection refused", kind=kind)

