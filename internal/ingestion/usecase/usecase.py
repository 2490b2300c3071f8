"""Ingestion pipeline - core business logic."""

from __future__ import annotations

import asyncio
import time
import uuid
from datetime import datetime, timezone
from typing import Callable, List, Optional

from pkg.logger.logger import Logger
from pkg.minio.interface import IObjectStorage
from pkg.minio.minio import MinioAdapterError
from pkg.pillow.interface import IImageTransformer
from pkg.pillow.pillow import TransformError as ImageTransformError
from pkg.pillow.type import TransformResult
from internal.model.constant import ErrorKind, kind_of
from internal.builder.interface import IMetadataBuilderUseCase
from internal.builder.type import BuildInput
from internal.builder.errors import ErrInvalidSize, ErrMissingField
from internal.content_metadata.repository.interface import IContentMetadataRepository
from internal.content_metadata.repository.option import CreateOptions, FindBySourceOptions
from internal.content_metadata.repository.errors import RepositoryError as ContentRepositoryError
from internal.user_analytics.repository.interface import IUserAnalyticsRepository
from internal.user_analytics.repository.option import IncrementUploadOptions
from internal.user_analytics.repository.errors import RepositoryError as UserRepositoryError
from ..interface import IIngestionUseCase
from ..type import BatchResult, Config, ItemResult, Notification
from ..errors import ErrIngestion, ErrInvalidNotification, FetchError, StoreError, TransformError
from ..constant import *
from .helpers import (
    build_processed_key,
    decode_key,
    has_accepted_extension,
    is_object_created,
    normalize_etag,
    resolve_user_id,
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_content_id() -> str:
    return str(uuid.uuid4())


class IngestionUseCase(IIngestionUseCase):
    """Turns object-created notifications into artifacts, records and counters.

    Notifications in a batch are processed one after another. A failure is
    captured in that notification's ItemResult and never stops the rest.
    Separate batches may run concurrently; the per-user counter is only
    touched through the repository's atomic upsert.
    """

    def __init__(
        self,
        config: Config,
        storage: IObjectStorage,
        transformer: IImageTransformer,
        builder: IMetadataBuilderUseCase,
        content_repository: IContentMetadataRepository,
        user_repository: IUserAnalyticsRepository,
        logger: Optional[Logger] = None,
        *,
        clock: Callable[[], datetime] = _utc_now,
        id_factory: Callable[[], str] = _new_content_id,
    ):
        self.config = config
        self.storage = storage
        self.transformer = transformer
        self.builder = builder
        self.content_repository = content_repository
        self.user_repository = user_repository
        self.logger = logger
        self.clock = clock
        self.id_factory = id_factory

    async def process_batch(self, notifications: List[Notification]) -> BatchResult:
        start_time = time.perf_counter()
        result = BatchResult()

        for notification in notifications:
            result.items.append(await self.process_notification(notification))

        if self.logger:
            elapsed_ms = int((time.perf_counter() - start_time) * 1000)
            self.logger.info(
                f"[IngestionUseCase] Batch done: accepted={result.accepted_count}, "
                f"processed={result.processed}, skipped={result.skipped}, "
                f"failed={result.failed}, elapsed_ms={elapsed_ms}"
            )
        return result

    async def process_notification(self, notification: Notification) -> ItemResult:
        bucket = notification.bucket
        key = decode_key(notification.key) if notification.key else ""

        try:
            return await self._process(notification, bucket, key)

        except ErrIngestion as exc:
            if self.logger:
                self.logger.error(
                    f"[IngestionUseCase] Failed s3://{bucket}/{key}: "
                    f"component={exc.component}, kind={exc.kind.value}, error={exc}"
                )
            return ItemResult(
                bucket=bucket,
                key=key,
                outcome=Outcome.FAILED,
                error_kind=exc.kind,
                error_message=str(exc),
                component=exc.component,
            )

        except Exception as exc:
            if self.logger:
                self.logger.exception(
                    f"[IngestionUseCase] Unexpected error for s3://{bucket}/{key}: {exc}"
                )
            return ItemResult(
                bucket=bucket,
                key=key,
                outcome=Outcome.FAILED,
                error_kind=ErrorKind.UNKNOWN,
                error_message=str(exc),
            )

    async def _process(self, notification: Notification, bucket: str, key: str) -> ItemResult:
        if notification.invalid_reason or not bucket or not key:
            raise ErrInvalidNotification(
                notification.invalid_reason or "record is missing bucket name or object key"
            )

        if not is_object_created(notification.event_name):
            return self._skipped(bucket, key, SKIP_UNSUPPORTED_EVENT)

        if not has_accepted_extension(key, self.config.accepted_extensions):
            if self.logger:
                self.logger.info(f"[IngestionUseCase] Skipping unsupported file: {key}")
            return self._skipped(bucket, key, SKIP_UNSUPPORTED_TYPE)

        etag = normalize_etag(notification.etag)
        if self.config.skip_duplicates and etag and await self._already_processed(bucket, key, etag):
            if self.logger:
                self.logger.info(
                    f"[IngestionUseCase] Skipping redelivered s3://{bucket}/{key} (etag={etag})"
                )
            return self._skipped(bucket, key, SKIP_DUPLICATE)

        if self.logger:
            self.logger.info(f"[IngestionUseCase] Processing file: s3://{bucket}/{key}")

        original = await self._fetch(bucket, key)
        artifact = await self._transform(original)

        content_id = self.id_factory()
        user_id = resolve_user_id(notification, self.config.default_user_id)
        processed_key = build_processed_key(content_id, artifact.extension)
        now = self.clock()

        processed_size = await self._upload(processed_key, artifact)

        try:
            record = self.builder.build(
                BuildInput(
                    content_id=content_id,
                    user_id=user_id,
                    original_bucket=bucket,
                    original_key=key,
                    processed_key=processed_key,
                    original_size=len(original),
                    processed_size=processed_size,
                    now=now,
                    source_etag=etag,
                    content_type=artifact.content_type,
                    width=artifact.width,
                    height=artifact.height,
                )
            )
        except (ErrInvalidSize, ErrMissingField) as exc:
            raise StoreError(str(exc), ErrorKind.INVALID_DATA, COMPONENT_CONTENT_METADATA) from exc

        try:
            await self.content_repository.create(CreateOptions(data=record))
        except ContentRepositoryError as exc:
            if self.logger:
                self.logger.warning(
                    f"[IngestionUseCase] Artifact {processed_key} uploaded but metadata "
                    f"write failed for content_id={content_id}"
                )
            return self._failed_after_upload(
                bucket, key, exc, COMPONENT_CONTENT_METADATA, content_id, processed_key,
                len(original), processed_size,
            )

        try:
            await self.user_repository.increment_upload(
                IncrementUploadOptions(user_id=user_id, uploaded_at=now)
            )
        except UserRepositoryError as exc:
            if self.logger:
                self.logger.warning(
                    f"[IngestionUseCase] Metadata stored but counter update failed for "
                    f"user_id={user_id}, content_id={content_id}: {exc}"
                )
            return self._failed_after_upload(
                bucket, key, exc, COMPONENT_USER_ANALYTICS, content_id, processed_key,
                len(original), processed_size,
            )

        if self.logger:
            self.logger.info(
                f"[IngestionUseCase] Successfully processed: {key} -> {processed_key} "
                f"({len(original)} -> {processed_size} bytes)"
            )

        return ItemResult(
            bucket=bucket,
            key=key,
            outcome=Outcome.PROCESSED,
            content_id=content_id,
            processed_key=processed_key,
            original_size=len(original),
            processed_size=processed_size,
        )

    async def _already_processed(self, bucket: str, key: str, etag: str) -> bool:
        try:
            existing = await self.content_repository.find_by_source(
                FindBySourceOptions(original_bucket=bucket, original_key=key, source_etag=etag)
            )
        except ContentRepositoryError as exc:
            # Best effort: the create below reports the store failure if it persists
            if self.logger:
                self.logger.warning(f"[IngestionUseCase] Duplicate check failed for {key}: {exc}")
            return False
        return existing is not None

    async def _fetch(self, bucket: str, key: str) -> bytes:
        try:
            return await asyncio.to_thread(self.storage.get_object, bucket, key)
        except MinioAdapterError as exc:
            raise FetchError(str(exc), kind_of(exc)) from exc

    async def _transform(self, data: bytes) -> TransformResult:
        try:
            return await asyncio.to_thread(self.transformer.transform, data)
        except ImageTransformError as exc:
            raise TransformError(str(exc), ErrorKind.INVALID_IMAGE) from exc

    async def _upload(self, processed_key: str, artifact: TransformResult) -> int:
        try:
            upload = await asyncio.to_thread(
                self.storage.put_object,
                self.config.processed_bucket,
                processed_key,
                artifact.data,
                artifact.content_type,
            )
        except MinioAdapterError as exc:
            raise StoreError(str(exc), kind_of(exc)) from exc
        return upload.size

    def _skipped(self, bucket: str, key: str, reason: str) -> ItemResult:
        return ItemResult(bucket=bucket, key=key, outcome=Outcome.SKIPPED, reason=reason)

    def _failed_after_upload(
        self,
        bucket: str,
        key: str,
        exc: BaseException,
        component: str,
        content_id: str,
        processed_key: str,
        original_size: int,
        processed_size: int,
    ) -> ItemResult:
        if self.logger:
            self.logger.error(
                f"[IngestionUseCase] Failed s3://{bucket}/{key}: component={component}, "
                f"kind={kind_of(exc).value}, error={exc}"
            )
        return ItemResult(
            bucket=bucket,
            key=key,
            outcome=Outcome.FAILED,
            error_kind=kind_of(exc),
            error_message=str(exc),
            component=component,
            content_id=content_id,
            processed_key=processed_key,
            original_size=original_size,
            processed_size=processed_size,
        )


__all__ = ["IngestionUseCase"]
