"""Pytest configuration and shared fixtures."""

import pytest  # type: ignore

from pkg.pillow.pillow import ImageTransformer
from internal.builder import NewMetadataBuilderUseCase
from internal.ingestion import Config as IngestionConfig
from internal.ingestion.usecase.usecase import IngestionUseCase
from support import (
    FakeContentMetadataRepository,
    FakeObjectStorage,
    FakeUserAnalyticsRepository,
    SequentialIds,
    TickingClock,
    make_image,
)


@pytest.fixture
def storage() -> FakeObjectStorage:
    return FakeObjectStorage()


@pytest.fixture
def content_repository() -> FakeContentMetadataRepository:
    return FakeContentMetadataRepository()


@pytest.fixture
def user_repository() -> FakeUserAnalyticsRepository:
    return FakeUserAnalyticsRepository()


@pytest.fixture
def jpeg_bytes() -> bytes:
    return make_image()


@pytest.fixture
def ingestion(storage, content_repository, user_repository) -> IngestionUseCase:
    return IngestionUseCase(
        config=IngestionConfig(),
        storage=storage,
        transformer=ImageTransformer(),
        builder=NewMetadataBuilderUseCase(),
        content_repository=content_repository,
        user_repository=user_repository,
        clock=TickingClock(),
        id_factory=SequentialIds(),
    )
