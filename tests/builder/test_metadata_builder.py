"""Unit tests for the metadata builder."""

from datetime import datetime, timedelta, timezone

import pytest  # type: ignore

from internal.builder import (
    BuildInput,
    ErrInvalidSize,
    ErrMissingField,
    NewMetadataBuilderUseCase,
    build_content_metadata,
)
from internal.model import ContentStatus


NOW = datetime(2026, 3, 1, 8, 30, tzinfo=timezone.utc)


def _input(**overrides) -> BuildInput:
    values = dict(
        content_id="c-1",
        user_id="user-1",
        original_bucket="user-content-bucket",
        original_key="photos/cat.jpg",
        processed_key="processed/c-1.jpg",
        original_size=2048,
        processed_size=512,
        now=NOW,
    )
    values.update(overrides)
    return BuildInput(**values)


class TestMetadataBuilder:
    """Tests for MetadataBuilderUseCase.build."""

    def test_builds_processed_record(self):
        record = NewMetadataBuilderUseCase().build(_input(source_etag="abc", width=800, height=600))

        assert record.content_id == "c-1"
        assert record.user_id == "user-1"
        assert record.original_key == "photos/cat.jpg"
        assert record.processed_key == "processed/c-1.jpg"
        assert record.original_size == 2048
        assert record.processed_size == 512
        assert record.status == ContentStatus.PROCESSED
        assert record.source_etag == "abc"
        assert (record.width, record.height) == (800, 600)

    def test_created_and_updated_share_the_same_instant(self):
        record = NewMetadataBuilderUseCase().build(_input())
        assert record.created_at == record.updated_at == NOW

    def test_naive_time_is_treated_as_utc(self):
        record = NewMetadataBuilderUseCase().build(_input(now=datetime(2026, 3, 1, 8, 30)))
        assert record.created_at == NOW
        assert record.created_at.tzinfo is not None

    def test_offset_time_is_normalized_to_utc(self):
        plus_seven = timezone(timedelta(hours=7))
        record = NewMetadataBuilderUseCase().build(
            _input(now=datetime(2026, 3, 1, 15, 30, tzinfo=plus_seven))
        )
        assert record.created_at == NOW
        assert record.created_at.utcoffset() == timedelta(0)

    def test_zero_sizes_are_allowed(self):
        record = NewMetadataBuilderUseCase().build(_input(original_size=0, processed_size=0))
        assert record.processed_size == 0

    @pytest.mark.parametrize("field", ["original_size", "processed_size"])
    def test_negative_size_rejected(self, field):
        with pytest.raises(ErrInvalidSize, match=field):
            NewMetadataBuilderUseCase().build(_input(**{field: -1}))

    @pytest.mark.parametrize("value", [True, 1.5, "10", None])
    def test_non_integer_size_rejected(self, value):
        with pytest.raises(ErrInvalidSize):
            NewMetadataBuilderUseCase().build(_input(processed_size=value))

    @pytest.mark.parametrize("field", ["content_id", "user_id", "original_key", "processed_key"])
    def test_missing_identifier_rejected(self, field):
        with pytest.raises(ErrMissingField, match=field):
            NewMetadataBuilderUseCase().build(_input(**{field: "  "}))

    def test_to_dict_uses_iso_timestamps(self):
        data = NewMetadataBuilderUseCase().build(_input()).to_dict()
        assert data["status"] == "processed"
        assert data["created_at"] == NOW.isoformat()
        assert data["updated_at"] == data["created_at"]


def test_build_content_metadata_wrapper():
    record = build_content_metadata(
        content_id="c-2",
        user_id="user-2",
        original_bucket="b",
        original_key="k.jpg",
        processed_key="processed/c-2.jpg",
        original_size=10,
        processed_size=5,
        now=NOW,
    )
    assert record.content_id == "c-2"
    assert record.status == ContentStatus.PROCESSED
