"""Unit tests for the analytics aggregation query."""

from datetime import timedelta

import pytest  # type: ignore

from pkg.postgre.constant import DatabaseErrorKind
from internal.analytics import Config, NewAnalyticsUseCase, QueryError, QueryInput
from internal.content_metadata.repository.errors import ErrFailedToGet as ErrContentGet
from internal.model import ErrorKind
from internal.model.user_analytics import UserAnalytics
from internal.user_analytics.repository.errors import ErrFailedToGet as ErrCounterGet
from support import BASE_TIME, make_record


def _usecase(content_repository, user_repository, **config):
    return NewAnalyticsUseCase(
        config=Config(**config),
        content_repository=content_repository,
        user_repository=user_repository,
    )


def _seed(content_repository, user_repository, user_id, sizes, start=BASE_TIME):
    for i, (original, processed) in enumerate(sizes):
        content_repository.records.append(
            make_record(
                f"{user_id}-{i}",
                user_id=user_id,
                original_size=original,
                processed_size=processed,
                created_at=start + timedelta(minutes=i),
            )
        )
    user_repository.rows[user_id] = UserAnalytics(
        user_id=user_id,
        upload_count=len(sizes),
        last_upload=start + timedelta(minutes=len(sizes) - 1),
    )


class TestUserStats:
    """Per-user figures."""

    async def test_empty_user(self, content_repository, user_repository):
        result = await _usecase(content_repository, user_repository).query(QueryInput(user_id="nobody"))

        assert result.user_id == "nobody"
        assert result.user_stats.upload_count == 0
        assert result.user_stats.last_upload is None
        assert result.user_stats.total_original_size == 0
        assert result.user_stats.total_processed_size == 0
        assert result.user_stats.compression_ratio == 0
        assert result.user_content.total_items == 0
        assert result.user_content.recent_content_ids == []

    async def test_sizes_are_summed(self, content_repository, user_repository):
        _seed(content_repository, user_repository, "alice", [(1000, 400), (3000, 600), (500, 250)])

        stats = (await _usecase(content_repository, user_repository).query(QueryInput("alice"))).user_stats

        assert stats.upload_count == 3
        assert stats.total_original_size == 4500
        assert stats.total_processed_size == 1250
        assert stats.compression_ratio == 3.6

    async def test_ratio_is_rounded_to_two_places(self, content_repository, user_repository):
        _seed(content_repository, user_repository, "alice", [(1000, 300)])

        stats = (await _usecase(content_repository, user_repository).query(QueryInput("alice"))).user_stats

        assert stats.compression_ratio == 3.33

    async def test_zero_processed_size_gives_zero_ratio(self, content_repository, user_repository):
        _seed(content_repository, user_repository, "alice", [(1000, 0)])

        stats = (await _usecase(content_repository, user_repository).query(QueryInput("alice"))).user_stats

        assert stats.compression_ratio == 0

    async def test_other_users_are_excluded(self, content_repository, user_repository):
        _seed(content_repository, user_repository, "alice", [(100, 50)])
        _seed(content_repository, user_repository, "bob", [(9000, 10), (9000, 10)])

        result = await _usecase(content_repository, user_repository).query(QueryInput("alice"))

        assert result.user_stats.total_original_size == 100
        assert result.user_content.total_items == 1

    async def test_recent_content_is_newest_first_and_capped(self, content_repository, user_repository):
        _seed(content_repository, user_repository, "alice", [(10, 5)] * 8)

        content = (await _usecase(content_repository, user_repository).query(QueryInput("alice"))).user_content

        assert content.total_items == 8
        assert [c.content_id for c in content.recent_content_ids] == [
            "alice-7", "alice-6", "alice-5", "alice-4", "alice-3",
        ]

    async def test_default_user(self, content_repository, user_repository):
        _seed(content_repository, user_repository, "example-user", [(10, 5)])

        for user_id in (None, "", "   "):
            result = await _usecase(content_repository, user_repository).query(QueryInput(user_id))
            assert result.user_id == "example-user"
            assert result.user_stats.upload_count == 1


class TestGlobalStats:
    """Figures over the recent window."""

    async def test_counts_and_users(self, content_repository, user_repository):
        _seed(content_repository, user_repository, "alice", [(10, 5)] * 3)
        _seed(content_repository, user_repository, "bob", [(10, 5)] * 2, start=BASE_TIME + timedelta(hours=1))

        stats = (await _usecase(content_repository, user_repository).query(QueryInput("alice"))).global_stats

        assert stats.total_content_items == 5
        assert stats.total_users == 2
        assert stats.window_size == 50
        assert stats.is_approximate is False
        assert [u.content_id for u in stats.recent_uploads][:2] == ["bob-1", "bob-0"]

    async def test_window_limits_the_scan(self, content_repository, user_repository):
        _seed(content_repository, user_repository, "alice", [(10, 5)] * 6)
        _seed(content_repository, user_repository, "bob", [(10, 5)] * 2, start=BASE_TIME - timedelta(days=1))

        result = await _usecase(
            content_repository, user_repository, global_window=4, recent_global_items=2
        ).query(QueryInput("alice"))

        stats = result.global_stats
        assert stats.total_content_items == 4
        assert stats.total_users == 1
        assert stats.window_size == 4
        assert stats.is_approximate is True
        assert [u.content_id for u in stats.recent_uploads] == ["alice-5", "alice-4"]
        # Per-user figures are not windowed
        assert result.user_content.total_items == 6

    async def test_full_window_is_exact(self, content_repository, user_repository):
        _seed(content_repository, user_repository, "alice", [(10, 5)] * 3)

        stats = (
            await _usecase(content_repository, user_repository, global_window=3).query(QueryInput("alice"))
        ).global_stats

        assert stats.total_content_items == 3
        assert stats.is_approximate is False

    async def test_one_row_past_window_is_approximate(self, content_repository, user_repository):
        _seed(content_repository, user_repository, "alice", [(10, 5)] * 4)

        stats = (
            await _usecase(content_repository, user_repository, global_window=3).query(QueryInput("alice"))
        ).global_stats

        assert stats.total_content_items == 3
        assert stats.is_approximate is True


class TestQueryFailures:
    """Read failures surface as QueryError with a kind."""

    async def test_counter_read_failure(self, content_repository, user_repository):
        user_repository.read_error = ErrCounterGet("timeout", kind=DatabaseErrorKind.TIMEOUT)

        with pytest.raises(QueryError) as exc_info:
            await _usecase(content_repository, user_repository).query(QueryInput("alice"))

        assert exc_info.value.kind == ErrorKind.TIMEOUT
        assert exc_info.value.component == "user_analytics"

    async def test_content_read_failure(self, content_repository, user_repository):
        content_repository.read_error = ErrContentGet("down", kind=DatabaseErrorKind.UNAVAILABLE)

        with pytest.raises(QueryError) as exc_info:
            await _usecase(content_repository, user_repository).query(QueryInput("alice"))

        assert exc_info.value.kind == ErrorKind.UNAVAILABLE
        assert exc_info.value.component == "content_metadata"


class TestRoundTrip:
    """Sizes written by ingestion come back through the aggregation."""

    async def test_ingested_sizes_are_reported(self, ingestion, storage, content_repository, user_repository, jpeg_bytes):
        from internal.ingestion import Notification

        for key in ("one.jpg", "two.jpg"):
            storage.add("user-content-bucket", key, jpeg_bytes)
        batch = await ingestion.process_batch(
            [
                Notification(bucket="user-content-bucket", key="one.jpg", user_id="dave"),
                Notification(bucket="user-content-bucket", key="two.jpg", user_id="dave"),
            ]
        )

        result = await _usecase(content_repository, user_repository).query(QueryInput("dave"))

        assert result.user_stats.upload_count == 2
        assert result.user_stats.total_original_size == 2 * len(jpeg_bytes)
        assert result.user_stats.total_processed_size == sum(i.processed_size for i in batch.items)
        assert {c.content_id for c in result.user_content.recent_content_ids} == {
            i.content_id for i in batch.items
        }


def test_to_dict_shape():
    from internal.analytics.type import (
        AnalyticsResult,
        GlobalStats,
        UserContent,
        UserStats,
    )

    body = AnalyticsResult(
        user_id="u",
        user_stats=UserStats(),
        user_content=UserContent(),
        global_stats=GlobalStats(),
        query_timestamp=BASE_TIME,
    ).to_dict()

    assert set(body) == {"user_id", "user_stats", "user_content", "global_stats", "query_timestamp"}
    assert body["user_content"] == {"total_items": 0, "recent_content_ids": []}
    assert body["query_timestamp"] == BASE_TIME.isoformat()


@pytest.mark.parametrize("window", [0, -1])
def test_config_rejects_bad_window(window):
    with pytest.raises(ValueError):
        Config(global_window=window)
