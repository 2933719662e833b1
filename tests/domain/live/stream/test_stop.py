"""Tests for StopStreamOperations domain logic."""

from datetime import timedelta
from unittest.mock import AsyncMock, patch

import pytest

from app.domain.live.stream._start import StartStreamOperations
from app.domain.live.stream._stop import StopStreamOperations, recording_path_for
from app.domain.live.stream.stream_models import StreamStartParams
from app.domain.utils.clock import as_utc, utc_now
from app.schemas import LiveStream, RecordingStatus, StreamState
from app.utils.app_errors import AppError, AppErrorCode


@pytest.fixture
def schedule_upload():
    with patch.object(StopStreamOperations, "_schedule_upload", AsyncMock()) as mock:
        yield mock


@pytest.mark.usefixtures("clear_collections")
class TestStopStream:
    async def test_stop_live_stream(self, beanie_db, schedule_upload: AsyncMock):
        started = await StartStreamOperations().start_stream(
            StreamStartParams(title="Sunday Mass", publish_delay_hours=12)
        )
        # Pretend the stream has been running for 75.5 minutes
        stream = await LiveStream.find_one(LiveStream.stream_id == started.stream_id)
        assert stream is not None
        await stream.set({LiveStream.start_time: utc_now() - timedelta(minutes=75, seconds=30)})

        result = await StopStreamOperations().stop_stream(started.stream_id)

        assert result.status == StreamState.STOPPED
        assert result.is_live is False
        assert result.duration_minutes == 75
        assert result.end_time is not None
        assert result.publish_after is not None
        delay = as_utc(result.publish_after) - as_utc(result.end_time)
        assert delay == timedelta(hours=12)
        assert result.recording_status == RecordingStatus.PENDING

        saved = await LiveStream.find_one(LiveStream.stream_id == started.stream_id)
        assert saved is not None
        assert saved.recording_path == recording_path_for(started.stream_id)
        schedule_upload.assert_awaited_once()

    async def test_stop_unknown_stream(self, beanie_db, schedule_upload: AsyncMock):
        with pytest.raises(AppError) as exc_info:
            await StopStreamOperations().stop_stream("st_unknown")

        assert exc_info.value.errcode == AppErrorCode.E_STREAM_NOT_FOUND.value
        assert exc_info.value.status_code == 404
        schedule_upload.assert_not_called()

    async def test_stop_twice_rejected(self, beanie_db, schedule_upload: AsyncMock):
        started = await StartStreamOperations().start_stream(StreamStartParams(title="Vespers"))
        ops = StopStreamOperations()
        await ops.stop_stream(started.stream_id)

        with pytest.raises(AppError) as exc_info:
            await ops.stop_stream(started.stream_id)

        assert exc_info.value.errcode == AppErrorCode.E_STREAM_NOT_LIVE.value
        assert schedule_upload.await_count == 1

    async def test_can_start_again_after_stop(self, beanie_db, schedule_upload: AsyncMock):
        start = StartStreamOperations()
        first = await start.start_stream(StreamStartParams(title="Morning Mass"))
        await StopStreamOperations().stop_stream(first.stream_id)

        second = await start.start_stream(StreamStartParams(title="Evening Mass"))

        assert second.stream_id != first.stream_id
        assert second.is_live is True

    async def test_enqueue_failure_is_logged_not_raised(self, beanie_db):
        started = await StartStreamOperations().start_stream(StreamStartParams(title="Vigil"))

        with patch("app.workers.recording_worker.worker") as worker:
            worker.__aenter__ = AsyncMock(side_effect=ConnectionError("redis down"))
            result = await StopStreamOperations().stop_stream(started.stream_id)

        assert result.status == StreamState.STOPPED
        saved = await LiveStream.find_one(LiveStream.stream_id == started.stream_id)
        assert saved is not None
        assert saved.recording_task_id is None
