"""Tests for StartStreamOperations domain logic."""

from unittest.mock import AsyncMock, patch

import pytest

from app.domain.live.stream._start import StartStreamOperations
from app.domain.live.stream.stream_models import StreamStartParams
from app.schemas import LiveStream, StreamState, StreamTag
from app.utils.app_errors import AppError, AppErrorCode


class TestBlankTitle:
    """Blank titles are rejected before any storage access."""

    @pytest.mark.parametrize("title", ["", "   ", "\t\n"])
    async def test_blank_title_rejected(self, title: str):
        ops = StartStreamOperations()

        with patch.object(StartStreamOperations, "_get_active_stream", AsyncMock()) as lookup:
            with pytest.raises(AppError) as exc_info:
                await ops.start_stream(StreamStartParams(title=title))

        assert exc_info.value.errcode == AppErrorCode.E_INVALID_PARAMS.value
        assert exc_info.value.errmesg == "Title is required"
        lookup.assert_not_called()


@pytest.mark.usefixtures("clear_collections")
class TestStartStream:
    async def test_start_creates_live_stream(self, beanie_db):
        ops = StartStreamOperations()

        result = await ops.start_stream(
            StreamStartParams(title="  Sunday Mass ", tag=StreamTag.REGULAR, publish_delay_hours=6)
        )

        assert result.title == "Sunday Mass"
        assert result.status == StreamState.LIVE
        assert result.is_live is True
        assert result.viewer_count == 0
        assert result.publish_delay_hours == 6

        saved = await LiveStream.find_one(LiveStream.stream_id == result.stream_id)
        assert saved is not None
        assert saved.is_live is True

    async def test_start_while_live_rejected(self, beanie_db):
        ops = StartStreamOperations()
        await ops.start_stream(StreamStartParams(title="Sunday Mass"))

        with pytest.raises(AppError) as exc_info:
            await ops.start_stream(StreamStartParams(title="Evening Prayer"))

        assert exc_info.value.errcode == AppErrorCode.E_STREAM_ALREADY_LIVE.value
        assert exc_info.value.errmesg == "A stream is already active"
        assert await LiveStream.find(LiveStream.is_live == True).count() == 1  # noqa: E712
