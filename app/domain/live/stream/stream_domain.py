"""Stream domain service."""

from ._start import StartStreamOperations
from ._stop import StopStreamOperations
from ._streams import StreamQueryOperations
from .stream_models import StreamResponse, StreamStartParams, StreamStatusResponse, VideoResponse


class StreamService:
    """Live-stream lifecycle service."""

    def __init__(self):
        self._start = StartStreamOperations()
        self._stop = StopStreamOperations()
        self._query = StreamQueryOperations()

    # ==================== LIFECYCLE ====================

    async def start_stream(self, params: StreamStartParams) -> StreamResponse:
        """Start a stream.

        Raises AppError if the title is blank or a stream is already live.
        """
        return await self._start.start_stream(params=params)

    async def stop_stream(self, stream_id: str) -> StreamResponse:
        """Stop a live stream and enqueue its recording upload.

        Raises AppError if the stream is unknown or not live.
        """
        return await self._stop.stop_stream(stream_id=stream_id)

    # ==================== QUERIES ====================

    async def get_active_stream(self) -> StreamResponse:
        """Raises AppError if no stream is live."""
        return await self._query.get_active_stream()

    async def get_status(self) -> StreamStatusResponse:
        return await self._query.get_status()

    async def list_videos(self) -> list[VideoResponse]:
        return await self._query.list_videos()

    async def get_video(self, stream_id: str) -> VideoResponse:
        """Raises AppError unless the recording is uploaded and published."""
        return await self._query.get_video(stream_id=stream_id)

    async def update_viewer_count(self, stream_id: str, viewer_count: int) -> StreamResponse:
        return await self._query.update_viewer_count(
            stream_id=stream_id, viewer_count=viewer_count
        )
