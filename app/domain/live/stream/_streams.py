"""Stream query operations."""

from app.schemas import LiveStream
from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

from ._base import BaseService
from .stream_models import StreamResponse, StreamStatusResponse, VideoResponse

RECENT_STREAMS_LIMIT = 5


class StreamQueryOperations(BaseService):
    """Read side of the stream lifecycle."""

    async def get_active_stream(self) -> StreamResponse:
        stream = await self._get_active_stream()
        if not stream:
            raise AppError(
                errcode=AppErrorCode.E_STREAM_NOT_FOUND,
                errmesg="No active stream",
                status_code=HttpStatusCode.NOT_FOUND,
            )
        return self._to_response(stream)

    async def get_status(self) -> StreamStatusResponse:
        active = await self._get_active_stream()
        recent = (
            await LiveStream.find_all()
            .sort(-LiveStream.start_time)  # type: ignore[operator]
            .limit(RECENT_STREAMS_LIMIT)
            .to_list()
        )
        return StreamStatusResponse(
            active_stream=self._to_response(active) if active else None,
            recent_streams=[self._to_response(s) for s in recent],
        )

    async def list_videos(self) -> list[VideoResponse]:
        streams = (
            await LiveStream.find(
                LiveStream.is_published == True,  # noqa: E712
                LiveStream.youtube_video_id != None,  # noqa: E711
            )
            .sort(-LiveStream.start_time)  # type: ignore[operator]
            .to_list()
        )
        return [self._to_video(s) for s in streams]

    async def get_video(self, stream_id: str) -> VideoResponse:
        stream = await self._get_stream_by_id(stream_id)
        if not stream or not stream.is_published or not stream.youtube_video_id:
            raise AppError(
                errcode=AppErrorCode.E_VIDEO_NOT_FOUND,
                errmesg="Video not found",
                status_code=HttpStatusCode.NOT_FOUND,
            )
        return self._to_video(stream)

    async def update_viewer_count(self, stream_id: str, viewer_count: int) -> StreamResponse:
        stream = await self._require_stream(stream_id)
        await stream.partial_update_with_version_check({LiveStream.viewer_count: viewer_count})
        stream.viewer_count = viewer_count
        return self._to_response(stream)
