"""Base service for stream operations."""

from app.schemas import LiveStream
from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

from .stream_models import StreamResponse, VideoResponse


class BaseService:
    """Base service with shared stream lookups and projections."""

    async def _get_stream_by_id(self, stream_id: str) -> LiveStream | None:
        return await LiveStream.find_one(LiveStream.stream_id == stream_id)

    async def _get_active_stream(self) -> LiveStream | None:
        return await LiveStream.find_one(LiveStream.is_live == True)  # noqa: E712

    async def _require_stream(self, stream_id: str) -> LiveStream:
        stream = await self._get_stream_by_id(stream_id)
        if not stream:
            raise AppError(
                errcode=AppErrorCode.E_STREAM_NOT_FOUND,
                errmesg="Stream not found",
                status_code=HttpStatusCode.NOT_FOUND,
            )
        return stream

    @staticmethod
    def _to_response(stream: LiveStream) -> StreamResponse:
        return StreamResponse(**stream.model_dump(exclude={"id", "revision_id"}))

    @staticmethod
    def _to_video(stream: LiveStream) -> VideoResponse:
        return VideoResponse(
            id=stream.stream_id,
            title=stream.title,
            tag=stream.tag,
            youtube_video_id=stream.youtube_video_id or "",
            start_time=stream.start_time,
            duration=stream.duration_minutes,
            thumbnail=stream.thumbnail,
        )
