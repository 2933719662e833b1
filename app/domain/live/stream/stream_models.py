"""Stream domain models."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from app.schemas import RecordingStatus, StreamState, StreamTag


class StreamResponse(BaseModel):
    """Stream response model."""

    stream_id: str
    title: str
    tag: StreamTag
    status: StreamState
    is_live: bool
    viewer_count: int = 0

    start_time: datetime
    end_time: datetime | None = None
    duration_minutes: int = 0

    publish_delay_hours: float
    publish_after: datetime | None = None
    is_published: bool = False

    recording_status: RecordingStatus = RecordingStatus.PENDING
    youtube_video_id: str | None = None
    thumbnail: str | None = None

    created_at: datetime
    updated_at: datetime


class VideoResponse(BaseModel):
    """Published recording of a stopped stream."""

    id: str
    title: str
    tag: StreamTag
    youtube_video_id: str
    start_time: datetime
    duration: int
    thumbnail: str | None = None


class StreamStatusResponse(BaseModel):
    """Admin view of the live channel."""

    active_stream: StreamResponse | None = None
    recent_streams: list[StreamResponse] = []


class StreamStartParams(BaseModel):
    """Parameters for starting a stream."""

    title: str
    tag: StreamTag = StreamTag.REGULAR
    publish_delay_hours: float = Field(default=12, ge=0)

    @field_validator("title")
    @classmethod
    def _strip_title(cls, v: str) -> str:
        return v.strip()
