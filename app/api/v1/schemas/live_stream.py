from datetime import datetime

from pydantic import BaseModel, Field, field_serializer

from app.app_config import get_app_environ_config
from app.domain.live.network.network_gate import NetworkTier
from app.domain.utils.clock import isoformat_utc
from app.schemas import RecordingStatus, StreamState, StreamTag


class StartStreamIn(BaseModel):
    title: str = Field(description="Title shown to viewers and used for the recording")
    tag: StreamTag = Field(default=StreamTag.REGULAR, description="event, regular or special")
    publish_delay_hours: float = Field(
        default_factory=lambda: get_app_environ_config().DEFAULT_PUBLISH_DELAY_HOURS,
        ge=0,
        description="Hours after stop before the recording is listed as a video",
    )


class ViewerCountIn(BaseModel):
    viewer_count: int = Field(ge=0)


class StreamOut(BaseModel):
    stream_id: str
    title: str
    tag: StreamTag
    status: StreamState
    is_live: bool
    viewer_count: int
    start_time: datetime
    end_time: datetime | None = None
    duration_minutes: int
    publish_delay_hours: float
    publish_after: datetime | None = None
    is_published: bool
    recording_status: RecordingStatus
    youtube_video_id: str | None = None
    thumbnail: str | None = None

    @field_serializer("start_time")
    def _ser_start(self, v: datetime) -> str:
        return isoformat_utc(v)  # type: ignore[return-value]

    @field_serializer("end_time", "publish_after")
    def _ser_optional(self, v: datetime | None) -> str | None:
        return isoformat_utc(v)


class StreamStatusOut(BaseModel):
    active_stream: StreamOut | None = None
    recent_streams: list[StreamOut] = []


class VideoOut(BaseModel):
    id: str
    title: str
    tag: StreamTag
    youtube_video_id: str
    start_time: datetime
    duration: int = Field(description="Duration in minutes")
    thumbnail: str | None = None

    @field_serializer("start_time")
    def _ser_start(self, v: datetime) -> str:
        return isoformat_utc(v)  # type: ignore[return-value]


class NetworkCheckOut(BaseModel):
    type: str
    is_allowed: bool
    message: str
    tier: NetworkTier
    speed_mbps: float | None = None
    recommendation: str
