"""Live stream ODM schema."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from beanie import Document, Indexed
from beanie.odm.fields import ExpressionField
from beanie.odm.operators.update.general import Set
from loguru import logger
from pydantic import Field, field_validator
from pymongo import IndexModel

from app.domain.utils.clock import parse_mongo_datetime
from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

from .stream_state import RecordingStatus, StreamState, StreamTag


class LiveStream(Document):
    """One continuous broadcast, bounded by start/stop.

    After stop the same document carries the recording upload progress and,
    once uploaded and published, is listed as a video.
    """

    stream_id: Indexed(str, unique=True)  # type: ignore[valid-type]
    title: str
    tag: StreamTag

    status: StreamState = StreamState.LIVE
    is_live: bool = True
    viewer_count: int = 0

    start_time: datetime
    end_time: datetime | None = None
    duration_minutes: int = 0

    # Publishing
    publish_delay_hours: float = 12
    publish_after: datetime | None = None
    is_published: bool = False

    # Recording
    recording_path: str | None = None
    recording_status: RecordingStatus = RecordingStatus.PENDING
    recording_task_id: str | None = None
    youtube_video_id: str | None = None
    thumbnail: str | None = None

    created_at: datetime
    updated_at: datetime

    # Version control for optimistic locking
    version: int = Field(default=1)

    @field_validator(
        "start_time", "end_time", "publish_after", "created_at", "updated_at", mode="before"
    )
    @classmethod
    def _parse_datetime(cls, v: Any) -> Any:
        """Parse MongoDB Extended JSON datetime format."""
        return parse_mongo_datetime(v)

    async def _raise_version_conflict(self, current_version: int) -> None:
        fresh = await LiveStream.get(self.id)
        error_msg = (
            f"Version conflict on stream {self.stream_id}\n"
            f"Expected version: {current_version}, Current version: "
            f"{fresh.version if fresh else 'N/A'}, "
            f"status={fresh.status if fresh else 'N/A'}"
        )
        logger.warning(error_msg)
        raise AppError(
            errcode=AppErrorCode.E_STREAM_VERSION_CONFLICT,
            errmesg=error_msg,
            status_code=HttpStatusCode.CONFLICT,
        )

    async def partial_update_with_version_check(
        self,
        updates: Mapping[ExpressionField, Any],
    ) -> bool:
        """Atomically update select fields with optimistic locking.

        Args:
            updates: Mapping of LiveStream field expressions to values.
                Example: {LiveStream.is_published: True}

        Returns:
            True if update succeeded.

        Raises:
            AppError: On version conflict (E_STREAM_VERSION_CONFLICT), or if
                updates include LiveStream.version (E_INVALID_REQUEST).
        """
        if LiveStream.version in updates:
            raise AppError(
                AppErrorCode.E_INVALID_REQUEST,
                "updates must not include LiveStream.version",
                HttpStatusCode.BAD_REQUEST,
            )

        current_version = self.version
        new_version = current_version + 1
        update_fields = dict(updates)
        update_fields[LiveStream.version] = new_version  # type: ignore[index]

        result = await LiveStream.find(
            LiveStream.id == self.id,
            LiveStream.version == current_version,
        ).update(Set(update_fields))  # type: ignore[arg-type]

        if result and result.modified_count > 0:
            self.version = new_version
            logger.debug(
                f"Stream {self.stream_id} updated (version {current_version} -> {new_version})"
            )
            return True

        await self._raise_version_conflict(current_version)
        return False

    class Settings:
        name = "live_stream"
        indexes = [
            [("stream_id", 1)],  # unique handled by Indexed
            IndexModel(
                [("is_live", 1)],
                partialFilterExpression={"is_live": True},
                unique=True,
                name="is_live_single_active",
            ),
            IndexModel(
                [("is_published", 1), ("start_time", -1)],
                name="published_start_time",
            ),
            IndexModel([("start_time", -1)], name="start_time_desc"),
        ]
