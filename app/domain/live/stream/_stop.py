"""Stream stop operations."""

import math
from datetime import timedelta
from pathlib import Path

from loguru import logger

from app.app_config import get_app_environ_config
from app.domain.utils.clock import as_utc, utc_now
from app.schemas import LiveStream, StreamState
from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

from ._base import BaseService
from .stream_models import StreamResponse
from .stream_state_machine import StreamStateMachine


def recording_path_for(stream_id: str) -> str:
    """Where the ingest server leaves the recording of a stream."""
    return str(Path(get_app_environ_config().RECORDINGS_DIR) / f"{stream_id}.mp4")


class StopStreamOperations(BaseService):
    """Operations for stopping streams."""

    async def stop_stream(self, stream_id: str) -> StreamResponse:
        """Stop a live stream and schedule its recording for upload.

        Raises:
            AppError: E_STREAM_NOT_FOUND for an unknown id, E_STREAM_NOT_LIVE
                when the stream was already stopped
        """
        stream = await self._require_stream(stream_id)

        if not StreamStateMachine.can_transition(stream.status, StreamState.STOPPED):
            raise AppError(
                errcode=AppErrorCode.E_STREAM_NOT_LIVE,
                errmesg=f"Stream {stream_id} is not live",
                status_code=HttpStatusCode.BAD_REQUEST,
            )

        end_time = utc_now()
        elapsed = (end_time - as_utc(stream.start_time)).total_seconds()
        duration_minutes = max(0, math.floor(elapsed / 60))
        publish_after = end_time + timedelta(hours=stream.publish_delay_hours)
        recording_path = stream.recording_path or recording_path_for(stream.stream_id)

        await stream.partial_update_with_version_check(
            {
                LiveStream.status: StreamState.STOPPED,
                LiveStream.is_live: False,
                LiveStream.end_time: end_time,
                LiveStream.duration_minutes: duration_minutes,
                LiveStream.publish_after: publish_after,
                LiveStream.recording_path: recording_path,
                LiveStream.updated_at: end_time,
            }
        )
        stream.status = StreamState.STOPPED
        stream.is_live = False
        stream.end_time = end_time
        stream.duration_minutes = duration_minutes
        stream.publish_after = publish_after
        stream.recording_path = recording_path
        stream.updated_at = end_time

        logger.info(
            f"Stream {stream_id} stopped after {duration_minutes} min, "
            f"publish after {publish_after.isoformat()}"
        )

        await self._schedule_upload(stream)
        return self._to_response(stream)

    async def _schedule_upload(self, stream: LiveStream) -> None:
        from app.workers.recording_worker import upload_stream_recording
        from app.workers.recording_worker import worker as recording_worker

        try:
            async with recording_worker:
                task = await upload_stream_recording.enqueue(stream.stream_id)
        except Exception as e:
            # The periodic sweep retries streams left in PENDING
            logger.warning(f"Failed to enqueue upload for stream {stream.stream_id}: {e}")
            return

        await stream.partial_update_with_version_check({LiveStream.recording_task_id: task.id})
        stream.recording_task_id = task.id
        logger.info(f"Scheduled upload task {task.id} for stream {stream.stream_id}")
