"""Streaq worker for stream recordings.

After a stream stops, its recording is uploaded to YouTube as an unlisted
video and becomes a public Video only once `publish_after` has passed.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Any

from loguru import logger
from streaq import Worker

from app.domain.utils.clock import as_utc, utc_now
from app.schemas import LiveStream, RecordingStatus
from app.schemas.init import init_schema
from app.services.integrations.youtube_service import (
    RecordingFileNotFound,
    YouTubeError,
    get_youtube_service,
)
from app.shared.api.utils import init_logger
from app.shared.config import config

SVC_KEY = "parish-site"
QUEUE_KEY_RECORDINGS = f"{SVC_KEY}:streaq:recordings"

queue_url = config.get_redis_url("queue")


@asynccontextmanager
async def recording_lifespan() -> AsyncIterator[None]:
    """Lifespan context manager for the recording worker."""
    init_logger()
    logger.info("Starting recording worker")
    await init_schema()
    logger.info("Recording worker initialized")

    try:
        yield
    finally:
        logger.info("Recording worker stopped")


worker: Worker[None] = Worker(
    redis_url=queue_url,
    lifespan=recording_lifespan,  # type: ignore[arg-type]
    queue_name=QUEUE_KEY_RECORDINGS,
)


def describe_recording(stream: LiveStream) -> str:
    started = as_utc(stream.start_time).strftime("%d %B %Y")
    return f"{stream.title} ({stream.tag.value} live stream, {started})"


async def publish_if_due(stream: LiveStream) -> bool:
    """Mark an uploaded recording as published once its delay has elapsed."""
    if stream.is_published or not stream.youtube_video_id:
        return False
    if stream.publish_after is None or as_utc(stream.publish_after) > utc_now():
        return False

    await stream.partial_update_with_version_check(
        {LiveStream.is_published: True, LiveStream.updated_at: utc_now()}
    )
    stream.is_published = True
    logger.info(f"Published recording of stream {stream.stream_id}: {stream.youtube_video_id}")
    return True


@worker.task(ttl=timedelta(hours=6))
async def upload_stream_recording(stream_id: str) -> dict[str, Any]:
    """Upload the recording of a stopped stream, then schedule its publishing.

    Returns:
        Dict with the upload outcome
    """
    stream = await LiveStream.find_one(LiveStream.stream_id == stream_id)
    if not stream:
        logger.warning(f"Stream {stream_id} not found, skipping upload")
        return {"status": "skipped", "reason": "stream_not_found"}
    if stream.is_live:
        return {"status": "skipped", "reason": "stream_live"}
    if stream.youtube_video_id:
        return {"status": "skipped", "reason": "already_uploaded"}
    if not stream.recording_path:
        logger.warning(f"Stream {stream_id} has no recording path")
        return {"status": "skipped", "reason": "no_recording"}

    await stream.partial_update_with_version_check(
        {LiveStream.recording_status: RecordingStatus.UPLOADING}
    )

    service = get_youtube_service()
    try:
        video_id = await asyncio.to_thread(
            service.upload_and_cleanup,
            stream.recording_path,
            stream.title,
            describe_recording(stream),
        )
    except RecordingFileNotFound:
        logger.warning(f"Recording for stream {stream_id} missing at {stream.recording_path}")
        await stream.partial_update_with_version_check(
            {LiveStream.recording_status: RecordingStatus.MISSING}
        )
        return {"status": "missing", "stream_id": stream_id}
    except YouTubeError as e:
        logger.exception(f"Failed to upload recording of stream {stream_id}: {e}")
        await stream.partial_update_with_version_check(
            {LiveStream.recording_status: RecordingStatus.FAILED}
        )
        raise
    except Exception as e:
        logger.exception(
            f"Unexpected error uploading recording of stream {stream_id}: "
            f"{type(e).__name__}: {e}"
        )
        await stream.partial_update_with_version_check(
            {LiveStream.recording_status: RecordingStatus.FAILED}
        )
        raise

    await stream.partial_update_with_version_check(
        {
            LiveStream.youtube_video_id: video_id,
            LiveStream.recording_status: RecordingStatus.UPLOADED,
            LiveStream.updated_at: utc_now(),
        }
    )
    stream.youtube_video_id = video_id

    if await publish_if_due(stream):
        return {"status": "published", "stream_id": stream_id, "video_id": video_id}

    delay = as_utc(stream.publish_after) - utc_now() if stream.publish_after else timedelta(0)
    task = await publish_stream_recording.enqueue(stream_id).start(delay=delay)
    logger.info(f"Scheduled publish task {task.id} for stream {stream_id} in {delay}")
    return {"status": "uploaded", "stream_id": stream_id, "video_id": video_id}


@worker.task(ttl=timedelta(hours=1))
async def publish_stream_recording(stream_id: str) -> dict[str, Any]:
    stream = await LiveStream.find_one(LiveStream.stream_id == stream_id)
    if not stream:
        return {"status": "skipped", "reason": "stream_not_found"}
    if await publish_if_due(stream):
        return {"status": "published", "stream_id": stream_id}
    return {"status": "skipped", "reason": "not_due"}


@worker.cron("0 */10 * * * * *")
async def publish_due_recordings() -> None:
    """Sweep for overdue publishes and recordings whose upload was never enqueued."""
    due = await LiveStream.find(
        LiveStream.is_published == False,  # noqa: E712
        LiveStream.youtube_video_id != None,  # noqa: E711
        LiveStream.publish_after <= utc_now(),
    ).to_list()
    for stream in due:
        await publish_if_due(stream)

    orphaned = await LiveStream.find(
        LiveStream.is_live == False,  # noqa: E712
        LiveStream.recording_status == RecordingStatus.PENDING,
        LiveStream.recording_task_id == None,  # noqa: E711
    ).to_list()
    for stream in orphaned:
        task = await upload_stream_recording.enqueue(stream.stream_id)
        await stream.partial_update_with_version_check({LiveStream.recording_task_id: task.id})
        logger.info(f"Enqueued missed upload {task.id} for stream {stream.stream_id}")

    if due or orphaned:
        logger.info(f"Recording sweep: {len(due)} due, {len(orphaned)} orphaned")
