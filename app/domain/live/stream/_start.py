"""Stream start operations."""

from loguru import logger
from pymongo.errors import DuplicateKeyError

from app.domain.utils.clock import utc_now
from app.domain.utils.idgen import new_stream_id
from app.schemas import LiveStream, RecordingStatus, StreamState
from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

from ._base import BaseService
from .stream_models import StreamResponse, StreamStartParams
from .stream_state_machine import StreamStateMachine


def _already_live() -> AppError:
    return AppError(
        errcode=AppErrorCode.E_STREAM_ALREADY_LIVE,
        errmesg="A stream is already active",
        status_code=HttpStatusCode.BAD_REQUEST,
    )


class StartStreamOperations(BaseService):
    """Operations for starting streams."""

    async def start_stream(self, params: StreamStartParams) -> StreamResponse:
        """Start a new live stream.

        Raises:
            AppError: E_INVALID_PARAMS for a blank title, E_STREAM_ALREADY_LIVE
                when another stream is live
        """
        title = params.title.strip()
        if not title:
            raise AppError(
                errcode=AppErrorCode.E_INVALID_PARAMS,
                errmesg="Title is required",
                status_code=HttpStatusCode.BAD_REQUEST,
            )

        active = await self._get_active_stream()
        if not StreamStateMachine.can_start(active is not None):
            logger.info(f"Start rejected, stream {active.stream_id} is live")  # type: ignore[union-attr]
            raise _already_live()

        now = utc_now()
        stream = LiveStream(
            stream_id=new_stream_id(),
            title=title,
            tag=params.tag,
            status=StreamState.LIVE,
            is_live=True,
            viewer_count=0,
            start_time=now,
            publish_delay_hours=params.publish_delay_hours,
            recording_status=RecordingStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

        try:
            await stream.insert()
        except DuplicateKeyError:
            # Lost the race against a concurrent start
            logger.warning(f"Concurrent start detected for '{title}'")
            raise _already_live() from None

        logger.info(f"Stream {stream.stream_id} started: title='{title}' tag={params.tag}")
        return self._to_response(stream)
