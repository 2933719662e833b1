from fastapi import APIRouter, Depends, Query, Request, Response

from app.api.v1.dependency import CurrentAdmin
from app.api.v1.schemas.base import ApiOut
from app.api.v1.schemas.live_stream import (
    NetworkCheckOut,
    StartStreamIn,
    StreamOut,
    StreamStatusOut,
    VideoOut,
    ViewerCountIn,
)
from app.domain.live.network.network_gate import (
    classify_network,
    get_connection_recommendation,
    read_connection_hints,
)
from app.domain.live.stream.stream_domain import StreamService
from app.domain.live.stream.stream_models import StreamResponse, StreamStartParams

router = APIRouter(prefix="/live-stream", tags=["Live Stream"])

# Singleton instance
_stream_service = StreamService()


def get_stream_service() -> StreamService:
    """Get the singleton StreamService instance."""
    return _stream_service


def _stream_out(stream: StreamResponse) -> StreamOut:
    return StreamOut(**stream.model_dump())


# ==================== ADMIN ====================


@router.post("/admin/start")
async def start_stream(
    params: StartStreamIn,
    admin: CurrentAdmin,
    service: StreamService = Depends(get_stream_service),
) -> ApiOut[StreamOut]:
    """Start a live stream. Fails if another stream is already live."""
    stream = await service.start_stream(
        StreamStartParams(
            title=params.title,
            tag=params.tag,
            publish_delay_hours=params.publish_delay_hours,
        )
    )
    return ApiOut[StreamOut](results=_stream_out(stream))


@router.post("/admin/stop/{stream_id}")
async def stop_stream(
    stream_id: str,
    admin: CurrentAdmin,
    service: StreamService = Depends(get_stream_service),
) -> ApiOut[StreamOut]:
    """Stop a live stream and queue its recording for upload."""
    stream = await service.stop_stream(stream_id)
    return ApiOut[StreamOut](results=_stream_out(stream))


@router.get("/admin/status")
async def get_stream_status(
    admin: CurrentAdmin,
    service: StreamService = Depends(get_stream_service),
) -> ApiOut[StreamStatusOut]:
    status = await service.get_status()
    return ApiOut[StreamStatusOut](
        results=StreamStatusOut(
            active_stream=_stream_out(status.active_stream) if status.active_stream else None,
            recent_streams=[_stream_out(s) for s in status.recent_streams],
        )
    )


# ==================== PUBLIC ====================


@router.get("/active")
async def get_active_stream(
    service: StreamService = Depends(get_stream_service),
) -> ApiOut[StreamOut]:
    stream = await service.get_active_stream()
    return ApiOut[StreamOut](results=_stream_out(stream))


@router.get("/videos")
async def list_videos(
    service: StreamService = Depends(get_stream_service),
) -> ApiOut[list[VideoOut]]:
    """Published recordings, newest first."""
    videos = await service.list_videos()
    return ApiOut[list[VideoOut]](results=[VideoOut(**v.model_dump()) for v in videos])


@router.get("/videos/{stream_id}")
async def get_video(
    stream_id: str,
    service: StreamService = Depends(get_stream_service),
) -> ApiOut[VideoOut]:
    video = await service.get_video(stream_id)
    return ApiOut[VideoOut](results=VideoOut(**video.model_dump()))


@router.put("/viewer-count/{stream_id}")
async def update_viewer_count(
    stream_id: str,
    params: ViewerCountIn,
    service: StreamService = Depends(get_stream_service),
) -> ApiOut[StreamOut]:
    stream = await service.update_viewer_count(stream_id, params.viewer_count)
    return ApiOut[StreamOut](results=_stream_out(stream))


@router.get("/network-check")
async def network_check(
    request: Request,
    response: Response,
    effective_type: str | None = Query(None, description="navigator.connection.effectiveType"),
    downlink: float | None = Query(None, ge=0, description="Downlink estimate in Mbps"),
) -> ApiOut[NetworkCheckOut]:
    """Classify the viewer's network before showing the live player.

    Falls back to the ECT/Downlink Client Hints headers when no explicit
    values are passed. Networks that report nothing are allowed.
    """
    # Ask browsers to send the hints on subsequent requests
    response.headers["Accept-CH"] = "ECT, Downlink"

    ect, mbps = read_connection_hints(request.headers, effective_type, downlink)
    verdict = classify_network(ect, mbps)
    return ApiOut[NetworkCheckOut](
        results=NetworkCheckOut(
            **verdict.model_dump(),
            recommendation=get_connection_recommendation(ect),
        )
    )
