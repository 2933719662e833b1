from fastapi import APIRouter, File, UploadFile
from pydantic import BaseModel

from app.api.v1.dependency import CurrentAdmin
from app.api.v1.schemas.base import ApiOut
from app.domain.uploads.upload_store import UploadStore, image_policy
from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

router = APIRouter(prefix="/upload", tags=["Upload"])

_CHUNK_SIZE = 1024 * 1024


class UploadOut(BaseModel):
    url: str
    filename: str


async def read_upload(file: UploadFile, max_bytes: int) -> bytes:
    """Read an uploaded file, failing as soon as it grows past `max_bytes`."""
    chunks: list[bytes] = []
    size = 0
    while chunk := await file.read(_CHUNK_SIZE):
        size += len(chunk)
        if size > max_bytes:
            raise AppError(
                errcode=AppErrorCode.E_UPLOAD_REJECTED,
                errmesg=f"File exceeds {max_bytes // (1024 * 1024)}MB limit",
                status_code=HttpStatusCode.PAYLOAD_TOO_LARGE,
            )
        chunks.append(chunk)
    return b"".join(chunks)


@router.post("")
async def upload_image(
    admin: CurrentAdmin,
    image: UploadFile | None = File(None),
) -> ApiOut[UploadOut]:
    """Store one image (max 5MB) and return its public URL."""
    if image is None:
        raise AppError(
            errcode=AppErrorCode.E_UPLOAD_MISSING,
            errmesg="No file uploaded",
            status_code=HttpStatusCode.BAD_REQUEST,
        )

    policy = image_policy()
    data = await read_upload(image, policy.max_bytes)
    stored = UploadStore().save(policy, image.filename or "", image.content_type, data)
    return ApiOut[UploadOut](results=UploadOut(url=stored.url, filename=stored.filename))
