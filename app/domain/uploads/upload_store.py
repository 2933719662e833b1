"""Local file store for admin uploads served under /uploads."""

import random
import time
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from app.app_config import get_app_environ_config
from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

IMAGE_TYPES = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}
DOCUMENT_EXTENSIONS = frozenset({".pdf", ".doc", ".docx", ".xls", ".xlsx", ".txt"})
DOCUMENT_MAX_BYTES = 10 * 1024 * 1024
DOCUMENTS_SUBDIR = "documents"
PUBLIC_PREFIX = "/uploads"


def base_type(content_type: str | None) -> str:
    """`image/PNG; q=1` -> `image/png`."""
    return (content_type or "").split(";")[0].strip().lower()


@dataclass(frozen=True)
class UploadPolicy:
    prefix: str
    max_bytes: int
    subdir: str = ""
    # Content type -> extension of the stored file
    content_types: Mapping[str, str] | None = None
    extensions: frozenset[str] | None = None

    def accepts(self, filename: str, content_type: str | None) -> bool:
        if self.content_types is not None and base_type(content_type) not in self.content_types:
            return False
        if self.extensions is not None and Path(filename).suffix.lower() not in self.extensions:
            return False
        return True

    def extension_for(self, filename: str, content_type: str | None) -> str:
        """Stored extension, never taken verbatim from the client filename."""
        if self.content_types is not None:
            return self.content_types[base_type(content_type)]
        return Path(filename).suffix.lower()


@dataclass(frozen=True)
class StoredUpload:
    filename: str
    original_name: str
    url: str
    size: int


def image_policy() -> UploadPolicy:
    return UploadPolicy(
        prefix="image",
        max_bytes=get_app_environ_config().UPLOAD_MAX_BYTES,
        content_types=IMAGE_TYPES,
    )


def document_policy() -> UploadPolicy:
    return UploadPolicy(
        prefix="doc",
        max_bytes=DOCUMENT_MAX_BYTES,
        subdir=DOCUMENTS_SUBDIR,
        extensions=DOCUMENT_EXTENSIONS,
    )


def make_filename(prefix: str, extension: str = "") -> str:
    """`<prefix>-<epoch ms>-<random><extension>`."""
    return f"{prefix}-{int(time.time() * 1000)}-{random.randint(0, 10**9)}{extension}"


class UploadStore:
    def __init__(self, root: str | Path | None = None):
        self.root = Path(root or get_app_environ_config().UPLOAD_DIR)

    def validate(self, policy: UploadPolicy, filename: str, content_type: str | None, size: int):
        if not filename:
            raise AppError(
                errcode=AppErrorCode.E_UPLOAD_MISSING,
                errmesg="No file uploaded",
                status_code=HttpStatusCode.BAD_REQUEST,
            )
        if not policy.accepts(filename, content_type):
            raise AppError(
                errcode=AppErrorCode.E_UPLOAD_REJECTED,
                errmesg=f"File type not allowed: {content_type or Path(filename).suffix}",
                status_code=HttpStatusCode.BAD_REQUEST,
            )
        if size > policy.max_bytes:
            raise AppError(
                errcode=AppErrorCode.E_UPLOAD_REJECTED,
                errmesg=f"File exceeds {policy.max_bytes // (1024 * 1024)}MB limit",
                status_code=HttpStatusCode.PAYLOAD_TOO_LARGE,
            )

    def save(
        self,
        policy: UploadPolicy,
        filename: str,
        content_type: str | None,
        data: bytes,
    ) -> StoredUpload:
        self.validate(policy, filename, content_type, len(data))

        directory = self.root / policy.subdir if policy.subdir else self.root
        directory.mkdir(parents=True, exist_ok=True)

        stored_name = make_filename(policy.prefix, policy.extension_for(filename, content_type))
        (directory / stored_name).write_bytes(data)

        url_path = f"{policy.subdir}/{stored_name}" if policy.subdir else stored_name
        logger.info(f"Stored upload {url_path} ({len(data)} bytes)")
        return StoredUpload(
            filename=stored_name,
            original_name=filename,
            url=f"{PUBLIC_PREFIX}/{url_path}",
            size=len(data),
        )
