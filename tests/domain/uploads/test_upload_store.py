"""Tests for the local upload store."""

import re

import pytest

from app.domain.uploads.upload_store import (
    IMAGE_TYPES,
    UploadPolicy,
    UploadStore,
    document_policy,
    image_policy,
    make_filename,
)
from app.utils.app_errors import AppError, AppErrorCode


@pytest.fixture
def store(tmp_path) -> UploadStore:
    return UploadStore(tmp_path)


class TestMakeFilename:
    def test_appends_extension(self):
        assert re.fullmatch(r"image-\d+-\d+\.jpg", make_filename("image", ".jpg"))

    def test_no_extension(self):
        assert re.fullmatch(r"doc-\d+-\d+", make_filename("doc"))


class TestSave:
    def test_save_image(self, store: UploadStore, tmp_path):
        stored = store.save(image_policy(), "photo.png", "image/png", b"png-bytes")

        assert stored.url == f"/uploads/{stored.filename}"
        assert stored.filename.startswith("image-")
        assert stored.original_name == "photo.png"
        assert (tmp_path / stored.filename).read_bytes() == b"png-bytes"

    def test_save_document_in_subdir(self, store: UploadStore, tmp_path):
        stored = store.save(document_policy(), "bulletin.pdf", "application/pdf", b"%PDF")

        assert stored.url == f"/uploads/documents/{stored.filename}"
        assert (tmp_path / "documents" / stored.filename).exists()

    def test_rejects_non_image(self, store: UploadStore):
        with pytest.raises(AppError) as exc_info:
            store.save(image_policy(), "notes.txt", "text/plain", b"hello")

        assert exc_info.value.errcode == AppErrorCode.E_UPLOAD_REJECTED.value
        assert exc_info.value.status_code == 400

    def test_image_extension_follows_content_type(self, store: UploadStore, tmp_path):
        stored = store.save(image_policy(), "x.html", "image/png", b"png-bytes")

        assert stored.filename.endswith(".png")
        assert stored.original_name == "x.html"
        assert [p.name for p in tmp_path.iterdir()] == [stored.filename]

    def test_rejects_svg(self, store: UploadStore):
        with pytest.raises(AppError) as exc_info:
            store.save(image_policy(), "logo.svg", "image/svg+xml", b"<svg onload=x>")

        assert exc_info.value.errcode == AppErrorCode.E_UPLOAD_REJECTED.value

    def test_document_extension_is_normalized(self, store: UploadStore):
        stored = store.save(document_policy(), "Bulletin.PDF", "application/pdf", b"%PDF")

        assert stored.filename.endswith(".pdf")

    def test_rejects_document_extension(self, store: UploadStore):
        with pytest.raises(AppError):
            store.save(document_policy(), "script.exe", "application/octet-stream", b"MZ")

    def test_rejects_oversize(self, store: UploadStore):
        policy = UploadPolicy(prefix="image", max_bytes=4, content_types=IMAGE_TYPES)

        with pytest.raises(AppError) as exc_info:
            store.save(policy, "big.png", "image/png", b"12345")

        assert exc_info.value.status_code == 413

    def test_missing_file(self, store: UploadStore):
        with pytest.raises(AppError) as exc_info:
            store.save(image_policy(), "", "image/png", b"")

        assert exc_info.value.errcode == AppErrorCode.E_UPLOAD_MISSING.value
