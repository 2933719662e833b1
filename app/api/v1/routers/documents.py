from typing import Any

from fastapi import APIRouter, File, Form, Query, UploadFile

from app.api.v1.dependency import CurrentAdmin
from app.api.v1.routers.upload import read_upload
from app.api.v1.schemas.base import ApiOut, MessageOut
from app.api.v1.schemas.parish import DocumentUpdate
from app.domain.parish import community
from app.domain.parish.community import documents
from app.domain.uploads.upload_store import UploadStore, document_policy
from app.schemas.parish_document import DocumentCategory

router = APIRouter(prefix="/documents", tags=["Documents"])


@router.get("")
async def list_documents(
    category: DocumentCategory | None = Query(None),
    tags: str | None = Query(None, description="Comma separated tags"),
) -> ApiOut[list[dict[str, Any]]]:
    tag_list = [t.strip() for t in tags.split(",") if t.strip()] if tags else None
    items = await community.list_documents(category.value if category else None, tag_list)
    return ApiOut[list[dict[str, Any]]](results=[d.to_out() for d in items])


@router.get("/categories")
async def list_categories() -> ApiOut[list[str]]:
    return ApiOut[list[str]](results=await community.list_document_categories())


@router.post("", status_code=201)
async def upload_document(
    admin: CurrentAdmin,
    file: UploadFile = File(...),
    title: str = Form(...),
    description: str = Form(""),
    category: DocumentCategory = Form(DocumentCategory.OTHER),
    tags: str = Form(""),
) -> ApiOut[dict[str, Any]]:
    """Store a PDF/Office/text file and register it as a parish document."""
    policy = document_policy()
    data = await read_upload(file, policy.max_bytes)
    stored = UploadStore().save(policy, file.filename or "", file.content_type, data)

    item = await documents.create(
        {
            "title": title,
            "description": description,
            "file_name": stored.original_name,
            "file_url": stored.url,
            "category": category,
            "tags": [t.strip() for t in tags.split(",") if t.strip()],
        }
    )
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.put("/{document_id}")
async def update_document(
    document_id: str, params: DocumentUpdate, admin: CurrentAdmin
) -> ApiOut[dict[str, Any]]:
    item = await documents.update(document_id, params.model_dump(exclude_unset=True))
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.delete("/{document_id}")
async def delete_document(document_id: str, admin: CurrentAdmin) -> ApiOut[MessageOut]:
    await documents.delete(document_id)
    return ApiOut[MessageOut](results=MessageOut(message="Document deleted successfully"))
