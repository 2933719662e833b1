"""Generic CRUD over plain parish records."""

from typing import Any, Generic, TypeVar

from beanie import PydanticObjectId
from loguru import logger
from pydantic import ValidationError

from app.domain.utils.clock import utc_now
from app.schemas.base import RecordDocument
from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

DocT = TypeVar("DocT", bound=RecordDocument)


class ResourceService(Generic[DocT]):
    """CRUD operations for one document type.

    `label` names the resource in error messages ("News not found").
    """

    def __init__(self, model: type[DocT], label: str, default_sort: list[tuple[str, int]]):
        self.model = model
        self.label = label
        self.default_sort = default_sort

    def not_found(self) -> AppError:
        return AppError(
            errcode=AppErrorCode.E_NOT_FOUND,
            errmesg=f"{self.label} not found",
            status_code=HttpStatusCode.NOT_FOUND,
        )

    async def find(self, item_id: str) -> DocT | None:
        if not PydanticObjectId.is_valid(item_id):
            return None
        return await self.model.get(PydanticObjectId(item_id))

    async def get(self, item_id: str) -> DocT:
        item = await self.find(item_id)
        if item is None:
            raise self.not_found()
        return item

    async def list(
        self,
        filters: dict[str, Any] | None = None,
        sort: list[tuple[str, int]] | None = None,
        limit: int | None = None,
    ) -> list[DocT]:
        query = self.model.find(filters or {}).sort(sort or self.default_sort)
        if limit:
            query = query.limit(limit)
        return await query.to_list()

    async def count(self, filters: dict[str, Any] | None = None) -> int:
        return await self.model.find(filters or {}).count()

    async def create(self, data: dict[str, Any]) -> DocT:
        item = self.model(**data)
        await item.insert()
        logger.info(f"{self.label} {item.id} created")
        return item

    async def update(self, item_id: str, data: dict[str, Any]) -> DocT:
        item = await self.get(item_id)
        merged = item.model_dump(exclude={"id", "revision_id"}) | data
        try:
            # Re-validate the merged record so enums and required fields hold
            validated = self.model.model_validate(merged)
        except ValidationError as e:
            raise AppError(
                errcode=AppErrorCode.E_INVALID_PARAMS,
                errmesg=str(e),
                status_code=HttpStatusCode.UNPROCESSABLE_ENTITY,
            ) from e

        for field in data:
            setattr(item, field, getattr(validated, field))
        item.updated_at = utc_now()
        await item.save()
        return item

    async def delete(self, item_id: str) -> None:
        item = await self.get(item_id)
        await item.delete()
        logger.info(f"{self.label} {item_id} deleted")
