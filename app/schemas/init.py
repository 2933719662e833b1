"""Beanie initialization for ODM."""

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.shared.storage.mongo import get_mongo_client

from . import DOCUMENT_MODELS

PARISH_MONGO_LABEL = "parish_primary"


async def init_beanie_odm(database: AsyncIOMotorDatabase) -> None:
    """Initialize Beanie ODM with all document models."""
    await init_beanie(
        database=database,  # type: ignore[arg-type]
        document_models=DOCUMENT_MODELS,
    )


async def init_schema() -> None:
    mongo_client = get_mongo_client(PARISH_MONGO_LABEL)
    await init_beanie_odm(mongo_client.get_default_database("church_site"))


__all__ = ["PARISH_MONGO_LABEL", "init_beanie_odm", "init_schema"]
