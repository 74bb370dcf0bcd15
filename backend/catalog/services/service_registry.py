"""
Service create/update. Deletion cascades and lives in the integrity coordinator.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from catalog.core.exceptions import NotFoundError
from catalog.database.databases.catalog_db import Collections
from catalog.models.service import Service
from catalog.schemas.service import ServiceCreate, ServiceUpdate
from catalog.services.base import load_by_id, store_step, utcnow
from catalog.services.integrity_service import SERVICE_NOT_FOUND
from catalog.services.uniqueness import SERVICE_NAME_TAKEN, UniquenessValidator

logger = logging.getLogger(__name__)


class ServiceRegistry:
    """Service for creating and updating catalog services."""

    def __init__(self, db: AsyncIOMotorDatabase, validator: UniquenessValidator | None = None):
        self.services = db[Collections.SERVICES]
        self.validator = validator or UniquenessValidator(db)

    async def create_service(self, request: ServiceCreate) -> Service:
        """Create a service with a unique name."""
        await self.validator.ensure_service_name(request.name)

        now = utcnow()
        service_doc = {
            "name": request.name,
            "description": request.description,
            "created_at": now,
            "updated_at": now,
        }
        async with store_step("insert service", conflict_message=SERVICE_NAME_TAKEN):
            result = await self.services.insert_one(service_doc)
        service_doc["_id"] = result.inserted_id

        logger.info("Created service %s (%r)", result.inserted_id, request.name)
        return Service.from_document(service_doc)

    async def update_service(self, service_id: str, request: ServiceUpdate) -> Service:
        """Update a service; a new name must not be used by another service."""
        doc = await load_by_id(self.services, service_id, SERVICE_NOT_FOUND)
        update_data = {k: v for k, v in request.model_dump().items() if v is not None}

        if not update_data:
            return Service.from_document(doc)

        if update_data.get("name", doc["name"]) != doc["name"]:
            await self.validator.ensure_service_name(update_data["name"], exclude_id=doc["_id"])

        update_data["updated_at"] = utcnow()
        async with store_step("update service", conflict_message=SERVICE_NAME_TAKEN):
            result = await self.services.find_one_and_update(
                {"_id": doc["_id"]},
                {"$set": update_data},
                return_document=ReturnDocument.AFTER,
            )

        if result is None:
            raise NotFoundError(SERVICE_NOT_FOUND)
        return Service.from_document(result)
