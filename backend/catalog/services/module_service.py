"""
Module listing and creation. Renames and deletes cascade and live in the
integrity coordinator.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from catalog.core.exceptions import ValidationFailedError
from catalog.database.databases.catalog_db import Collections
from catalog.models.module import Module
from catalog.schemas.module import ModuleCreate
from catalog.services.base import store_step, utcnow
from catalog.services.integrity_service import ensure_service_exists
from catalog.services.uniqueness import MODULE_NAME_TAKEN, UniquenessValidator

logger = logging.getLogger(__name__)


class ModuleService:
    """Service for listing and creating modules."""

    def __init__(self, db: AsyncIOMotorDatabase, validator: UniquenessValidator | None = None):
        self.db = db
        self.modules = db[Collections.MODULES]
        self.validator = validator or UniquenessValidator(db)

    async def list_modules(self, service_id: str | None) -> list[Module]:
        """List the modules of a service, sorted by name."""
        if not service_id:
            raise ValidationFailedError("Service ID is required.")

        async with store_step("list modules"):
            cursor = self.modules.find({"service_id": service_id}).sort("name", 1)
            modules = await cursor.to_list(length=None)

        return [Module.from_document(m) for m in modules]

    async def create_module(self, request: ModuleCreate) -> Module:
        """Create a module in an existing service; module names are globally unique."""
        service_id = await ensure_service_exists(self.db, request.service_id)
        await self.validator.ensure_module_name(request.name)

        now = utcnow()
        module_doc = {
            "service_id": service_id,
            "name": request.name,
            "description": request.description,
            "created_at": now,
            "updated_at": now,
        }
        async with store_step("insert module", conflict_message=MODULE_NAME_TAKEN):
            result = await self.modules.insert_one(module_doc)
        module_doc["_id"] = result.inserted_id

        logger.info("Created module %s (%r) in service %s", result.inserted_id, request.name, service_id)
        return Module.from_document(module_doc)
