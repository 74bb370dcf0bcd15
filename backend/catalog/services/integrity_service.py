"""
Cascading referential integrity for modules and services.

Endpoints and schemas reference their module by name, so renaming or
deleting a module has to be carried over to them, and deleting a service
has to remove everything scoped to it. The store offers no transaction
across collections; every operation here is an ordered sequence of writes:

- rename: validate -> propagate to dependents -> persist the module
- delete: remove dependents -> remove the parent

Dependents are always handled before the parent, so an interrupted rename
leaves them on a name that still exists (the old one) and an interrupted
delete never leaves them pointing at a removed module. A failing step aborts
the rest with StoreFailureError; completed steps are not rolled back.
"""
import logging
from typing import Any

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from catalog.core.exceptions import NotFoundError, ValidationFailedError
from catalog.database.databases.catalog_db import Collections
from catalog.models.module import Module
from catalog.schemas.module import ModuleUpdate
from catalog.services.base import load_by_id, parse_object_id, store_step, utcnow
from catalog.services.uniqueness import MODULE_NAME_TAKEN, UniquenessValidator

logger = logging.getLogger(__name__)

MODULE_NOT_FOUND = "Module not found."
SERVICE_NOT_FOUND = "Service not found."


async def ensure_service_exists(db: AsyncIOMotorDatabase, service_id: Any) -> str:
    """Validate a service_id on a scoped create and return it normalized."""
    if not service_id:
        raise ValidationFailedError("Service ID is required.")

    object_id = parse_object_id(service_id)
    if object_id is not None:
        async with store_step("check service exists"):
            service = await db[Collections.SERVICES].find_one({"_id": object_id}, {"_id": 1})
        if service is not None:
            return str(object_id)

    raise ValidationFailedError(f"Service '{service_id}' does not exist.")


async def ensure_module_reference(
    db: AsyncIOMotorDatabase, service_id: str, module_name: str
) -> None:
    """Reject an endpoint/schema write whose module name matches no module of its service."""
    async with store_step("check module reference"):
        module = await db[Collections.MODULES].find_one(
            {"name": module_name, "service_id": service_id}, {"_id": 1}
        )
    if module is None:
        raise ValidationFailedError(
            f"Module '{module_name}' does not exist in this service."
        )


class IntegrityCoordinator:
    """Module rename/delete and service delete with cascades."""

    def __init__(self, db: AsyncIOMotorDatabase, validator: UniquenessValidator | None = None):
        self.db = db
        self.modules = db[Collections.MODULES]
        self.services = db[Collections.SERVICES]
        self.validator = validator or UniquenessValidator(db)

    # ==================== Module ====================

    async def rename_module(self, module_id: str, request: ModuleUpdate) -> Module:
        """
        Update a module, carrying a new name over to its endpoints and schemas.

        Renaming to the current name is a no-op for dependents; other fields
        in the request are still applied.

        Raises:
            NotFoundError: Module does not exist
            ConflictError: Another module already uses the new name
            StoreFailureError: A write failed; earlier steps stay applied
        """
        doc = await load_by_id(self.modules, module_id, MODULE_NOT_FOUND)
        update_data = {k: v for k, v in request.model_dump().items() if v is not None}

        old_name = doc["name"]
        new_name = update_data.get("name", old_name)

        if new_name == old_name:
            update_data.pop("name", None)
        else:
            await self.validator.ensure_module_name(new_name, exclude_id=doc["_id"])
            logger.info("Renaming module %s from %r to %r", module_id, old_name, new_name)
            await self._propagate_module_name(old_name, new_name)

        if not update_data:
            return Module.from_document(doc)

        update_data["updated_at"] = utcnow()
        async with store_step("update module", conflict_message=MODULE_NAME_TAKEN):
            result = await self.modules.find_one_and_update(
                {"_id": doc["_id"]},
                {"$set": update_data},
                return_document=ReturnDocument.AFTER,
            )

        if result is None:
            # Deleted by a concurrent request after propagation
            raise NotFoundError(MODULE_NOT_FOUND)

        return Module.from_document(result)

    async def _propagate_module_name(self, old_name: str, new_name: str) -> None:
        """Bulk-rewrite the module reference in every dependent collection."""
        for collection_name in Collections.MODULE_DEPENDENTS:
            async with store_step(f"propagate module rename to {collection_name}"):
                result = await self.db[collection_name].update_many(
                    {"module": old_name},
                    {"$set": {"module": new_name, "updated_at": utcnow()}},
                )
            logger.debug(
                "Moved %d %s from module %r to %r",
                result.modified_count, collection_name, old_name, new_name,
            )

    async def delete_module(self, module_id: str) -> dict[str, int]:
        """
        Delete a module after its endpoints and schemas.

        Returns:
            Number of deleted documents per collection

        Raises:
            NotFoundError: Module does not exist
            StoreFailureError: A delete failed; the module is kept if dependents remain
        """
        doc = await load_by_id(self.modules, module_id, MODULE_NOT_FOUND)
        name = doc["name"]
        deleted: dict[str, int] = {}

        logger.info("Deleting module %s (%r) with its endpoints and schemas", module_id, name)
        for collection_name in Collections.MODULE_DEPENDENTS:
            async with store_step(f"delete {collection_name} of module"):
                result = await self.db[collection_name].delete_many({"module": name})
            deleted[collection_name] = result.deleted_count

        async with store_step("delete module"):
            result = await self.modules.delete_one({"_id": doc["_id"]})
        deleted[Collections.MODULES] = result.deleted_count

        logger.info("Deleted module %s: %s", module_id, deleted)
        return deleted

    # ==================== Service ====================

    async def delete_service(self, service_id: str) -> dict[str, int]:
        """
        Delete a service after everything scoped to it.

        Returns:
            Number of deleted documents per collection

        Raises:
            NotFoundError: Service does not exist
            StoreFailureError: A delete failed; the service is kept
        """
        doc = await load_by_id(self.services, service_id, SERVICE_NOT_FOUND)
        scope = {"service_id": str(doc["_id"])}
        deleted: dict[str, int] = {}

        logger.info("Deleting service %s (%r) and all related data", service_id, doc["name"])
        # Order is free here: name references only matter between records that all go
        for collection_name in Collections.SERVICE_SCOPED:
            async with store_step(f"delete {collection_name} of service"):
                result = await self.db[collection_name].delete_many(scope)
            deleted[collection_name] = result.deleted_count

        async with store_step("delete service"):
            result = await self.services.delete_one({"_id": doc["_id"]})
        deleted[Collections.SERVICES] = result.deleted_count

        logger.info("Deleted service %s: %s", service_id, deleted)
        return deleted
