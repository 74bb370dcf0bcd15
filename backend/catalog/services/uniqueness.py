"""
Name-uniqueness checks for services, modules and schemas.

The check and the write that follows it are not atomic. Two concurrent
requests can both pass validation; the unique indexes created at startup
are what finally rejects the second write.
"""
from typing import Any, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from catalog.core.exceptions import ConflictError
from catalog.database.databases.catalog_db import Collections
from catalog.services.base import store_step

SERVICE_NAME_TAKEN = "A service with this name already exists."
MODULE_NAME_TAKEN = "A module with this name already exists."
SCHEMA_NAME_TAKEN = "A schema with this name already exists in this service."


class UniquenessValidator:
    """Read-only guard run before creates and renames."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    async def ensure_unique(
        self,
        collection: str,
        scope_filter: dict[str, Any],
        candidate_name: str,
        exclude_id: Optional[ObjectId] = None,
        message: Optional[str] = None,
    ) -> None:
        """
        Raise ConflictError if another record in scope already uses the name.

        Args:
            collection: Collection to search
            scope_filter: Extra filter narrowing the scope (e.g. service_id)
            candidate_name: Proposed name
            exclude_id: Id of the record being updated, ignored by the check
            message: Conflict message override
        """
        query = {**scope_filter, "name": candidate_name}
        if exclude_id is not None:
            query["_id"] = {"$ne": exclude_id}

        async with store_step(f"check {collection} name"):
            existing = await self.db[collection].find_one(query, {"_id": 1})

        if existing is not None:
            raise ConflictError(message)

    async def ensure_service_name(self, name: str, exclude_id: Optional[ObjectId] = None) -> None:
        await self.ensure_unique(
            Collections.SERVICES, {}, name, exclude_id, SERVICE_NAME_TAKEN
        )

    async def ensure_module_name(self, name: str, exclude_id: Optional[ObjectId] = None) -> None:
        # Global: endpoints and schemas match modules by name with no service qualifier
        await self.ensure_unique(
            Collections.MODULES, {}, name, exclude_id, MODULE_NAME_TAKEN
        )

    async def ensure_schema_name(
        self, service_id: str, name: str, exclude_id: Optional[ObjectId] = None
    ) -> None:
        await self.ensure_unique(
            Collections.SCHEMAS, {"service_id": service_id}, name, exclude_id, SCHEMA_NAME_TAKEN
        )
