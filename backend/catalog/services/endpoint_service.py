"""
Endpoint CRUD. Every endpoint must reference an existing module of its service.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from catalog.core.exceptions import NotFoundError, ValidationFailedError
from catalog.database.databases.catalog_db import Collections
from catalog.models.endpoint import Endpoint
from catalog.schemas.endpoint import EndpointCreate, EndpointUpdate
from catalog.services.base import load_by_id, store_step, utcnow
from catalog.services.integrity_service import ensure_module_reference

logger = logging.getLogger(__name__)

ENDPOINT_NOT_FOUND = "Endpoint not found."


class EndpointService:
    """Service for endpoint operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.endpoints = db[Collections.ENDPOINTS]

    async def list_endpoints(self, service_id: str | None) -> list[Endpoint]:
        """List the endpoints of a service, grouped by module then path."""
        if not service_id:
            raise ValidationFailedError("Service ID is required.")

        async with store_step("list endpoints"):
            cursor = self.endpoints.find({"service_id": service_id}).sort(
                [("module", 1), ("path", 1)]
            )
            endpoints = await cursor.to_list(length=None)

        return [Endpoint.from_document(e) for e in endpoints]

    async def get_endpoint(self, endpoint_id: str) -> Endpoint:
        doc = await load_by_id(self.endpoints, endpoint_id, ENDPOINT_NOT_FOUND)
        return Endpoint.from_document(doc)

    async def create_endpoint(self, request: EndpointCreate) -> Endpoint:
        if not request.service_id:
            raise ValidationFailedError("Service ID is required to create an endpoint.")

        await ensure_module_reference(self.db, request.service_id, request.module)

        now = utcnow()
        endpoint_doc = {
            **request.model_dump(mode="json", exclude_none=True),
            "created_at": now,
            "updated_at": now,
        }
        async with store_step("insert endpoint"):
            result = await self.endpoints.insert_one(endpoint_doc)
        endpoint_doc["_id"] = result.inserted_id

        logger.info(
            "Created endpoint %s %s %s in module %r",
            result.inserted_id, request.method.value, request.path, request.module,
        )
        return Endpoint.from_document(endpoint_doc)

    async def update_endpoint(self, endpoint_id: str, request: EndpointUpdate) -> Endpoint:
        doc = await load_by_id(self.endpoints, endpoint_id, ENDPOINT_NOT_FOUND)
        update_data = request.model_dump(mode="json", exclude_none=True)

        if not update_data:
            return Endpoint.from_document(doc)

        if update_data.get("module", doc["module"]) != doc["module"]:
            await ensure_module_reference(self.db, doc["service_id"], update_data["module"])

        update_data["updated_at"] = utcnow()
        async with store_step("update endpoint"):
            result = await self.endpoints.find_one_and_update(
                {"_id": doc["_id"]},
                {"$set": update_data},
                return_document=ReturnDocument.AFTER,
            )

        if result is None:
            raise NotFoundError(ENDPOINT_NOT_FOUND)
        return Endpoint.from_document(result)

    async def delete_endpoint(self, endpoint_id: str) -> None:
        doc = await load_by_id(self.endpoints, endpoint_id, ENDPOINT_NOT_FOUND)

        async with store_step("delete endpoint"):
            result = await self.endpoints.delete_one({"_id": doc["_id"]})

        if result.deleted_count == 0:
            raise NotFoundError(ENDPOINT_NOT_FOUND)
