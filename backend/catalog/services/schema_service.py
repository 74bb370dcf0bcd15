"""
Data schema CRUD.

Schema names are unique per service and every schema must reference an
existing module of its service. The ``fields`` array is only changed
through FieldService, never by a schema update.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from catalog.core.exceptions import NotFoundError, ValidationFailedError
from catalog.database.databases.catalog_db import Collections
from catalog.models.model_schema import ModelSchema
from catalog.schemas.model_schema import SchemaCreate, SchemaUpdate
from catalog.services.base import load_by_id, store_step, utcnow
from catalog.services.field_service import SCHEMA_NOT_FOUND, new_field_document
from catalog.services.integrity_service import ensure_module_reference
from catalog.services.uniqueness import SCHEMA_NAME_TAKEN, UniquenessValidator

logger = logging.getLogger(__name__)


class SchemaService:
    """Service for data schema operations."""

    def __init__(self, db: AsyncIOMotorDatabase, validator: UniquenessValidator | None = None):
        self.db = db
        self.schemas = db[Collections.SCHEMAS]
        self.validator = validator or UniquenessValidator(db)

    async def list_schemas(self, service_id: str | None) -> list[ModelSchema]:
        """List the schemas of a service."""
        if not service_id:
            raise ValidationFailedError("Service ID is required.")

        async with store_step("list schemas"):
            cursor = self.schemas.find({"service_id": service_id}).sort("name", 1)
            schemas = await cursor.to_list(length=None)

        return [ModelSchema.from_document(s) for s in schemas]

    async def get_schema(self, schema_id: str) -> ModelSchema:
        doc = await load_by_id(self.schemas, schema_id, SCHEMA_NOT_FOUND)
        return ModelSchema.from_document(doc)

    async def create_schema(self, request: SchemaCreate) -> ModelSchema:
        """Create a schema; initial fields get fresh ids in the given order."""
        if not request.service_id:
            raise ValidationFailedError("Service ID is required to create a schema.")

        await ensure_module_reference(self.db, request.service_id, request.module)
        await self.validator.ensure_schema_name(request.service_id, request.name)

        now = utcnow()
        schema_doc = {
            "service_id": request.service_id,
            "module": request.module,
            "name": request.name,
            "description": request.description,
            "fields": [new_field_document(f) for f in request.fields],
            "created_at": now,
            "updated_at": now,
        }
        async with store_step("insert schema", conflict_message=SCHEMA_NAME_TAKEN):
            result = await self.schemas.insert_one(schema_doc)
        schema_doc["_id"] = result.inserted_id

        logger.info("Created schema %s (%r) in module %r", result.inserted_id, request.name, request.module)
        return ModelSchema.from_document(schema_doc)

    async def update_schema(self, schema_id: str, request: SchemaUpdate) -> ModelSchema:
        """Update name, module or description of a schema."""
        doc = await load_by_id(self.schemas, schema_id, SCHEMA_NOT_FOUND)
        update_data = {k: v for k, v in request.model_dump().items() if v is not None}

        if not update_data:
            return ModelSchema.from_document(doc)

        if update_data.get("module", doc["module"]) != doc["module"]:
            await ensure_module_reference(self.db, doc["service_id"], update_data["module"])
        if update_data.get("name", doc["name"]) != doc["name"]:
            await self.validator.ensure_schema_name(
                doc["service_id"], update_data["name"], exclude_id=doc["_id"]
            )

        update_data["updated_at"] = utcnow()
        async with store_step("update schema", conflict_message=SCHEMA_NAME_TAKEN):
            result = await self.schemas.find_one_and_update(
                {"_id": doc["_id"]},
                {"$set": update_data},
                return_document=ReturnDocument.AFTER,
            )

        if result is None:
            raise NotFoundError(SCHEMA_NOT_FOUND)
        return ModelSchema.from_document(result)

    async def delete_schema(self, schema_id: str) -> None:
        doc = await load_by_id(self.schemas, schema_id, SCHEMA_NOT_FOUND)

        async with store_step("delete schema"):
            result = await self.schemas.delete_one({"_id": doc["_id"]})

        if result.deleted_count == 0:
            raise NotFoundError(SCHEMA_NOT_FOUND)
