"""
Field management inside a schema document.

Fields live in the parent schema's ``fields`` array and are never stored on
their own. Every operation loads the whole schema, locates the field by id
in memory, mutates the list and writes the whole schema back.
"""
import logging
from typing import Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from catalog.core.exceptions import NotFoundError
from catalog.database.databases.catalog_db import Collections
from catalog.models.model_schema import ModelSchema
from catalog.schemas.field import FieldCreate, FieldUpdate
from catalog.services.base import load_by_id, store_step, utcnow

logger = logging.getLogger(__name__)

SCHEMA_NOT_FOUND = "Schema not found."
FIELD_NOT_FOUND = "Field not found."


def new_field_document(request: FieldCreate) -> dict:
    """Build a stored field with a fresh id; client ids are never kept."""
    return {"_id": ObjectId(), **request.model_dump()}


def _index_of(fields: list[dict], field_id: str) -> Optional[int]:
    for index, field in enumerate(fields):
        if str(field.get("_id")) == field_id:
            return index
    return None


class FieldService:
    """Add, update and remove fields of a schema."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.schemas = db[Collections.SCHEMAS]

    async def add_field(self, schema_id: str, request: FieldCreate) -> ModelSchema:
        """Append a field at the end of the schema's field list."""
        doc = await load_by_id(self.schemas, schema_id, SCHEMA_NOT_FOUND)

        field_doc = new_field_document(request)
        doc.setdefault("fields", []).append(field_doc)
        logger.debug("Adding field %s (%r) to schema %s", field_doc["_id"], request.name, schema_id)

        return await self._save(doc)

    async def update_field(
        self, schema_id: str, field_id: str, request: FieldUpdate
    ) -> ModelSchema:
        """
        Shallow-merge the supplied keys onto an existing field, in place.

        A ``null`` constraints or description clears it to an empty string.
        """
        doc = await load_by_id(self.schemas, schema_id, SCHEMA_NOT_FOUND)

        fields = doc.get("fields", [])
        index = _index_of(fields, field_id)
        if index is None:
            raise NotFoundError(FIELD_NOT_FOUND)

        fields[index].update(request.to_patch())

        return await self._save(doc)

    async def remove_field(self, schema_id: str, field_id: str) -> ModelSchema:
        """Remove one field, keeping the order of the others."""
        doc = await load_by_id(self.schemas, schema_id, SCHEMA_NOT_FOUND)

        fields = doc.get("fields", [])
        index = _index_of(fields, field_id)
        if index is None:
            # Nothing is written, the stored array stays exactly as it was
            raise NotFoundError(FIELD_NOT_FOUND)

        del fields[index]
        logger.debug("Removed field %s from schema %s", field_id, schema_id)

        return await self._save(doc)

    async def _save(self, doc: dict) -> ModelSchema:
        """Write the whole schema document back."""
        doc["updated_at"] = utcnow()
        async with store_step("save schema"):
            result = await self.schemas.replace_one({"_id": doc["_id"]}, doc)

        if result.matched_count == 0:
            raise NotFoundError(SCHEMA_NOT_FOUND)

        return ModelSchema.from_document(doc)
