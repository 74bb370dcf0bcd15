"""
Data schema model for catalog database.

A schema owns an ordered list of fields stored inside the schema document.
Fields have no collection of their own: their id is only meaningful within
the parent's ``fields`` array, and their position is display order.
"""
from typing import Any, Optional

from pydantic import Field

from catalog.models.base import CamelModel, CatalogDocument


class SchemaField(CamelModel):
    """A field embedded in a schema's ``fields`` array."""
    id: str = Field(..., description="Field ID, unique within its schema")
    name: str
    type: str
    required: bool = False
    constraints: str = ""
    description: str = ""

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "SchemaField":
        data = {k: v for k, v in doc.items() if k != "_id"}
        data["id"] = str(doc["_id"])
        return cls.model_validate(data)


class ModelSchema(CatalogDocument):
    """
    Schema document model for MongoDB catalog_db.schemas collection.
    """
    service_id: str = Field(..., description="Owning service ID")
    module: str = Field(..., description="Name of the module grouping this schema")
    name: str = Field(..., description="Schema name, unique within its service")
    description: Optional[str] = Field(None, description="Optional description")
    fields: list[SchemaField] = Field(default_factory=list, description="Ordered fields")

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "ModelSchema":
        data = {k: v for k, v in doc.items() if k not in ("_id", "fields")}
        data["id"] = str(doc["_id"])
        data["fields"] = [SchemaField.from_document(f) for f in doc.get("fields", [])]
        return cls.model_validate(data)
