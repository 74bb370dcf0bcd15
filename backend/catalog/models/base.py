"""
Shared base for catalog document models.
"""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase JSON. Either spelling is accepted on input."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CatalogDocument(CamelModel):
    """
    A document read from catalog_db.

    MongoDB keeps the identifier in ``_id`` as an ObjectId; models expose it
    as a string ``id``. Attributes and stored keys are snake_case; the JSON
    the API emits is camelCase (``serviceId``, ``createdAt``).
    """

    id: str = Field(..., description="MongoDB ObjectId as string")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    @classmethod
    def from_document(cls, doc: dict[str, Any]):
        """Build the model from a raw MongoDB document."""
        data = {k: v for k, v in doc.items() if k != "_id"}
        data["id"] = str(doc["_id"])
        return cls.model_validate(data)
