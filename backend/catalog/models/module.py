"""
Module model for catalog database.
"""
from typing import Optional

from pydantic import Field

from catalog.models.base import CatalogDocument


class Module(CatalogDocument):
    """
    Module document model for MongoDB catalog_db.modules collection.

    Endpoints and schemas point at a module through a copy of its ``name``,
    not its id, so renames and deletes must be propagated to them.
    """
    service_id: str = Field(..., description="Owning service ID")
    name: str = Field(..., description="Module name, unique across all modules")
    description: Optional[str] = Field(None, description="Optional description")
