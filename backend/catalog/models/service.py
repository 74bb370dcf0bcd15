"""
Service model for catalog database.
"""
from typing import Optional

from pydantic import Field

from catalog.models.base import CatalogDocument


class Service(CatalogDocument):
    """
    Service document model for MongoDB catalog_db.services collection.
    Root of a tenant's catalog; its name is unique across all services.
    """
    name: str = Field(..., description="Unique service name")
    description: Optional[str] = Field(None, description="Optional description")
