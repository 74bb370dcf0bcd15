"""
Module request schemas.
"""
from typing import Optional

from pydantic import Field

from catalog.models.base import CamelModel


class ModuleCreate(CamelModel):
    """Create module request."""
    service_id: Optional[str] = Field(None, description="Owning service ID")
    name: str = Field(..., min_length=1, max_length=100, description="Module name")
    description: Optional[str] = Field(None, max_length=1000, description="Module description")


class ModuleUpdate(CamelModel):
    """Rename/update module request. A new name is propagated to endpoints and schemas."""
    name: Optional[str] = Field(None, min_length=1, max_length=100, description="Module name")
    description: Optional[str] = Field(None, max_length=1000, description="Module description")
