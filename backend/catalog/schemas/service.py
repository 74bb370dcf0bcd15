"""
Service request schemas.
"""
from typing import Optional

from pydantic import Field

from catalog.models.base import CamelModel


class ServiceCreate(CamelModel):
    """Create service request."""
    name: str = Field(..., min_length=1, max_length=100, description="Unique service name")
    description: Optional[str] = Field(None, max_length=1000, description="Service description")


class ServiceUpdate(CamelModel):
    """Update service request."""
    name: Optional[str] = Field(None, min_length=1, max_length=100, description="Unique service name")
    description: Optional[str] = Field(None, max_length=1000, description="Service description")
