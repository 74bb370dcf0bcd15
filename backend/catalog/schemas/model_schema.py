"""
Data schema request schemas.
"""
from typing import Optional

from pydantic import Field

from catalog.models.base import CamelModel
from catalog.schemas.field import FieldCreate


class SchemaCreate(CamelModel):
    """Create schema request."""
    service_id: Optional[str] = Field(None, description="Owning service ID")
    module: str = Field(..., min_length=1, description="Name of an existing module")
    name: str = Field(..., min_length=1, max_length=100, description="Schema name")
    description: Optional[str] = Field(None, description="Schema description")
    fields: list[FieldCreate] = Field(default_factory=list, description="Initial fields, in order")


class SchemaUpdate(CamelModel):
    """
    Update schema request.

    Fields are managed through the nested field routes only, so a ``fields``
    key in the body is ignored.
    """
    module: Optional[str] = Field(None, min_length=1, description="Name of an existing module")
    name: Optional[str] = Field(None, min_length=1, max_length=100, description="Schema name")
    description: Optional[str] = Field(None, description="Schema description")
