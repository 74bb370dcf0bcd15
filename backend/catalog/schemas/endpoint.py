"""
Endpoint request schemas.
"""
from typing import Optional

from pydantic import Field

from catalog.models.base import CamelModel
from catalog.models.endpoint import HttpMethod, ParamField, ResponseExample


class EndpointCreate(CamelModel):
    """Create endpoint request."""
    service_id: Optional[str] = Field(None, description="Owning service ID")
    module: str = Field(..., min_length=1, description="Name of an existing module")
    method: HttpMethod
    path: str = Field(..., min_length=1)
    description: str = ""
    auth_required: bool = False
    path_params: Optional[list[ParamField]] = None
    headers: Optional[list[ParamField]] = None
    query_params: Optional[list[ParamField]] = None
    body_params: Optional[list[ParamField]] = None
    body_example: Optional[str] = None
    success_responses: Optional[list[ResponseExample]] = None
    error_responses: Optional[list[ResponseExample]] = None


class EndpointUpdate(CamelModel):
    """Update endpoint request; only supplied keys change."""
    module: Optional[str] = Field(None, min_length=1)
    method: Optional[HttpMethod] = None
    path: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    auth_required: Optional[bool] = None
    path_params: Optional[list[ParamField]] = None
    headers: Optional[list[ParamField]] = None
    query_params: Optional[list[ParamField]] = None
    body_params: Optional[list[ParamField]] = None
    body_example: Optional[str] = None
    success_responses: Optional[list[ResponseExample]] = None
    error_responses: Optional[list[ResponseExample]] = None
