"""
Endpoint model for catalog database.
"""
from enum import Enum
from typing import Any, Optional

from pydantic import Field

from catalog.models.base import CamelModel, CatalogDocument


class HttpMethod(str, Enum):
    """HTTP methods an endpoint can document."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    OPTIONS = "OPTIONS"
    HEAD = "HEAD"
    CONNECT = "CONNECT"
    TRACE = "TRACE"


class ParamType(str, Enum):
    """JSON types a documented parameter can take."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"


class ParamField(CamelModel):
    """A documented parameter; object and array params nest children."""
    name: str
    type: ParamType
    required: bool = False
    description: str = ""
    example_value: str = ""
    children: Optional[list["ParamField"]] = None


class ResponseExample(CamelModel):
    """An example response for a status code."""
    code: int
    description: str
    fields: Optional[list[ParamField]] = None
    body: Any = None


class Endpoint(CatalogDocument):
    """
    Endpoint document model for MongoDB catalog_db.endpoints collection.
    """
    service_id: str = Field(..., description="Owning service ID")
    module: str = Field(..., description="Name of the module grouping this endpoint")
    method: HttpMethod = Field(..., description="HTTP method")
    path: str = Field(..., description="Request path")
    description: str = Field("", description="What the endpoint does")
    auth_required: bool = Field(False, description="Whether a token is required")
    path_params: Optional[list[ParamField]] = None
    headers: Optional[list[ParamField]] = None
    query_params: Optional[list[ParamField]] = None
    body_params: Optional[list[ParamField]] = None
    body_example: Optional[str] = None
    success_responses: Optional[list[ResponseExample]] = None
    error_responses: Optional[list[ResponseExample]] = None
