"""
Request and response schemas for API endpoints.
"""
from catalog.schemas.common import DataResponse, ListResponse, MessageResponse
from catalog.schemas.service import ServiceCreate, ServiceUpdate
from catalog.schemas.module import ModuleCreate, ModuleUpdate
from catalog.schemas.field import FieldCreate, FieldUpdate
from catalog.schemas.model_schema import SchemaCreate, SchemaUpdate
from catalog.schemas.endpoint import EndpointCreate, EndpointUpdate

__all__ = [
    # Envelope
    "DataResponse",
    "ListResponse",
    "MessageResponse",
    # Service
    "ServiceCreate",
    "ServiceUpdate",
    # Module
    "ModuleCreate",
    "ModuleUpdate",
    # Field
    "FieldCreate",
    "FieldUpdate",
    # Schema
    "SchemaCreate",
    "SchemaUpdate",
    # Endpoint
    "EndpointCreate",
    "EndpointUpdate",
]
