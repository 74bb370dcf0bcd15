"""
Pydantic models for database documents and data structures.
"""
from catalog.models.user import User, UserRole, UserStatus
from catalog.models.service import Service
from catalog.models.module import Module
from catalog.models.endpoint import Endpoint, HttpMethod, ParamField, ParamType, ResponseExample
from catalog.models.model_schema import ModelSchema, SchemaField

__all__ = [
    "User",
    "UserRole",
    "UserStatus",
    "Service",
    "Module",
    "Endpoint",
    "HttpMethod",
    "ParamField",
    "ParamType",
    "ResponseExample",
    "ModelSchema",
    "SchemaField",
]
