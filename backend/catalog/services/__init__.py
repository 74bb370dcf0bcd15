"""
Service layer for business logic.
"""
from catalog.services.uniqueness import UniquenessValidator
from catalog.services.integrity_service import IntegrityCoordinator
from catalog.services.field_service import FieldService
from catalog.services.service_registry import ServiceRegistry
from catalog.services.module_service import ModuleService
from catalog.services.schema_service import SchemaService
from catalog.services.endpoint_service import EndpointService

__all__ = [
    "UniquenessValidator",
    "IntegrityCoordinator",
    "FieldService",
    "ServiceRegistry",
    "ModuleService",
    "SchemaService",
    "EndpointService",
]
