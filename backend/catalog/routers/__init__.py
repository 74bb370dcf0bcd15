"""
API Routers module.
"""
from catalog.routers import health, services, modules, schemas, endpoints

__all__ = ["health", "services", "modules", "schemas", "endpoints"]
