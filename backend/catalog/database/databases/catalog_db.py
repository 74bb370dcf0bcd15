"""
Catalog database configuration.
Stores services and everything documented under them.

Structure:
- services: Root of a tenant's catalog
- modules: Grouping unit, referenced by name from endpoints and schemas
- endpoints: Documented endpoints (module stored as denormalized name)
- schemas: Data schemas with an embedded, ordered fields array
- error_codes / overview_cards: Service-scoped, removed with their service
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class Collections:
    """Collection names in catalog_db."""
    SERVICES = "services"
    MODULES = "modules"
    ENDPOINTS = "endpoints"
    SCHEMAS = "schemas"
    ERROR_CODES = "error_codes"
    OVERVIEW_CARDS = "overview_cards"

    # Collections holding a service_id, removed when their service is deleted
    SERVICE_SCOPED = (MODULES, ENDPOINTS, SCHEMAS, ERROR_CODES, OVERVIEW_CARDS)

    # Collections referencing a module by its name
    MODULE_DEPENDENTS = (ENDPOINTS, SCHEMAS)

    # Index definitions for each collection
    INDEXES = {
        "services": [
            {"keys": [("name", 1)], "unique": True},
        ],
        "modules": [
            {"keys": [("name", 1)], "unique": True},
            {"keys": [("service_id", 1)]},
        ],
        "endpoints": [
            {"keys": [("service_id", 1)]},
            {"keys": [("module", 1)]},
        ],
        "schemas": [
            {"keys": [("service_id", 1), ("name", 1)], "unique": True},
            {"keys": [("module", 1)]},
        ],
        "error_codes": [
            {"keys": [("service_id", 1)]},
        ],
        "overview_cards": [
            {"keys": [("service_id", 1)]},
        ],
    }


async def create_catalog_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create indexes for catalog database collections."""
    for collection_name, indexes in Collections.INDEXES.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            try:
                await collection.create_index(keys, **kwargs)
            except PyMongoError as e:
                # Existing data may violate a unique index; the validator still guards writes
                logger.warning("Could not create index %s on %s: %s", keys, collection_name, e)
