"""
Database module - MongoDB connections and database definitions.
"""
from catalog.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
    get_catalog_database,
    get_auth_database,
)
from catalog.database.databases import auth_db, catalog_db

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
    "get_catalog_database",
    "get_auth_database",
    "auth_db",
    "catalog_db",
]
