"""
Index bootstrap run on application startup.
"""
from motor.motor_asyncio import AsyncIOMotorClient

from catalog.config import get_settings
from catalog.database.databases import auth_db, catalog_db


async def create_indexes(client: AsyncIOMotorClient) -> None:
    """Create necessary indexes for all databases."""
    settings = get_settings()

    # Auth DB indexes
    users = client[settings.auth_db_name][auth_db.Collections.USERS]
    await users.create_index("email", unique=True)

    # Catalog DB indexes
    await catalog_db.create_catalog_indexes(client[settings.catalog_db_name])
