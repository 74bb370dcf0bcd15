"""
Store access helpers shared by the catalog services.
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

from catalog.core.exceptions import ConflictError, NotFoundError, StoreFailureError

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """Return the ObjectId for a path/body id, or None if it is malformed."""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


@asynccontextmanager
async def store_step(step: str, conflict_message: str | None = None):
    """
    Run one store call as a named step.

    A unique-index violation surfaces as ConflictError; any other driver
    error aborts the caller with StoreFailureError naming the step.
    """
    try:
        yield
    except DuplicateKeyError as e:
        logger.info("Unique index rejected write during %s: %s", step, e)
        raise ConflictError(conflict_message) from e
    except PyMongoError as e:
        logger.error("Store failure during %s: %s", step, e)
        raise StoreFailureError(step) from e


async def load_by_id(
    collection: AsyncIOMotorCollection,
    raw_id: Any,
    not_found_message: str,
) -> dict:
    """Fetch a document by id or raise NotFoundError."""
    object_id = parse_object_id(raw_id)
    if object_id is None:
        raise NotFoundError(not_found_message)

    async with store_step(f"load {collection.name}"):
        doc = await collection.find_one({"_id": object_id})

    if doc is None:
        raise NotFoundError(not_found_message)
    return doc
