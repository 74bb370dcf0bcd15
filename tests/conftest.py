"""
Global test fixtures for the API Documentation Catalog.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor) with the production indexes
- A seeded catalog (service, module, endpoint, schema with fields)
- Users and tokens for the privileged routes
"""

import sys
from datetime import datetime, timezone, timedelta
from pathlib import Path

import pytest
import pytest_asyncio
from bson import ObjectId
from jose import jwt

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    from mongomock_motor import AsyncMongoMockClient
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_catalog_db(mock_async_mongo_client):
    """Provide mock catalog_db with the same indexes as the real app."""
    from catalog.database.databases.catalog_db import create_catalog_indexes

    db = mock_async_mongo_client["catalog_db"]
    await create_catalog_indexes(db)
    yield db


@pytest_asyncio.fixture
async def mock_auth_db(mock_async_mongo_client):
    """Provide mock auth_db database."""
    db = mock_async_mongo_client["auth_db"]
    await db.users.create_index("email", unique=True)
    yield db


# =============================================================================
# Catalog Fixtures
# =============================================================================

def make_field(name: str, field_type: str = "string", **overrides) -> dict:
    """A stored schema field document."""
    field = {
        "_id": ObjectId(),
        "name": name,
        "type": field_type,
        "required": False,
        "constraints": "",
        "description": "",
    }
    field.update(overrides)
    return field


@pytest_asyncio.fixture
async def seeded_catalog(mock_catalog_db) -> dict:
    """
    A small catalog:

    Service "Payments API"
      Module "Billing"
        Endpoint GET /invoices
        Schema "Invoice" with fields id, amount
      Module "Accounts"
        Endpoint POST /accounts
    ErrorCode 404 and one OverviewCard on the same service.
    """
    now = datetime.now(timezone.utc)
    service_id = ObjectId()
    service_key = str(service_id)

    await mock_catalog_db.services.insert_one({
        "_id": service_id,
        "name": "Payments API",
        "description": "Payment processing",
        "created_at": now,
        "updated_at": now,
    })

    billing = await mock_catalog_db.modules.insert_one({
        "service_id": service_key, "name": "Billing", "description": "Invoices",
        "created_at": now, "updated_at": now,
    })
    accounts = await mock_catalog_db.modules.insert_one({
        "service_id": service_key, "name": "Accounts", "description": None,
        "created_at": now, "updated_at": now,
    })

    invoices_endpoint = await mock_catalog_db.endpoints.insert_one({
        "service_id": service_key, "module": "Billing", "method": "GET",
        "path": "/invoices", "description": "List invoices", "auth_required": True,
        "created_at": now, "updated_at": now,
    })
    accounts_endpoint = await mock_catalog_db.endpoints.insert_one({
        "service_id": service_key, "module": "Accounts", "method": "POST",
        "path": "/accounts", "description": "Open an account", "auth_required": True,
        "created_at": now, "updated_at": now,
    })

    fields = [
        make_field("id", "ObjectId", required=True, description="Invoice id"),
        make_field("amount", "number", required=True, constraints="> 0"),
    ]
    invoice_schema = await mock_catalog_db.schemas.insert_one({
        "service_id": service_key, "module": "Billing", "name": "Invoice",
        "description": "An issued invoice", "fields": fields,
        "created_at": now, "updated_at": now,
    })

    await mock_catalog_db.error_codes.insert_one({
        "service_id": service_key, "code": 404, "meaning": "Not Found", "context": "Unknown invoice",
    })
    await mock_catalog_db.overview_cards.insert_one({
        "service_id": service_key, "title": "Getting started", "content": "Authenticate first",
    })

    return {
        "service_id": service_key,
        "billing_id": str(billing.inserted_id),
        "accounts_id": str(accounts.inserted_id),
        "invoices_endpoint_id": str(invoices_endpoint.inserted_id),
        "accounts_endpoint_id": str(accounts_endpoint.inserted_id),
        "invoice_schema_id": str(invoice_schema.inserted_id),
        "field_ids": [str(f["_id"]) for f in fields],
    }


# =============================================================================
# User & Token Fixtures
# =============================================================================

def make_token(user_id: str, roles: list[str], expires_in: timedelta = timedelta(minutes=30)) -> str:
    """Sign a token the way the authentication service does."""
    from catalog.config import get_settings

    settings = get_settings()
    now = datetime.now(timezone.utc)
    payload = {"sub": user_id, "roles": roles, "exp": now + expires_in, "iat": now}
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


@pytest_asyncio.fixture
async def backend_user(mock_auth_db) -> dict:
    """An active user with the privileged role."""
    doc = {
        "email": "backend@example.com",
        "name": "Backend Dev",
        "roles": ["backend"],
        "status": "active",
    }
    result = await mock_auth_db.users.insert_one(doc)
    return {**doc, "id": str(result.inserted_id)}


@pytest_asyncio.fixture
async def frontend_user(mock_auth_db) -> dict:
    """An active user without the privileged role."""
    doc = {
        "email": "frontend@example.com",
        "name": "Frontend Dev",
        "roles": ["frontend"],
        "status": "active",
    }
    result = await mock_auth_db.users.insert_one(doc)
    return {**doc, "id": str(result.inserted_id)}


@pytest.fixture
def backend_token(backend_user) -> str:
    return make_token(backend_user["id"], backend_user["roles"])


@pytest.fixture
def frontend_token(frontend_user) -> str:
    return make_token(frontend_user["id"], frontend_user["roles"])


@pytest.fixture
def token_factory():
    """Mint tokens with custom roles or expiry: token_factory(user_id, roles, expires_in)."""
    return make_token
