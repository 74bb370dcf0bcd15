"""
Tests for the catalog CRUD services.

These tests cover:
- Service create/update with unique names
- Module listing and creation inside an existing service
- Schema CRUD and module references
- Endpoint CRUD and module references
"""

import pytest
from bson import ObjectId

from catalog.core.exceptions import ConflictError, NotFoundError, ValidationFailedError
from catalog.models.endpoint import HttpMethod
from catalog.schemas.endpoint import EndpointCreate, EndpointUpdate
from catalog.schemas.field import FieldCreate
from catalog.schemas.model_schema import SchemaCreate, SchemaUpdate
from catalog.schemas.module import ModuleCreate
from catalog.schemas.service import ServiceCreate, ServiceUpdate
from catalog.services.endpoint_service import EndpointService
from catalog.services.module_service import ModuleService
from catalog.services.schema_service import SchemaService
from catalog.services.service_registry import ServiceRegistry


class PermissiveValidator:
    """Lets every name through, leaving only the unique indexes to object."""

    async def ensure_service_name(self, *args, **kwargs):
        return None

    async def ensure_module_name(self, *args, **kwargs):
        return None

    async def ensure_schema_name(self, *args, **kwargs):
        return None


# =============================================================================
# Services
# =============================================================================

class TestServiceRegistry:

    @pytest.mark.asyncio
    async def test_create_service(self, mock_catalog_db):
        registry = ServiceRegistry(mock_catalog_db)

        service = await registry.create_service(
            ServiceCreate(name="Identity API", description="Login and sessions")
        )

        assert service.name == "Identity API"
        assert ObjectId.is_valid(service.id)
        assert service.created_at is not None
        assert await mock_catalog_db.services.count_documents({"name": "Identity API"}) == 1

    @pytest.mark.asyncio
    async def test_create_duplicate_name_conflicts(self, mock_catalog_db, seeded_catalog):
        registry = ServiceRegistry(mock_catalog_db)

        with pytest.raises(ConflictError):
            await registry.create_service(ServiceCreate(name="Payments API"))

        assert await mock_catalog_db.services.count_documents({}) == 1

    @pytest.mark.asyncio
    async def test_unique_index_rejects_duplicate_when_check_is_skipped(
        self, mock_catalog_db, seeded_catalog
    ):
        """A concurrent request that passed validation still gets a 409."""
        registry = ServiceRegistry(mock_catalog_db, validator=PermissiveValidator())

        with pytest.raises(ConflictError) as exc_info:
            await registry.create_service(ServiceCreate(name="Payments API"))

        assert exc_info.value.message == "A service with this name already exists."

    @pytest.mark.asyncio
    async def test_update_description_keeps_name(self, mock_catalog_db, seeded_catalog):
        registry = ServiceRegistry(mock_catalog_db)

        service = await registry.update_service(
            seeded_catalog["service_id"], ServiceUpdate(description="Cards and transfers")
        )

        assert service.name == "Payments API"
        assert service.description == "Cards and transfers"

    @pytest.mark.asyncio
    async def test_update_to_own_name_is_allowed(self, mock_catalog_db, seeded_catalog):
        registry = ServiceRegistry(mock_catalog_db)

        service = await registry.update_service(
            seeded_catalog["service_id"], ServiceUpdate(name="Payments API")
        )

        assert service.name == "Payments API"

    @pytest.mark.asyncio
    async def test_update_to_taken_name_conflicts(self, mock_catalog_db, seeded_catalog):
        await mock_catalog_db.services.insert_one({"name": "Identity API"})
        registry = ServiceRegistry(mock_catalog_db)

        with pytest.raises(ConflictError):
            await registry.update_service(
                seeded_catalog["service_id"], ServiceUpdate(name="Identity API")
            )

    @pytest.mark.asyncio
    async def test_update_missing_service_is_not_found(self, mock_catalog_db):
        registry = ServiceRegistry(mock_catalog_db)

        with pytest.raises(NotFoundError):
            await registry.update_service(str(ObjectId()), ServiceUpdate(name="X"))


# =============================================================================
# Modules
# =============================================================================

class TestModuleService:

    @pytest.mark.asyncio
    async def test_list_modules_sorted_by_name(self, mock_catalog_db, seeded_catalog):
        service = ModuleService(mock_catalog_db)

        modules = await service.list_modules(seeded_catalog["service_id"])

        assert [m.name for m in modules] == ["Accounts", "Billing"]

    @pytest.mark.asyncio
    async def test_list_without_service_id_fails_validation(self, mock_catalog_db):
        service = ModuleService(mock_catalog_db)

        with pytest.raises(ValidationFailedError):
            await service.list_modules(None)

    @pytest.mark.asyncio
    async def test_create_module(self, mock_catalog_db, seeded_catalog):
        service = ModuleService(mock_catalog_db)

        module = await service.create_module(
            ModuleCreate(service_id=seeded_catalog["service_id"], name="Refunds")
        )

        assert module.name == "Refunds"
        assert module.service_id == seeded_catalog["service_id"]

    @pytest.mark.asyncio
    async def test_create_without_service_id_fails_validation(self, mock_catalog_db):
        service = ModuleService(mock_catalog_db)

        with pytest.raises(ValidationFailedError) as exc_info:
            await service.create_module(ModuleCreate(name="Refunds"))

        assert exc_info.value.message == "Service ID is required."

    @pytest.mark.asyncio
    async def test_create_in_unknown_service_fails_validation(self, mock_catalog_db, seeded_catalog):
        service = ModuleService(mock_catalog_db)

        with pytest.raises(ValidationFailedError):
            await service.create_module(ModuleCreate(service_id=str(ObjectId()), name="Refunds"))

        assert await mock_catalog_db.modules.count_documents({"name": "Refunds"}) == 0

    @pytest.mark.asyncio
    async def test_create_duplicate_name_conflicts(self, mock_catalog_db, seeded_catalog):
        service = ModuleService(mock_catalog_db)

        with pytest.raises(ConflictError):
            await service.create_module(
                ModuleCreate(service_id=seeded_catalog["service_id"], name="Billing")
            )

    @pytest.mark.asyncio
    async def test_unique_index_rejects_duplicate_module(self, mock_catalog_db, seeded_catalog):
        service = ModuleService(mock_catalog_db, validator=PermissiveValidator())

        with pytest.raises(ConflictError):
            await service.create_module(
                ModuleCreate(service_id=seeded_catalog["service_id"], name="Billing")
            )

        assert await mock_catalog_db.modules.count_documents({"name": "Billing"}) == 1


# =============================================================================
# Schemas
# =============================================================================

class TestSchemaService:

    @pytest.mark.asyncio
    async def test_create_schema_with_initial_fields(self, mock_catalog_db, seeded_catalog):
        service = SchemaService(mock_catalog_db)

        schema = await service.create_schema(SchemaCreate(
            service_id=seeded_catalog["service_id"],
            module="Billing",
            name="CreditNote",
            fields=[
                FieldCreate(name="id", type="ObjectId", required=True),
                FieldCreate(name="reason", type="string"),
            ],
        ))

        assert [f.name for f in schema.fields] == ["id", "reason"]
        assert len({f.id for f in schema.fields}) == 2

    @pytest.mark.asyncio
    async def test_create_without_service_id_fails_validation(self, mock_catalog_db, seeded_catalog):
        service = SchemaService(mock_catalog_db)

        with pytest.raises(ValidationFailedError) as exc_info:
            await service.create_schema(SchemaCreate(module="Billing", name="CreditNote"))

        assert exc_info.value.message == "Service ID is required to create a schema."

    @pytest.mark.asyncio
    async def test_create_with_unknown_module_fails_validation(self, mock_catalog_db, seeded_catalog):
        service = SchemaService(mock_catalog_db)

        with pytest.raises(ValidationFailedError):
            await service.create_schema(SchemaCreate(
                service_id=seeded_catalog["service_id"], module="Shipping", name="Parcel",
            ))

    @pytest.mark.asyncio
    async def test_create_duplicate_in_same_service_conflicts(self, mock_catalog_db, seeded_catalog):
        service = SchemaService(mock_catalog_db)

        with pytest.raises(ConflictError):
            await service.create_schema(SchemaCreate(
                service_id=seeded_catalog["service_id"], module="Accounts", name="Invoice",
            ))

    @pytest.mark.asyncio
    async def test_same_name_in_other_service_is_allowed(self, mock_catalog_db, seeded_catalog):
        other = await mock_catalog_db.services.insert_one({"name": "Identity API"})
        other_id = str(other.inserted_id)
        await mock_catalog_db.modules.insert_one({"service_id": other_id, "name": "Sessions"})
        service = SchemaService(mock_catalog_db)

        schema = await service.create_schema(
            SchemaCreate(service_id=other_id, module="Sessions", name="Invoice")
        )

        assert schema.service_id == other_id
        assert await mock_catalog_db.schemas.count_documents({"name": "Invoice"}) == 2

    @pytest.mark.asyncio
    async def test_list_and_get(self, mock_catalog_db, seeded_catalog):
        service = SchemaService(mock_catalog_db)

        listed = await service.list_schemas(seeded_catalog["service_id"])
        fetched = await service.get_schema(seeded_catalog["invoice_schema_id"])

        assert [s.name for s in listed] == ["Invoice"]
        assert fetched.id == seeded_catalog["invoice_schema_id"]
        assert [f.id for f in fetched.fields] == seeded_catalog["field_ids"]

    @pytest.mark.asyncio
    async def test_update_moves_schema_to_another_module(self, mock_catalog_db, seeded_catalog):
        service = SchemaService(mock_catalog_db)

        schema = await service.update_schema(
            seeded_catalog["invoice_schema_id"], SchemaUpdate(module="Accounts")
        )

        assert schema.module == "Accounts"
        assert len(schema.fields) == 2

    @pytest.mark.asyncio
    async def test_update_ignores_fields_in_body(self, mock_catalog_db, seeded_catalog):
        service = SchemaService(mock_catalog_db)
        request = SchemaUpdate.model_validate({"description": "Issued", "fields": []})

        schema = await service.update_schema(seeded_catalog["invoice_schema_id"], request)

        assert schema.description == "Issued"
        assert [f.id for f in schema.fields] == seeded_catalog["field_ids"]

    @pytest.mark.asyncio
    async def test_update_to_unknown_module_fails_validation(self, mock_catalog_db, seeded_catalog):
        service = SchemaService(mock_catalog_db)

        with pytest.raises(ValidationFailedError):
            await service.update_schema(
                seeded_catalog["invoice_schema_id"], SchemaUpdate(module="Shipping")
            )

    @pytest.mark.asyncio
    async def test_update_to_taken_name_conflicts(self, mock_catalog_db, seeded_catalog):
        await mock_catalog_db.schemas.insert_one({
            "service_id": seeded_catalog["service_id"], "module": "Billing",
            "name": "CreditNote", "fields": [],
        })
        service = SchemaService(mock_catalog_db)

        with pytest.raises(ConflictError):
            await service.update_schema(
                seeded_catalog["invoice_schema_id"], SchemaUpdate(name="CreditNote")
            )

    @pytest.mark.asyncio
    async def test_delete_schema(self, mock_catalog_db, seeded_catalog):
        service = SchemaService(mock_catalog_db)

        await service.delete_schema(seeded_catalog["invoice_schema_id"])

        with pytest.raises(NotFoundError):
            await service.get_schema(seeded_catalog["invoice_schema_id"])


# =============================================================================
# Endpoints
# =============================================================================

class TestEndpointService:

    @pytest.mark.asyncio
    async def test_create_endpoint(self, mock_catalog_db, seeded_catalog):
        service = EndpointService(mock_catalog_db)

        endpoint = await service.create_endpoint(EndpointCreate(
            service_id=seeded_catalog["service_id"],
            module="Billing",
            method=HttpMethod.DELETE,
            path="/invoices/{id}",
            auth_required=True,
        ))

        assert endpoint.method == HttpMethod.DELETE
        stored = await mock_catalog_db.endpoints.find_one({"_id": ObjectId(endpoint.id)})
        assert stored["method"] == "DELETE"
        assert "path_params" not in stored

    @pytest.mark.asyncio
    async def test_create_with_unknown_module_fails_validation(self, mock_catalog_db, seeded_catalog):
        service = EndpointService(mock_catalog_db)

        with pytest.raises(ValidationFailedError) as exc_info:
            await service.create_endpoint(EndpointCreate(
                service_id=seeded_catalog["service_id"],
                module="Shipping",
                method=HttpMethod.GET,
                path="/parcels",
            ))

        assert "Shipping" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_module_of_another_service_is_rejected(self, mock_catalog_db, seeded_catalog):
        other = await mock_catalog_db.services.insert_one({"name": "Identity API"})
        service = EndpointService(mock_catalog_db)

        with pytest.raises(ValidationFailedError):
            await service.create_endpoint(EndpointCreate(
                service_id=str(other.inserted_id),
                module="Billing",
                method=HttpMethod.GET,
                path="/invoices",
            ))

    @pytest.mark.asyncio
    async def test_list_sorted_by_module_then_path(self, mock_catalog_db, seeded_catalog):
        await mock_catalog_db.endpoints.insert_one({
            "service_id": seeded_catalog["service_id"], "module": "Billing",
            "method": "GET", "path": "/credit-notes",
        })
        service = EndpointService(mock_catalog_db)

        endpoints = await service.list_endpoints(seeded_catalog["service_id"])

        assert [(e.module, e.path) for e in endpoints] == [
            ("Accounts", "/accounts"),
            ("Billing", "/credit-notes"),
            ("Billing", "/invoices"),
        ]

    @pytest.mark.asyncio
    async def test_update_endpoint(self, mock_catalog_db, seeded_catalog):
        service = EndpointService(mock_catalog_db)

        endpoint = await service.update_endpoint(
            seeded_catalog["invoices_endpoint_id"],
            EndpointUpdate(description="List issued invoices", module="Accounts"),
        )

        assert endpoint.description == "List issued invoices"
        assert endpoint.module == "Accounts"
        assert endpoint.path == "/invoices"

    @pytest.mark.asyncio
    async def test_update_to_unknown_module_fails_validation(self, mock_catalog_db, seeded_catalog):
        service = EndpointService(mock_catalog_db)

        with pytest.raises(ValidationFailedError):
            await service.update_endpoint(
                seeded_catalog["invoices_endpoint_id"], EndpointUpdate(module="Shipping")
            )

    @pytest.mark.asyncio
    async def test_delete_endpoint(self, mock_catalog_db, seeded_catalog):
        service = EndpointService(mock_catalog_db)

        await service.delete_endpoint(seeded_catalog["invoices_endpoint_id"])

        with pytest.raises(NotFoundError):
            await service.get_endpoint(seeded_catalog["invoices_endpoint_id"])
