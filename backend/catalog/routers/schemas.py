"""
Data schemas router, including the nested field routes.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from catalog.database.connections import get_catalog_database
from catalog.dependencies.roles import require_privileged
from catalog.models.model_schema import ModelSchema
from catalog.schemas.common import DataResponse, ListResponse, MessageResponse
from catalog.schemas.field import FieldCreate, FieldUpdate
from catalog.schemas.model_schema import SchemaCreate, SchemaUpdate
from catalog.services.field_service import FieldService
from catalog.services.schema_service import SchemaService

router = APIRouter(prefix="/schemas", tags=["Schemas"])


async def get_schema_service(
    db: AsyncIOMotorDatabase = Depends(get_catalog_database),
) -> SchemaService:
    """Dependency to get SchemaService instance."""
    return SchemaService(db)


async def get_field_service(
    db: AsyncIOMotorDatabase = Depends(get_catalog_database),
) -> FieldService:
    """Dependency to get FieldService instance."""
    return FieldService(db)


# ==================== Schema CRUD ====================


@router.get(
    "",
    response_model=ListResponse[ModelSchema],
    summary="List schemas of a service",
)
async def list_schemas(
    service_id: Optional[str] = Query(None, alias="serviceId", description="Owning service ID"),
    schema_service: SchemaService = Depends(get_schema_service),
):
    schemas = await schema_service.list_schemas(service_id)
    return ListResponse(count=len(schemas), data=schemas)


@router.get(
    "/{schema_id}",
    response_model=DataResponse[ModelSchema],
    summary="Get schema",
)
async def get_schema(
    schema_id: str,
    schema_service: SchemaService = Depends(get_schema_service),
):
    return DataResponse(data=await schema_service.get_schema(schema_id))


@router.post(
    "",
    response_model=DataResponse[ModelSchema],
    status_code=status.HTTP_201_CREATED,
    summary="Create schema",
    dependencies=[Depends(require_privileged())],
)
async def create_schema(
    body: SchemaCreate,
    schema_service: SchemaService = Depends(get_schema_service),
):
    """
    Create a schema.

    - **serviceId**: Owning service (required)
    - **module**: Name of an existing module of that service
    - **name**: Unique within the service
    - **fields**: Optional initial fields; ids are assigned by the server
    """
    return DataResponse(data=await schema_service.create_schema(body))


@router.put(
    "/{schema_id}",
    response_model=DataResponse[ModelSchema],
    summary="Update schema",
    dependencies=[Depends(require_privileged())],
)
async def update_schema(
    schema_id: str,
    body: SchemaUpdate,
    schema_service: SchemaService = Depends(get_schema_service),
):
    """Update name, module or description. Fields are left untouched."""
    return DataResponse(data=await schema_service.update_schema(schema_id, body))


@router.delete(
    "/{schema_id}",
    response_model=MessageResponse,
    summary="Delete schema",
    dependencies=[Depends(require_privileged())],
)
async def delete_schema(
    schema_id: str,
    schema_service: SchemaService = Depends(get_schema_service),
):
    await schema_service.delete_schema(schema_id)
    return MessageResponse(message="Schema deleted successfully.")


# ==================== Nested Fields ====================


@router.post(
    "/{schema_id}/fields",
    response_model=DataResponse[ModelSchema],
    status_code=status.HTTP_201_CREATED,
    summary="Add field to schema",
    dependencies=[Depends(require_privileged())],
)
async def add_schema_field(
    schema_id: str,
    body: FieldCreate,
    field_service: FieldService = Depends(get_field_service),
):
    """Append a field; the response is the whole schema."""
    return DataResponse(data=await field_service.add_field(schema_id, body))


@router.put(
    "/{schema_id}/fields/{field_id}",
    response_model=DataResponse[ModelSchema],
    summary="Update schema field",
    dependencies=[Depends(require_privileged())],
)
async def update_schema_field(
    schema_id: str,
    field_id: str,
    body: FieldUpdate,
    field_service: FieldService = Depends(get_field_service),
):
    """Merge the supplied keys onto the field; 404 distinguishes schema and field."""
    return DataResponse(data=await field_service.update_field(schema_id, field_id, body))


@router.delete(
    "/{schema_id}/fields/{field_id}",
    response_model=DataResponse[ModelSchema],
    summary="Delete schema field",
    dependencies=[Depends(require_privileged())],
)
async def delete_schema_field(
    schema_id: str,
    field_id: str,
    field_service: FieldService = Depends(get_field_service),
):
    return DataResponse(data=await field_service.remove_field(schema_id, field_id))
