"""
Modules router. Renames and deletes cascade to endpoints and schemas.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from catalog.database.connections import get_catalog_database
from catalog.dependencies.roles import require_privileged
from catalog.models.module import Module
from catalog.schemas.common import DataResponse, ListResponse, MessageResponse
from catalog.schemas.module import ModuleCreate, ModuleUpdate
from catalog.services.integrity_service import IntegrityCoordinator
from catalog.services.module_service import ModuleService
from catalog.routers.services import get_integrity_coordinator

router = APIRouter(prefix="/modules", tags=["Modules"])


async def get_module_service(
    db: AsyncIOMotorDatabase = Depends(get_catalog_database),
) -> ModuleService:
    """Dependency to get ModuleService instance."""
    return ModuleService(db)


@router.get(
    "",
    response_model=ListResponse[Module],
    summary="List modules of a service",
)
async def list_modules(
    service_id: Optional[str] = Query(None, alias="serviceId", description="Owning service ID"),
    module_service: ModuleService = Depends(get_module_service),
):
    """List the modules of a service, sorted by name. Public."""
    modules = await module_service.list_modules(service_id)
    return ListResponse(count=len(modules), data=modules)


@router.post(
    "",
    response_model=DataResponse[Module],
    status_code=status.HTTP_201_CREATED,
    summary="Create module",
    dependencies=[Depends(require_privileged())],
)
async def create_module(
    body: ModuleCreate,
    module_service: ModuleService = Depends(get_module_service),
):
    """
    Create a module.

    - **serviceId**: Owning service (required)
    - **name**: Module name, unique across all modules
    - **description**: Optional description
    """
    return DataResponse(data=await module_service.create_module(body))


@router.put(
    "/{module_id}",
    response_model=DataResponse[Module],
    summary="Rename or update module",
    dependencies=[Depends(require_privileged())],
)
async def update_module(
    module_id: str,
    body: ModuleUpdate,
    coordinator: IntegrityCoordinator = Depends(get_integrity_coordinator),
):
    """
    Update a module. A new name is copied to every endpoint and schema that
    referenced the old one before the module itself is saved.
    """
    return DataResponse(data=await coordinator.rename_module(module_id, body))


@router.delete(
    "/{module_id}",
    response_model=MessageResponse,
    summary="Delete module with its endpoints and schemas",
    dependencies=[Depends(require_privileged())],
)
async def delete_module(
    module_id: str,
    coordinator: IntegrityCoordinator = Depends(get_integrity_coordinator),
):
    """Delete a module after removing the endpoints and schemas grouped under it."""
    await coordinator.delete_module(module_id)
    return MessageResponse(
        message="Module and all related endpoints and schemas deleted successfully."
    )
