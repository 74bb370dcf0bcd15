"""
Services router. Deleting a service removes everything documented under it.
"""
from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from catalog.database.connections import get_catalog_database
from catalog.dependencies.roles import require_privileged
from catalog.models.service import Service
from catalog.schemas.common import DataResponse, MessageResponse
from catalog.schemas.service import ServiceCreate, ServiceUpdate
from catalog.services.integrity_service import IntegrityCoordinator
from catalog.services.service_registry import ServiceRegistry

router = APIRouter(prefix="/services", tags=["Services"])


async def get_service_registry(
    db: AsyncIOMotorDatabase = Depends(get_catalog_database),
) -> ServiceRegistry:
    """Dependency to get ServiceRegistry instance."""
    return ServiceRegistry(db)


async def get_integrity_coordinator(
    db: AsyncIOMotorDatabase = Depends(get_catalog_database),
) -> IntegrityCoordinator:
    """Dependency to get IntegrityCoordinator instance."""
    return IntegrityCoordinator(db)


@router.post(
    "",
    response_model=DataResponse[Service],
    status_code=status.HTTP_201_CREATED,
    summary="Create service",
    dependencies=[Depends(require_privileged())],
)
async def create_service(
    body: ServiceCreate,
    registry: ServiceRegistry = Depends(get_service_registry),
):
    """
    Create a service.

    - **name**: Unique service name
    - **description**: Optional description
    """
    return DataResponse(data=await registry.create_service(body))


@router.put(
    "/{service_id}",
    response_model=DataResponse[Service],
    summary="Update service",
    dependencies=[Depends(require_privileged())],
)
async def update_service(
    service_id: str,
    body: ServiceUpdate,
    registry: ServiceRegistry = Depends(get_service_registry),
):
    """Update a service. Fails with 409 if the new name is taken."""
    return DataResponse(data=await registry.update_service(service_id, body))


@router.delete(
    "/{service_id}",
    response_model=MessageResponse,
    summary="Delete service and all related data",
    dependencies=[Depends(require_privileged())],
)
async def delete_service(
    service_id: str,
    coordinator: IntegrityCoordinator = Depends(get_integrity_coordinator),
):
    """
    Delete a service with its modules, endpoints, schemas, error codes and
    overview cards. The service record itself is removed last.
    """
    await coordinator.delete_service(service_id)
    return MessageResponse(message="Service and all related data deleted successfully.")
