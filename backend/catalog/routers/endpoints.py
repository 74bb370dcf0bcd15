"""
Endpoints router.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from catalog.database.connections import get_catalog_database
from catalog.dependencies.roles import require_privileged
from catalog.models.endpoint import Endpoint
from catalog.schemas.common import DataResponse, ListResponse, MessageResponse
from catalog.schemas.endpoint import EndpointCreate, EndpointUpdate
from catalog.services.endpoint_service import EndpointService

router = APIRouter(prefix="/endpoints", tags=["Endpoints"])


async def get_endpoint_service(
    db: AsyncIOMotorDatabase = Depends(get_catalog_database),
) -> EndpointService:
    """Dependency to get EndpointService instance."""
    return EndpointService(db)


@router.get(
    "",
    response_model=ListResponse[Endpoint],
    summary="List endpoints of a service",
)
async def list_endpoints(
    service_id: Optional[str] = Query(None, alias="serviceId", description="Owning service ID"),
    endpoint_service: EndpointService = Depends(get_endpoint_service),
):
    endpoints = await endpoint_service.list_endpoints(service_id)
    return ListResponse(count=len(endpoints), data=endpoints)


@router.get(
    "/{endpoint_id}",
    response_model=DataResponse[Endpoint],
    summary="Get endpoint",
)
async def get_endpoint(
    endpoint_id: str,
    endpoint_service: EndpointService = Depends(get_endpoint_service),
):
    return DataResponse(data=await endpoint_service.get_endpoint(endpoint_id))


@router.post(
    "",
    response_model=DataResponse[Endpoint],
    status_code=status.HTTP_201_CREATED,
    summary="Create endpoint",
    dependencies=[Depends(require_privileged())],
)
async def create_endpoint(
    body: EndpointCreate,
    endpoint_service: EndpointService = Depends(get_endpoint_service),
):
    """
    Document a new endpoint.

    - **serviceId**: Owning service (required)
    - **module**: Name of an existing module of that service
    - **method** / **path**: The documented route
    """
    return DataResponse(data=await endpoint_service.create_endpoint(body))


@router.put(
    "/{endpoint_id}",
    response_model=DataResponse[Endpoint],
    summary="Update endpoint",
    dependencies=[Depends(require_privileged())],
)
async def update_endpoint(
    endpoint_id: str,
    body: EndpointUpdate,
    endpoint_service: EndpointService = Depends(get_endpoint_service),
):
    return DataResponse(data=await endpoint_service.update_endpoint(endpoint_id, body))


@router.delete(
    "/{endpoint_id}",
    response_model=MessageResponse,
    summary="Delete endpoint",
    dependencies=[Depends(require_privileged())],
)
async def delete_endpoint(
    endpoint_id: str,
    endpoint_service: EndpointService = Depends(get_endpoint_service),
):
    await endpoint_service.delete_endpoint(endpoint_id)
    return MessageResponse(message="Endpoint deleted successfully.")
