"""
Response envelope shared by every catalog route.

All bodies are shaped ``{success, data?, message?}``; list responses add
``count``.
"""
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Successful response carrying a single resource."""
    success: bool = True
    data: T


class ListResponse(BaseModel, Generic[T]):
    """Successful response carrying a list of resources."""
    success: bool = True
    count: int = Field(..., description="Number of items in data")
    data: list[T]


class MessageResponse(BaseModel):
    """Response carrying only a message (deletes and errors)."""
    success: bool = True
    message: Optional[str] = None
