"""
User model for authentication database.
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRole(str, Enum):
    """User role levels."""
    FRONTEND = "frontend"
    BACKEND = "backend"


class UserStatus(str, Enum):
    """User account status."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class User(BaseModel):
    """
    User document model for MongoDB auth_db.users collection.
    """
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    id: Optional[str] = Field(None, description="MongoDB ObjectId as string")
    email: EmailStr = Field(..., description="Unique email address")
    name: Optional[str] = Field(None, description="Display name")
    roles: list[UserRole] = Field(
        default=[UserRole.FRONTEND],
        description="List of roles assigned to user"
    )
    status: UserStatus = Field(
        default=UserStatus.ACTIVE,
        description="Account status"
    )
    created_at: Optional[datetime] = Field(None, description="Account creation timestamp")
