"""
Role-based access control dependencies.
"""
from typing import Callable

from fastapi import Depends, HTTPException, status

from catalog.config import get_settings
from catalog.dependencies.auth import get_current_active_user
from catalog.models.user import User, UserRole


def require_roles(*allowed_roles: UserRole) -> Callable:
    """
    Dependency factory for role-based access control.

    Usage:
        @router.post("/services")
        async def create(user: User = Depends(require_roles(UserRole.BACKEND))):
            ...
    """
    async def role_checker(
        current_user: User = Depends(get_current_active_user)
    ) -> User:
        user_roles = set()
        for role in current_user.roles:
            try:
                user_roles.add(UserRole(role))
            except ValueError:
                continue

        if not user_roles.intersection(allowed_roles):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="User role is not authorized to access this route",
            )

        return current_user

    return role_checker


def require_privileged() -> Callable:
    """
    Dependency for every mutating catalog route: the configured privileged
    role (``backend`` by default) is required.
    """
    return require_roles(UserRole(get_settings().privileged_role))
