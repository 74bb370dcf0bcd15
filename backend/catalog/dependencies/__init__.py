"""
Dependencies for dependency injection in routes.
"""
from catalog.dependencies.auth import get_current_user, get_current_active_user
from catalog.dependencies.roles import require_roles, require_privileged

__all__ = [
    "get_current_user",
    "get_current_active_user",
    "require_roles",
    "require_privileged",
]
