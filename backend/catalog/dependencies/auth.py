"""
Authentication dependencies for route protection.
"""
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from motor.motor_asyncio import AsyncIOMotorDatabase

from catalog.core.security import JWTError, decode_token
from catalog.database.connections import get_auth_database
from catalog.database.databases import auth_db
from catalog.models.user import User, UserStatus
from catalog.services.base import parse_object_id

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)] = None,
    token: Annotated[str | None, Query(description="JWT access token")] = None,
    db: AsyncIOMotorDatabase = Depends(get_auth_database),
) -> User:
    """
    Dependency to get the current authenticated user from JWT token.

    Token is read from the ``Authorization: Bearer xxx`` header, or from the
    query parameter ``?token=xxx`` when no bearer header is sent.

    Raises:
        HTTPException 401: If token is missing, invalid or expired
        HTTPException 401: If user not found
    """
    if credentials is not None:
        token = credentials.credentials

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, no token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authorized, token failed",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = decode_token(token)
    except JWTError:
        raise credentials_exception

    user_id = parse_object_id(payload.get("sub"))
    if user_id is None:
        raise credentials_exception

    user_doc = await db[auth_db.Collections.USERS].find_one({"_id": user_id})
    if user_doc is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, user not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_doc["id"] = str(user_doc.pop("_id"))
    return User.model_validate(user_doc)


async def get_current_active_user(
    current_user: Annotated[User, Depends(get_current_user)]
) -> User:
    """
    Dependency to ensure the current user is active.

    Raises:
        HTTPException 403: If user account is inactive
    """
    if current_user.status == UserStatus.INACTIVE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is inactive",
        )
    return current_user
