"""
Core module - Errors, security and logging utilities.
"""
from catalog.core.exceptions import (
    CatalogError,
    NotFoundError,
    ConflictError,
    ValidationFailedError,
    StoreFailureError,
)
from catalog.core.security import decode_token
from catalog.core.logging_config import setup_logging

__all__ = [
    "CatalogError",
    "NotFoundError",
    "ConflictError",
    "ValidationFailedError",
    "StoreFailureError",
    "decode_token",
    "setup_logging",
]
