"""
Catalog error taxonomy.

Every error the core raises derives from CatalogError and carries the HTTP
status the routing layer answers with. The exception handlers in
catalog.main render them as ``{"success": false, "message": ...}``.
"""
from fastapi import status


class CatalogError(Exception):
    """Base class for expected catalog failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Something went wrong!"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(CatalogError):
    """Target record, or a Field nested in it, does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found."


class ConflictError(CatalogError):
    """A name-uniqueness invariant would be violated."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "A resource with this name already exists."


class ValidationFailedError(CatalogError):
    """Request is missing a required scope or references something that does not exist."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed."


class StoreFailureError(CatalogError):
    """
    The document store failed while executing a step.

    Multi-step operations abort at the failed step; steps already applied are
    not rolled back, so the caller must re-check state before retrying.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "The operation did not complete."

    def __init__(self, step: str, message: str | None = None):
        self.step = step
        super().__init__(message or f"The operation did not complete (failed at: {step}).")
