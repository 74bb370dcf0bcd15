"""
Schema field request schemas.
"""
from typing import Optional

from pydantic import ConfigDict, Field, model_validator

from catalog.models.base import CamelModel

NON_NULLABLE_KEYS = ("name", "type", "required")
CLEARABLE_KEYS = ("constraints", "description")


class FieldCreate(CamelModel):
    """
    Add field request.

    Any client-supplied ``id`` is dropped; the field manager assigns one.
    """
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1, description="Field name")
    type: str = Field(..., min_length=1, description="Field type, e.g. string or ObjectId")
    required: bool = Field(False, description="Whether the field is mandatory")
    constraints: str = Field("", description="Free-form constraints, e.g. max length")
    description: str = Field("", description="Field description")


class FieldUpdate(CamelModel):
    """
    Partial field update; only supplied keys change.

    An explicit ``null`` clears ``constraints`` or ``description``. The other
    keys cannot be cleared.
    """
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(None, min_length=1)
    type: Optional[str] = Field(None, min_length=1)
    required: Optional[bool] = None
    constraints: Optional[str] = None
    description: Optional[str] = None

    @model_validator(mode="after")
    def reject_null_for_mandatory_keys(self) -> "FieldUpdate":
        for key in NON_NULLABLE_KEYS:
            if key in self.model_fields_set and getattr(self, key) is None:
                raise ValueError(f"{key} cannot be null")
        return self

    def to_patch(self) -> dict:
        """The supplied keys, with a cleared text key stored as an empty string."""
        patch = self.model_dump(exclude_unset=True)
        for key in CLEARABLE_KEYS:
            if key in patch and patch[key] is None:
                patch[key] = ""
        return patch
