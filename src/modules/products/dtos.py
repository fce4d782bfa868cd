"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (views, after the
request validators have passed) and the Service layer.  DTOs are
immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``ReplaceProductDTO``: input for a full (PUT) update.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, field_validator


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    ``availability`` is not part of the input: new products are
    always available.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name must not be empty.")
        return v

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        if v <= 0:
            raise ValueError("Price must be greater than zero.")
        return v

    def as_fields(self) -> Dict[str, Any]:
        return {"name": self.name, "price": self.price}


class ReplaceProductDTO(CreateProductDTO):
    """Immutable DTO for full product updates.

    Every mutable field is required: a PUT replaces, it never merges.
    """

    availability: bool

    def as_fields(self) -> Dict[str, Any]:
        return {**super().as_fields(), "availability": self.availability}
