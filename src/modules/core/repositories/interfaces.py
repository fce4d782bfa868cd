"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that domain-specific
repository interfaces extend.  Service-layer code depends on this
abstraction, never on Django ORM directly.

Every look-up follows the Null Object convention: a missing entity is
reported as ``None`` (or ``False`` for ``delete``), never as an exception.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Mapping, Optional, Sequence, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).
    """

    @abstractmethod
    def find_all(
        self,
        order_by: Sequence[str] = (),
        exclude_fields: Sequence[str] = (),
    ) -> list[T]:
        """List every entity, ordered, without the excluded columns."""

    @abstractmethod
    def find_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def create(self, fields: Mapping[str, Any]) -> T:
        """Persist a new entity built from ``fields``."""

    @abstractmethod
    def update(self, id: int, fields: Mapping[str, Any]) -> Optional[T]:
        """Overwrite ``fields`` on an existing entity."""

    @abstractmethod
    def delete(self, id: int) -> bool:
        """Remove an entity by ID."""
