"""Product repository interface.

Extends ``IRepository[Product]`` with the atomic availability toggle.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def toggle_availability(self, id: int) -> Optional["Product"]:
        """Flip ``availability`` relative to the stored value.

        Must be a single read-modify-write under a row lock so that two
        concurrent toggles never read the same value.  Returns ``None``
        if the product does not exist.
        """
