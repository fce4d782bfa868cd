"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Business rules enforced here:
- Id-keyed operations report a missing product as ``ProductNotFound``.
- New products are always created available.
- The availability toggle is relative to the stored value and runs as
  one repository operation.
- A full update replaces ``name``, ``price`` and ``availability``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.products.constants import LIST_EXCLUDED_FIELDS, LIST_ORDERING
from modules.products.exceptions import ProductNotFound

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, ReplaceProductDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new, available product."""
        product = self._repo.create({**dto.as_fields(), "availability": True})
        logger.info("product.created", product_id=product.id, name=product.name)
        return product

    def replace_product(self, id: int, dto: ReplaceProductDTO) -> Product:
        """Overwrite every mutable field of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.update(id, dto.as_fields())
        if product is None:
            raise self._not_found(id)
        logger.info("product.updated", product_id=id)
        return product

    def toggle_availability(self, id: int) -> Product:
        """Negate the stored ``availability`` flag.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.toggle_availability(id)
        if product is None:
            raise self._not_found(id)
        logger.info(
            "product.availability_toggled",
            product_id=id,
            availability=product.availability,
        )
        return product

    def delete_product(self, id: int) -> None:
        """Remove a product permanently.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        if not self._repo.delete(id):
            raise self._not_found(id)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every product ordered by id, without bookkeeping fields."""
        return self._repo.find_all(
            order_by=LIST_ORDERING,
            exclude_fields=LIST_EXCLUDED_FIELDS,
        )

    def get_product(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.find_by_id(id)
        if product is None:
            raise self._not_found(id)
        return product

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _not_found(id: int) -> ProductNotFound:
        logger.info("product.not_found", product_id=id)
        return ProductNotFound(f"Product {id} not found.")
