"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into an API response.

Database errors (connection loss, constraint violations) are *not*
caught here; they propagate to the project exception handler.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

import structlog
from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

_LOOKUP_ERRORS = (ValueError, TypeError, OverflowError)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def find_all(
        self,
        order_by: Sequence[str] = (),
        exclude_fields: Sequence[str] = (),
    ) -> List[Product]:
        """List products ordered by ``order_by``.

        Excluded columns are deferred, so they are never read from the
        database for the listing.
        """
        queryset = Product.objects.all()
        if order_by:
            queryset = queryset.order_by(*order_by)
        if exclude_fields:
            queryset = queryset.defer(*exclude_fields)
        return list(queryset)

    def find_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or out-of-range IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except _LOOKUP_ERRORS:
            return None

    @transaction.atomic
    def create(self, fields: Mapping[str, Any]) -> Product:
        """Insert a new product."""
        product = Product.objects.create(**fields)
        logger.info("product.saved", product_id=product.id)
        return product

    @transaction.atomic
    def update(self, id: int, fields: Mapping[str, Any]) -> Optional[Product]:
        """Overwrite ``fields`` on the product, under a row lock."""
        product = self._get_for_update(id)
        if product is None:
            return None
        for name, value in fields.items():
            setattr(product, name, value)
        product.save(update_fields=list(fields))
        logger.info("product.saved", product_id=product.id, fields=sorted(fields))
        return product

    @transaction.atomic
    def toggle_availability(self, id: int) -> Optional[Product]:
        """Flip ``availability`` inside one locked read-modify-write."""
        product = self._get_for_update(id)
        if product is None:
            return None
        product.availability = not product.availability
        product.save(update_fields=["availability"])
        logger.info(
            "product.saved",
            product_id=product.id,
            availability=product.availability,
        )
        return product

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Hard-delete a product by ID.

        Returns ``True`` if a row was removed, ``False`` if no product
        exists with the given ID.
        """
        try:
            deleted, _ = Product.objects.filter(id=id).delete()
        except _LOOKUP_ERRORS:
            return False
        if deleted:
            logger.info("product.removed", product_id=id)
        return bool(deleted)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_for_update(self, id: int) -> Optional[Product]:
        """Retrieve a product with a row-level lock (SELECT FOR UPDATE)."""
        try:
            return Product.objects.select_for_update().filter(id=id).first()
        except _LOOKUP_ERRORS:
            return None
