"""Unit tests for ProductService.

Covers:
- create_product: availability forced to True.
- replace_product / toggle_availability / delete_product / get_product:
  happy path and ProductNotFound.
- list_products: ordering and excluded fields passed to the repository.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.products.dtos import CreateProductDTO, ReplaceProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo):
    return ProductService(repository=mock_repo)


def _product(**overrides) -> Product:
    defaults = {"id": 1, "name": "Cemento", "price": Decimal("10.00")}
    defaults.update(overrides)
    return Product(**defaults)


class TestCreateProduct:
    def test_success(self, service, mock_repo):
        mock_repo.create.side_effect = lambda fields: _product(**fields)

        dto = CreateProductDTO(name="Cemento", price=Decimal("19.99"))
        product = service.create_product(dto)

        assert product.name == "Cemento"
        assert product.availability is True
        mock_repo.create.assert_called_once_with(
            {"name": "Cemento", "price": Decimal("19.99"), "availability": True}
        )


class TestReplaceProduct:
    def test_success(self, service, mock_repo):
        mock_repo.update.return_value = _product(name="Nuevo")
        dto = ReplaceProductDTO(
            name="Nuevo", price=Decimal("5.00"), availability=False
        )

        product = service.replace_product(1, dto)

        assert product.name == "Nuevo"
        mock_repo.update.assert_called_once_with(
            1, {"name": "Nuevo", "price": Decimal("5.00"), "availability": False}
        )

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.update.return_value = None
        dto = ReplaceProductDTO(name="X", price=Decimal("5.00"), availability=True)

        with pytest.raises(ProductNotFound):
            service.replace_product(2000, dto)


class TestToggleAvailability:
    def test_delegates_single_atomic_call(self, service, mock_repo):
        mock_repo.toggle_availability.return_value = _product(availability=False)

        product = service.toggle_availability(1)

        assert product.availability is False
        mock_repo.toggle_availability.assert_called_once_with(1)
        mock_repo.find_by_id.assert_not_called()
        mock_repo.update.assert_not_called()

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.toggle_availability.return_value = None

        with pytest.raises(ProductNotFound):
            service.toggle_availability(2000)


class TestDeleteProduct:
    def test_success(self, service, mock_repo):
        mock_repo.delete.return_value = True

        service.delete_product(1)

        mock_repo.delete.assert_called_once_with(1)

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.delete.return_value = False

        with pytest.raises(ProductNotFound):
            service.delete_product(2000)


class TestGetProduct:
    def test_success(self, service, mock_repo):
        mock_repo.find_by_id.return_value = _product(id=7)

        assert service.get_product(7).id == 7

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.find_by_id.return_value = None

        with pytest.raises(ProductNotFound, match="2000"):
            service.get_product(2000)


class TestListProducts:
    def test_orders_by_id_and_hides_timestamps(self, service, mock_repo):
        mock_repo.find_all.return_value = []

        assert service.list_products() == []
        mock_repo.find_all.assert_called_once_with(
            order_by=("id",),
            exclude_fields=("created_at", "updated_at"),
        )
