"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Each
action is guarded by ``validate_request`` with its ordered rule chain,
so the action body only ever sees valid input.  ``ProductNotFound`` is
translated into the ``404 {"error": ...}`` envelope here; database
failures propagate to the project exception handler.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.validation import validate_request
from modules.products.constants import MSG_PRODUCT_DELETED, MSG_PRODUCT_NOT_FOUND
from modules.products.dtos import CreateProductDTO, ReplaceProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductListSerializer, ProductSerializer
from modules.products.services import ProductService
from modules.products.validators import (
    CREATE_RULES,
    ID_RULES,
    REPLACE_RULES,
    to_bool,
    to_int,
    to_price,
)


def _not_found() -> Response:
    return Response(
        {"error": MSG_PRODUCT_NOT_FOUND},
        status=status.HTTP_404_NOT_FOUND,
    )


@extend_schema_view(
    list=extend_schema(summary="Get a list of products", tags=["Products"]),
    retrieve=extend_schema(summary="Get a product by ID", tags=["Products"]),
    create=extend_schema(summary="Create a new product", tags=["Products"]),
    update=extend_schema(summary="Update a product", tags=["Products"]),
    partial_update=extend_schema(
        summary="Toggle product availability", tags=["Products"]
    ),
    destroy=extend_schema(summary="Delete a product", tags=["Products"]),
)
class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    serializer_class = ProductSerializer
    # Any segment reaches the action; non-integers fail ``check_id``.
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        return Response({"data": ProductListSerializer(products, many=True).data})

    @validate_request(*ID_RULES)
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}"""
        try:
            product = self._service.get_product(to_int(pk))
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    # ------------------------------------------------------------------
    # Create / Update / Toggle / Destroy
    # ------------------------------------------------------------------

    @validate_request(*CREATE_RULES)
    def create(self, request: Request) -> Response:
        """POST /api/products"""
        data = request.data
        dto = CreateProductDTO(name=data["name"], price=to_price(data["price"]))
        product = self._service.create_product(dto)
        return Response(
            {"data": ProductSerializer(product).data},
            status=status.HTTP_201_CREATED,
        )

    @validate_request(*REPLACE_RULES)
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/products/{pk}"""
        data = request.data
        dto = ReplaceProductDTO(
            name=data["name"],
            price=to_price(data["price"]),
            availability=to_bool(data["availability"]),
        )
        try:
            product = self._service.replace_product(to_int(pk), dto)
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    @validate_request(*ID_RULES)
    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/products/{pk}

        Flips ``availability``; the request body is ignored.
        """
        try:
            product = self._service.toggle_availability(to_int(pk))
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    @validate_request(*ID_RULES)
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/products/{pk}"""
        try:
            self._service.delete_product(to_int(pk))
        except ProductNotFound:
            return _not_found()
        return Response({"data": MSG_PRODUCT_DELETED})
