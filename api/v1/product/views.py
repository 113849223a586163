"""
Product API views.

These endpoints let clients:
- List products, optionally by brand name
- Look up a product by id, name, or name and brand name
- Create, replace and delete products
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.product.serializers import (
    DeleteResultSerializer,
    ProductEnvelopeSerializer,
    ProductListEnvelopeSerializer,
    ProductRequestSerializer,
    ProductResponseSerializer,
)
from core.domain.exceptions import ConstraintViolationError
from products.application.dto.product_dto import ProductDTO
from products.application.services.product_service import ProductService
from products.infrastructure.database_context import ProductDatabaseContext
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)


ERROR_RESPONSES = {
    500: {"description": "Unexpected error"},
}


def get_product_service() -> ProductService:
    """Build a service over a fresh persistence context for one request."""
    return ProductService(DjangoProductRepository(ProductDatabaseContext()))


def _product_response(product: ProductDTO, status_code: int = status.HTTP_200_OK) -> Response:
    return Response({"product": ProductResponseSerializer(product).data}, status=status_code)


def _products_response(products) -> Response:
    return Response(
        {"products": ProductResponseSerializer(products, many=True).data},
        status=status.HTTP_200_OK,
    )


def _errors_response(message: str, status_code: int) -> Response:
    return Response({"errors": [message]}, status=status_code)


def _duplicate_response(name: str, brand_name: str) -> Response:
    return Response(
        {
            "validation_error_messages": [
                f"Product with the same name '({name})' and brand name "
                f"'({brand_name})' already exists."
            ]
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


def _validation_response(errors) -> Response:
    return Response({"validation_error_messages": errors}, status=status.HTTP_400_BAD_REQUEST)


class ProductListView(APIView):
    """View for listing and creating products."""

    @extend_schema(
        operation_id="list_products",
        summary="List Products",
        description="Return every product in the catalog, ordered by id.",
        tags=["Products"],
        responses={200: ProductListEnvelopeSerializer, **ERROR_RESPONSES},
    )
    def get(self, request: Request, **kwargs) -> Response:
        """List products."""
        return async_to_sync(self._handle_list_products)(request)

    async def _handle_list_products(self, request: Request) -> Response:
        """Async handler for list products."""
        products = await get_product_service().list_products()
        return _products_response(products)

    @extend_schema(
        operation_id="create_product",
        summary="Create Product",
        description=(
            "Create a product. The name and brand name pair must not belong to "
            "another product."
        ),
        tags=["Products"],
        request=ProductRequestSerializer,
        responses={
            201: ProductEnvelopeSerializer,
            400: {"description": "Validation failed or product already exists"},
            **ERROR_RESPONSES,
        },
    )
    def post(self, request: Request, **kwargs) -> Response:
        """Create a product."""
        return async_to_sync(self._handle_create_product)(request)

    async def _handle_create_product(self, request: Request) -> Response:
        """Async handler for create product."""
        serializer = ProductRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return _validation_response(serializer.errors)

        name = serializer.validated_data["name"]
        brand_name = serializer.validated_data["brand_name"]
        service = get_product_service()

        existing = await service.get_product_by_name_and_brand(name, brand_name)
        if existing:
            return _duplicate_response(name, brand_name)

        dto = ProductDTO(
            name=name,
            brand_name=brand_name,
            price=serializer.validated_data["price"],
        )
        try:
            created = await service.create_product(dto)
        except ConstraintViolationError:
            # lost the race against a concurrent create
            return _duplicate_response(name, brand_name)

        return _product_response(created, status.HTTP_201_CREATED)


class ProductDetailView(APIView):
    """View for reading, replacing and deleting a product by id."""

    @extend_schema(
        operation_id="get_product",
        summary="Get Product",
        description="Return the product with the given id.",
        tags=["Products"],
        responses={
            200: ProductEnvelopeSerializer,
            404: {"description": "Product not found"},
            **ERROR_RESPONSES,
        },
    )
    def get(self, request: Request, product_id: int, **kwargs) -> Response:
        """Get a product by id."""
        return async_to_sync(self._handle_get_product)(request, product_id)

    async def _handle_get_product(self, request: Request, product_id: int) -> Response:
        """Async handler for get product."""
        product = await get_product_service().get_product_by_id(product_id)
        if not product:
            return _errors_response(
                f"We can't find any product by Id '{product_id}'", status.HTTP_404_NOT_FOUND
            )
        return _product_response(product)

    @extend_schema(
        operation_id="update_product",
        summary="Update Product",
        description="Replace the name, brand name and price of the product with the given id.",
        tags=["Products"],
        request=ProductRequestSerializer,
        responses={
            200: ProductEnvelopeSerializer,
            400: {"description": "Validation failed"},
            404: {"description": "Product not found"},
            **ERROR_RESPONSES,
        },
    )
    def put(self, request: Request, product_id: int, **kwargs) -> Response:
        """Update a product."""
        return async_to_sync(self._handle_update_product)(request, product_id)

    async def _handle_update_product(self, request: Request, product_id: int) -> Response:
        """Async handler for update product."""
        serializer = ProductRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return _validation_response(serializer.errors)

        service = get_product_service()
        existing = await service.get_product_by_id(product_id)
        if not existing:
            return _errors_response(
                "We can't update requested product because requested product cannot be found",
                status.HTTP_404_NOT_FOUND,
            )

        dto = ProductDTO(
            id=product_id,
            name=serializer.validated_data["name"],
            brand_name=serializer.validated_data["brand_name"],
            price=serializer.validated_data["price"],
        )
        updated = await service.update_product(dto)
        return _product_response(updated)

    @extend_schema(
        operation_id="delete_product",
        summary="Delete Product",
        description="Delete the product with the given id.",
        tags=["Products"],
        responses={
            200: DeleteResultSerializer,
            404: {"description": "Product not found"},
            **ERROR_RESPONSES,
        },
    )
    def delete(self, request: Request, product_id: int, **kwargs) -> Response:
        """Delete a product."""
        return async_to_sync(self._handle_delete_product)(request, product_id)

    async def _handle_delete_product(self, request: Request, product_id: int) -> Response:
        """Async handler for delete product."""
        service = get_product_service()
        existing = await service.get_product_by_id(product_id)
        if not existing:
            return _errors_response(
                "We can't delete requested product because requested product cannot be found",
                status.HTTP_404_NOT_FOUND,
            )

        deleted = await service.delete_product(existing)
        result = (
            "Requested product is deleted" if deleted else "Requested product cannot be deleted"
        )
        return Response({"result": result}, status=status.HTTP_200_OK)


class ProductByNameView(APIView):
    """View for looking up a product by name."""

    @extend_schema(
        operation_id="get_product_by_name",
        summary="Get Product By Name",
        description="Return the product with the given name (case-insensitive).",
        tags=["Products"],
        responses={
            200: ProductEnvelopeSerializer,
            404: {"description": "Product not found"},
            **ERROR_RESPONSES,
        },
    )
    def get(self, request: Request, name: str, **kwargs) -> Response:
        """Get a product by name."""
        return async_to_sync(self._handle_get_product_by_name)(request, name)

    async def _handle_get_product_by_name(self, request: Request, name: str) -> Response:
        """Async handler for get product by name."""
        product = await get_product_service().get_product_by_name(name)
        if not product:
            return _errors_response(
                f"We can't find any product by Name '{name}'", status.HTTP_404_NOT_FOUND
            )
        return _product_response(product)


class ProductsByBrandNameView(APIView):
    """View for listing the products of a brand."""

    @extend_schema(
        operation_id="list_products_by_brand_name",
        summary="List Products By Brand Name",
        description="Return the products sold under the given brand name (case-insensitive).",
        tags=["Products"],
        responses={200: ProductListEnvelopeSerializer, **ERROR_RESPONSES},
    )
    def get(self, request: Request, brand_name: str, **kwargs) -> Response:
        """List products by brand name."""
        return async_to_sync(self._handle_list_products_by_brand_name)(request, brand_name)

    async def _handle_list_products_by_brand_name(
        self, request: Request, brand_name: str
    ) -> Response:
        """Async handler for list products by brand name."""
        products = await get_product_service().list_products_by_brand_name(brand_name)
        return _products_response(products)


class ProductByNameAndBrandNameView(APIView):
    """View for looking up a product by name and brand name."""

    @extend_schema(
        operation_id="get_product_by_name_and_brand_name",
        summary="Get Product By Name And Brand Name",
        description="Return the product with the given name and brand name (case-insensitive).",
        tags=["Products"],
        responses={
            200: ProductEnvelopeSerializer,
            404: {"description": "Product not found"},
            **ERROR_RESPONSES,
        },
    )
    def get(self, request: Request, name: str, brand_name: str, **kwargs) -> Response:
        """Get a product by name and brand name."""
        return async_to_sync(self._handle_get_product_by_name_and_brand)(
            request, name, brand_name
        )

    async def _handle_get_product_by_name_and_brand(
        self, request: Request, name: str, brand_name: str
    ) -> Response:
        """Async handler for get product by name and brand name."""
        product = await get_product_service().get_product_by_name_and_brand(name, brand_name)
        if not product:
            return _errors_response(
                f"We can't find the product by Name '{name}' and Brand Name '{brand_name}'",
                status.HTTP_404_NOT_FOUND,
            )
        return _product_response(product)
