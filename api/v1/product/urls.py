"""
URL configuration for product API endpoints.
"""

from django.urls import path

from api.v1.product import views

app_name = "products"

urlpatterns = [
    path(
        "products",
        views.ProductListView.as_view(),
        name="product-list",
    ),
    path(
        "products/brands/<str:brand_name>",
        views.ProductsByBrandNameView.as_view(),
        name="products-by-brand-name",
    ),
    path(
        "products/<int:product_id>",
        views.ProductDetailView.as_view(),
        name="product-detail",
    ),
    path(
        "products/<str:name>/brands/<str:brand_name>",
        views.ProductByNameAndBrandNameView.as_view(),
        name="product-by-name-and-brand-name",
    ),
    path(
        "products/<str:name>",
        views.ProductByNameView.as_view(),
        name="product-by-name",
    ),
]
