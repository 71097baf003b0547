"""Product URL configuration.

A static table: each path binds exactly one verb to one ViewSet action,
so the permission chain of the action applies to that route only.
"""

from __future__ import annotations

from django.urls import path

from modules.products.views import ProductViewSet

urlpatterns = [
    path("all", ProductViewSet.as_view({"get": "list"}), name="product-list"),
    path("save", ProductViewSet.as_view({"post": "create"}), name="product-save"),
    path(
        "update/<str:pk>",
        ProductViewSet.as_view({"put": "update"}),
        name="product-update",
    ),
    path(
        "delete/<str:pk>",
        ProductViewSet.as_view({"delete": "destroy"}),
        name="product-delete",
    ),
    path("<str:pk>", ProductViewSet.as_view({"get": "retrieve"}), name="product-detail"),
]
