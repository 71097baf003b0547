from django.apps import AppConfig


class ProductsConfig(AppConfig):
    name = "modules.products"
    label = "products"

    def ready(self) -> None:
        from modules.core.database import connect_document_store

        connect_document_store()
