import mongomock
import pytest

from rest_framework.test import APIClient

from modules.core.database import connect_document_store
from modules.core.tokens import issue_token
from modules.products.models import Product


@pytest.fixture(autouse=True)
def _document_store():
    """Point every document at an in-memory MongoDB for the test."""
    connect_document_store(mongo_client_class=mongomock.MongoClient)
    yield
    Product.drop_collection()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def admin_token():
    return issue_token("admin-user", "admin")


@pytest.fixture()
def customer_token():
    return issue_token("customer-user", "customer")


@pytest.fixture()
def admin_client(admin_token):
    """APIClient carrying a bearer token with the admin role."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {admin_token}")
    return client


@pytest.fixture()
def customer_client(customer_token):
    """APIClient carrying a bearer token without the admin role."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {customer_token}")
    return client


@pytest.fixture()
def product_payload():
    return {
        "id": 1,
        "name": "Widget Alpha",
        "price": 19.99,
        "currency": "USD",
        "image": "https://cdn.example.com/widget-alpha.png",
    }


@pytest.fixture()
def sample_product(product_payload):
    """A persisted Product document."""
    product = Product(
        product_id=product_payload["id"],
        name=product_payload["name"],
        price=product_payload["price"],
        currency=product_payload["currency"],
        image=product_payload["image"],
    )
    product.save()
    return product
