import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.integrations.fastapi import register_exception_handlers
from storefront.api import cart_router, product_router, register_api_error_handler, user_router
from storefront.config import get_settings


@pytest.fixture()
def app(settings):
    app = FastAPI()
    app.include_router(user_router)
    app.include_router(product_router)
    app.include_router(cart_router)
    register_exception_handlers(app)
    register_api_error_handler(app)
    app.dependency_overrides[get_settings] = lambda: settings
    return app


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def user_id(client):
    response = client.post(
        "/users",
        json={"name": "crio-user", "email": "crio-user@gmail.com", "password": "$2a$09$credential-hash"},
    )
    return response.json()["user_id"]


@pytest.fixture()
def create_product(client):
    def _create(name="UNIFACTOR Mens Running Shoes", cost=50, category="Fashion", rating=5):
        response = client.post(
            "/products",
            json={"name": name, "category": category, "cost": cost, "rating": rating},
        )
        return response.json()["product_id"]

    return _create
