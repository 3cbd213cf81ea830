import pytest
from fastapi.testclient import TestClient

from customer_success_api.app.main import create_app
from customer_success_api.app.services.churn_service import ChurnModel
from customer_success_api.app.services.customer_service import CustomerStore


@pytest.fixture()
def store():
    return CustomerStore()


@pytest.fixture()
def app(store):
    return create_app(store=store, churn_model=ChurnModel.create(seed=7))


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def make_customer(client):
    def _make(name="Test Customer", email="test@example.com"):
        r = client.post("/api/customers", json={"name": name, "email": email})
        assert r.status_code == 201, r.text
        return r.json()

    return _make
