import asyncio
import random

from customer_success_api.app.schemas.customer import Customer, CustomerCreate
from customer_success_api.app.services.customer_service import CustomerService, CustomerStore


def _customer(customer_id, name="Test Customer"):
    return Customer(id=customer_id, name=name, email="test@example.com", health_score=50.0)


def test_store_preserves_insertion_order():
    store = CustomerStore()
    for customer_id in ("b", "a", "c"):
        store.append(_customer(customer_id))
    assert [c.id for c in store.list()] == ["b", "a", "c"]
    assert len(store) == 3


def test_store_list_is_a_copy():
    store = CustomerStore()
    store.append(_customer("a"))
    listed = store.list()
    listed.clear()
    assert len(store) == 1


def test_find_by_id():
    store = CustomerStore()
    store.append(_customer("a", name="Alice"))
    store.append(_customer("b", name="Bob"))
    assert store.find_by_id("b").name == "Bob"
    assert store.find_by_id("missing") is None


def test_find_by_id_on_empty_store():
    assert CustomerStore().find_by_id("anything") is None


def test_append_does_not_check_duplicates():
    store = CustomerStore()
    store.append(_customer("a"))
    store.append(_customer("a"))
    assert len(store) == 2


def test_create_customer_uses_rng_for_health_score():
    store = CustomerStore()
    service = CustomerService(store, rng=random.Random(1))
    expected = random.Random(1).random() * 100

    customer = asyncio.run(
        service.create_customer(CustomerCreate(name="Test Customer", email="test@example.com"))
    )

    assert customer.health_score == expected
    assert store.find_by_id(customer.id) is customer


def test_health_score_range_over_many_customers():
    service = CustomerService(CustomerStore())
    data = CustomerCreate(name="Test Customer", email="test@example.com")

    async def create_many():
        return [await service.create_customer(data) for _ in range(200)]

    customers = asyncio.run(create_many())
    assert all(0 <= c.health_score < 100 for c in customers)
    assert len({c.id for c in customers}) == 200


def test_customer_serialises_health_score_alias():
    dumped = _customer("a").model_dump(by_alias=True)
    assert dumped == {
        "id": "a",
        "name": "Test Customer",
        "email": "test@example.com",
        "healthScore": 50.0,
    }
