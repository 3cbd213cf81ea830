import numpy as np
import pytest

from customer_success_api.app.schemas.customer import Customer
from customer_success_api.app.services.churn_service import ChurnModel, customer_features


def test_create_shapes():
    model = ChurnModel.create(seed=0)
    assert model.w1.shape == (4, 10)
    assert model.b1.shape == (10,)
    assert model.w2.shape == (10, 1)
    assert model.b2.shape == (1,)


def test_same_seed_same_weights():
    a = ChurnModel.create(seed=3)
    b = ChurnModel.create(seed=3)
    assert np.array_equal(a.w1, b.w1)
    assert np.array_equal(a.w2, b.w2)


def test_predict_is_a_probability():
    model = ChurnModel.create(seed=0)
    for features in ([0, 0, 0, 0], [1, 1, 1, 1], [0.3, 0.1, 0.2, 1.0], [100, -100, 50, 1]):
        p = model.predict(features)
        assert 0 < p < 1


def test_predict_rejects_wrong_length():
    model = ChurnModel.create(seed=0)
    with pytest.raises(ValueError):
        model.predict([0.1, 0.2, 0.3])


def test_train_reduces_loss_on_separable_data():
    rng = np.random.default_rng(0)
    x = rng.uniform(0, 1, size=(64, 4))
    x[:, 3] = 1.0
    y = (x[:, 0] < 0.5).astype(float)

    model = ChurnModel.create(seed=1)
    losses = model.train(x, y, epochs=300, learning_rate=0.5)

    assert len(losses) == 300
    assert losses[-1] < losses[0]


def test_train_rejects_mismatched_shapes():
    model = ChurnModel.create(seed=0)
    with pytest.raises(ValueError):
        model.train([[0.1, 0.2, 0.3]], [1])
    with pytest.raises(ValueError):
        model.train([[0.1, 0.2, 0.3, 1.0]], [1, 0])


def test_customer_features():
    customer = Customer(id="a", name="Ada", email="ada@example.com", health_score=42.0)
    assert customer_features(customer) == pytest.approx([0.42, 0.03, 0.15, 1.0])


def test_churn_endpoint(client, make_customer):
    created = make_customer()
    r = client.get(f"/api/customers/{created['id']}/churn")
    assert r.status_code == 200
    body = r.json()
    assert body["customerId"] == created["id"]
    assert 0 < body["churnProbability"] < 1
    assert body["placeholder"] is True


def test_churn_endpoint_is_stable_for_a_customer(client, make_customer):
    created = make_customer()
    first = client.get(f"/api/customers/{created['id']}/churn").json()
    second = client.get(f"/api/customers/{created['id']}/churn").json()
    assert first == second


def test_churn_endpoint_unknown_customer(client):
    r = client.get("/api/customers/missing/churn")
    assert r.status_code == 404
    assert r.json() == {"detail": "Customer not found"}
