from __future__ import annotations

import logging
from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from inventory_backend.database import ProductRepository


def _broken_store(*args: object, **kwargs: object) -> None:
    raise OperationalError("SELECT * FROM products", {}, Exception("db password leaked"))


def test_list_products_on_empty_store(client: TestClient) -> None:
    response = client.get("/api/products")

    assert response.status_code == 200
    assert response.json() == {"status": "success", "data": []}


def test_create_product_success(client: TestClient, product_payload) -> None:
    started = datetime.now(UTC).replace(microsecond=0, tzinfo=None)

    response = client.post("/api/products", json=product_payload)

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "success"
    data = body["data"]
    assert isinstance(data["id"], int)
    assert data["name"] == "Widget"
    assert data["price"] == 10
    assert data["description"] is None
    created_at = datetime.fromisoformat(data["createdAt"]).replace(tzinfo=None)
    assert created_at >= started

    listed = client.get("/api/products").json()["data"]
    assert [product["id"] for product in listed] == [data["id"]]


def test_create_product_trims_name(client: TestClient, product_payload) -> None:
    response = client.post(
        "/api/products", json={**product_payload, "name": "   Widget  "}
    )

    assert response.status_code == 201
    assert response.json()["data"]["name"] == "Widget"


def test_create_product_with_short_name_fails(client: TestClient) -> None:
    response = client.post(
        "/api/products",
        json={"name": "ab", "category": "Tools", "price": 10, "stock": 1},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["status"] == "fail"
    assert [error["field"] for error in body["errors"]] == ["name"]
    assert client.get("/api/products").json()["data"] == []


@pytest.mark.parametrize("missing", ["name", "category", "price", "stock"])
def test_create_product_missing_field(
    client: TestClient, product_payload, missing: str
) -> None:
    del product_payload[missing]

    response = client.post("/api/products", json=product_payload)

    assert response.status_code == 400
    assert missing in {error["field"] for error in response.json()["errors"]}


@pytest.mark.parametrize(
    "overrides", [{"price": 0}, {"price": -1}, {"stock": -1}]
)
def test_create_product_rejects_non_positive_price_and_negative_stock(
    client: TestClient, product_payload, overrides: dict[str, int]
) -> None:
    response = client.post("/api/products", json={**product_payload, **overrides})

    assert response.status_code == 400
    assert response.json()["status"] == "fail"


def test_create_product_rejects_overflowing_price(client: TestClient) -> None:
    response = client.post(
        "/api/products",
        content='{"name":"Widget","category":"Tools","price":1e400,"stock":1}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["status"] == "fail"
    assert [error["field"] for error in body["errors"]] == ["price"]
    assert client.get("/api/products").json()["data"] == []


@pytest.mark.parametrize(
    ("overrides", "field"), [({"price": "10"}, "price"), ({"stock": True}, "stock")]
)
def test_create_product_rejects_non_numeric_json_types(
    client: TestClient, product_payload, overrides: dict[str, object], field: str
) -> None:
    response = client.post("/api/products", json={**product_payload, **overrides})

    assert response.status_code == 400
    assert [error["field"] for error in response.json()["errors"]] == [field]
    assert client.get("/api/products").json()["data"] == []


def test_create_product_with_malformed_json(client: TestClient) -> None:
    response = client.post(
        "/api/products",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["status"] == "fail"
    assert body["errors"][0]["field"] == "body"


def test_create_product_without_body(client: TestClient) -> None:
    response = client.post("/api/products")

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "body"


def test_list_products_newest_first(client: TestClient, create_product) -> None:
    first = create_product(name="First")
    second = create_product(name="Second")
    third = create_product(name="Third")

    listed = client.get("/api/products").json()["data"]

    assert [product["id"] for product in listed] == [
        third["id"],
        second["id"],
        first["id"],
    ]


def test_partial_update_changes_only_supplied_fields(
    client: TestClient, create_product
) -> None:
    product = create_product(description="Steel")

    response = client.put(f"/api/products/{product['id']}", json={"stock": 5})

    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["stock"] == 5
    for unchanged in ("name", "category", "price", "description", "createdAt"):
        assert updated[unchanged] == product[unchanged]


def test_update_product_validates_supplied_fields(
    client: TestClient, create_product
) -> None:
    product = create_product()

    response = client.put(f"/api/products/{product['id']}", json={"price": 0})

    assert response.status_code == 400
    assert [error["field"] for error in response.json()["errors"]] == ["price"]
    stored = client.get("/api/products").json()["data"][0]
    assert stored["price"] == product["price"]


def test_update_product_rejects_overflowing_price(
    client: TestClient, create_product
) -> None:
    product = create_product()

    response = client.put(
        f"/api/products/{product['id']}",
        content='{"price":1e400}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert [error["field"] for error in response.json()["errors"]] == ["price"]
    stored = client.get("/api/products").json()["data"][0]
    assert stored["price"] == product["price"]


def test_update_product_with_invalid_id(client: TestClient) -> None:
    response = client.put("/api/products/abc", json={"stock": 1})

    assert response.status_code == 400
    assert response.json()["errors"] == [{"field": "id", "message": "Invalid ID"}]


def test_update_missing_product_returns_404(client: TestClient) -> None:
    response = client.put("/api/products/999999", json={"stock": 1})

    assert response.status_code == 404
    assert response.json() == {"status": "fail", "message": "Product not found"}


def test_delete_product_then_repeat_returns_404(
    client: TestClient, create_product
) -> None:
    product = create_product()

    first = client.delete(f"/api/products/{product['id']}")
    second = client.delete(f"/api/products/{product['id']}")

    assert first.status_code == 200
    assert first.json() == {
        "status": "success",
        "message": "Product deleted successfully",
    }
    assert second.status_code == 404
    assert second.json()["status"] == "fail"


def test_delete_unknown_product(client: TestClient) -> None:
    response = client.delete("/api/products/999999")

    assert response.status_code == 404
    assert response.json() == {"status": "fail", "message": "Product not found"}


def test_store_failure_is_logged_but_not_leaked(
    client: TestClient,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    monkeypatch.setattr(ProductRepository, "list_all", _broken_store)

    with caplog.at_level(logging.ERROR, logger="inventory_backend"):
        response = client.get("/api/products")

    assert response.status_code == 500
    assert response.json() == {"status": "error", "message": "Failed to load products"}
    assert "password" not in response.text
    errors = [record for record in caplog.records if record.levelno == logging.ERROR]
    assert len(errors) == 1
    assert errors[0].exc_info is not None


def test_store_failure_on_update_returns_500(
    client: TestClient, create_product, monkeypatch: pytest.MonkeyPatch
) -> None:
    product = create_product()
    monkeypatch.setattr(ProductRepository, "update_by_id", _broken_store)

    response = client.put(f"/api/products/{product['id']}", json={"stock": 2})

    assert response.status_code == 500
    assert response.json() == {"status": "error", "message": "Failed to update product"}
