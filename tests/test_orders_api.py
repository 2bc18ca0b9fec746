from fastapi.testclient import TestClient
from orderboard.main import app

client = TestClient(app)


def create(number="ORD1", customer="Jane Doe", order_type="instalacion", delivery_date="2025-08-20", **extra):
    payload = {"order_number": number, "customer_name": customer, "type": order_type, "delivery_date": delivery_date}
    payload.update(extra)
    r = client.post("/api/v1/orders/", json=payload)
    assert r.status_code == 200, r.text
    return r.json()


def test_create_and_read_order():
    order = create()
    assert order["type"] == "instalacion"
    assert order["color"] == "bg-blue-500"
    assert order["archived"] is False
    assert order["created_at"] is not None

    r = client.get(f"/api/v1/orders/{order['id']}")
    assert r.status_code == 200
    assert r.json()["order_number"] == "ORD1"


def test_english_type_name_is_accepted():
    assert create(order_type="pickup")["type"] == "recogida"


def test_unknown_type_is_rejected():
    r = client.post("/api/v1/orders/", json={"order_number": "X", "customer_name": "Y", "type": "express"})
    assert r.status_code == 422


def test_blank_customer_is_rejected():
    r = client.post("/api/v1/orders/", json={"order_number": "X", "customer_name": "  ", "type": "parcial"})
    assert r.status_code == 422


def test_order_without_date():
    assert create(delivery_date=None)["delivery_date"] is None


def test_list_orders_newest_first():
    create("A")
    create("B")
    r = client.get("/api/v1/orders/")
    assert [o["order_number"] for o in r.json()] == ["B", "A"]


def test_update_only_touches_given_fields():
    order = create()
    r = client.put(f"/api/v1/orders/{order['id']}", json={"type": "completo"})
    assert r.status_code == 200
    data = r.json()
    assert data["type"] == "completo"
    assert data["color"] == "bg-green-500"
    assert data["customer_name"] == "Jane Doe"


def test_update_rejects_null_archived():
    order = create()
    r = client.put(f"/api/v1/orders/{order['id']}", json={"archived": None})
    assert r.status_code == 422
    assert client.get(f"/api/v1/orders/{order['id']}").json()["archived"] is False

    r = client.put(f"/api/v1/orders/{order['id']}", json={"archived": True})
    assert r.status_code == 200
    assert r.json()["archived"] is True


def test_missing_order_returns_404():
    assert client.get("/api/v1/orders/999").status_code == 404
    assert client.put("/api/v1/orders/999", json={"archived": True}).status_code == 404
    assert client.delete("/api/v1/orders/999").status_code == 404
    assert client.post("/api/v1/orders/999/archive").status_code == 404


def test_confirm_delivery_sets_today():
    order = create(delivery_date=None)
    r = client.post(f"/api/v1/orders/{order['id']}/confirm-delivery", params={"today": "2025-08-15"})
    assert r.status_code == 200
    assert r.json()["delivery_date"] == "2025-08-15"


def test_archive_and_restore():
    order = create()
    assert client.post(f"/api/v1/orders/{order['id']}/archive").json()["archived"] is True
    assert client.post(f"/api/v1/orders/{order['id']}/restore").json()["archived"] is False


def test_delete_one_many_and_all():
    a, b, c, d = (create(n) for n in "ABCD")
    assert client.delete(f"/api/v1/orders/{a['id']}").status_code == 200

    r = client.post("/api/v1/orders/bulk-delete", json={"ids": [b["id"], c["id"], 12345]})
    assert r.json()["deleted"] == 2

    r = client.delete("/api/v1/orders/")
    assert r.json()["deleted"] == 1
    assert client.get("/api/v1/orders/").json() == []


def test_health_and_root():
    assert client.get("/health/db").json()["status"] == "healthy"
    assert client.get("/").json()["status"] == "running"
