import pytest


async def _create_product(api_client, user, **overrides):
    payload = {"name": "Club Hoodie", "price": 25, "cost": 12, "stock": "", "category": "merchandise"}
    payload.update(overrides)
    response = await api_client.post("/api/products", json=payload, headers=user["headers"])
    assert response.status_code == 201, response.text
    return response.json()["product"]


async def _record_sale(api_client, user, product, **overrides):
    payload = {
        "product": product["id"],
        "quantity": 2,
        "unitPrice": product["price"],
        "buyer": {"name": "Sam", "email": "sam@example.com"},
        "paymentMethod": "card",
    }
    payload.update(overrides)
    response = await api_client.post("/api/sales", json=payload, headers=user["headers"])
    assert response.status_code == 201, response.text
    return response.json()["sale"]


@pytest.mark.asyncio
async def test_create_and_list_products(api_client, lead, member):
    product = await _create_product(api_client, lead, tags=["winter", "apparel"])
    assert product["stock"] == 0
    assert product["isActive"] is True
    assert product["tags"] == ["winter", "apparel"]
    assert product["club"]["name"] == "Default Club"

    await _create_product(api_client, lead, name="Mug", price=8, cost=3)

    response = await api_client.get("/api/products", headers=member["headers"])
    assert response.status_code == 200
    assert [p["name"] for p in response.json()["products"]] == ["Mug", "Club Hoodie"]


@pytest.mark.asyncio
async def test_negative_price_rejected(api_client, lead):
    response = await api_client.post(
        "/api/products", json={"name": "Bad", "price": -1, "cost": 0}, headers=lead["headers"]
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_record_sale(api_client, lead):
    product = await _create_product(api_client, lead)
    sale = await _record_sale(api_client, lead, product)

    assert sale["totalAmount"] == 50
    assert sale["product"] == {"id": product["id"], "name": "Club Hoodie", "price": 25}
    assert sale["seller"]["id"] == lead["id"]
    assert sale["buyer"] == {"name": "Sam", "email": "sam@example.com", "phone": None}
    assert sale["status"] == "completed"


@pytest.mark.asyncio
async def test_submitted_total_is_kept(api_client, lead):
    product = await _create_product(api_client, lead)
    sale = await _record_sale(api_client, lead, product, quantity=3, totalAmount=60)
    assert sale["totalAmount"] == 60


@pytest.mark.asyncio
async def test_sale_for_unknown_product(api_client, lead):
    response = await api_client.post(
        "/api/sales", json={"product": "ghost", "quantity": 1, "unitPrice": 1}, headers=lead["headers"]
    )
    assert response.status_code == 404
    assert response.json()["message"] == "Product not found"


@pytest.mark.asyncio
async def test_sales_list_includes_analytics(api_client, lead, member):
    hoodie = await _create_product(api_client, lead)
    mug = await _create_product(api_client, lead, name="Mug", price=8, cost=3)
    await _record_sale(api_client, lead, hoodie, quantity=2)
    await _record_sale(api_client, lead, mug, quantity=5)
    await _record_sale(api_client, lead, hoodie, quantity=1)

    response = await api_client.get("/api/sales", headers=member["headers"])
    assert response.status_code == 200
    body = response.json()
    assert len(body["sales"]) == 3
    assert body["analytics"] == {
        "totalSales": 115,
        "salesByProduct": {
            "Club Hoodie": {"quantity": 3, "amount": 75},
            "Mug": {"quantity": 5, "amount": 40},
        },
        "totalTransactions": 3,
    }


@pytest.mark.asyncio
async def test_sales_chart(api_client, lead, member):
    product = await _create_product(api_client, lead)
    await _record_sale(api_client, lead, product)

    forbidden = await api_client.get("/api/sales/analytics", headers=member["headers"])
    assert forbidden.status_code == 403

    response = await api_client.get("/api/sales/analytics", headers=lead["headers"])
    assert response.status_code == 200
    segments = response.json()["segments"]
    assert len(segments) == 1
    assert segments[0]["productName"] == "Club Hoodie"
    assert segments[0]["percentage"] == 100
    assert segments[0]["startAngle"] == 0
    assert segments[0]["endAngle"] == 360
    assert segments[0]["color"] == "#3B82F6"


@pytest.mark.asyncio
async def test_empty_chart(api_client, board):
    response = await api_client.get("/api/sales/analytics", headers=board["headers"])
    assert response.json()["segments"] == []
    assert response.json()["analytics"]["totalTransactions"] == 0
