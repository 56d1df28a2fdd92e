from decimal import Decimal

HEADERS = {"X-Producer-Id": "farm-1"}


def log_movement(client, headers=HEADERS, **overrides):
    payload = {
        "product_name": "Corn",
        "direction": "add",
        "quantity": "500",
        "unit": "kg",
        "reason": "harvest",
    }
    payload.update(overrides)
    return client.post("/api/v1/inventory/movements", json=payload, headers=headers)


def test_missing_identity_is_unauthorized(client, company):
    response = client.get("/api/v1/inventory/")
    assert response.status_code == 401


def test_unknown_producer_is_not_found(client, company):
    response = client.get("/api/v1/inventory/", headers={"X-Producer-Id": "nobody"})
    assert response.status_code == 404


def test_units_endpoint_lists_conversion_table(client):
    response = client.get("/api/v1/inventory/units")
    assert response.status_code == 200
    units = {u["key"]: u for u in response.json()}
    assert units["tons"]["type"] == "weight"
    assert units["gal"]["type"] == "volume"
    assert units["doz"]["label"] == "Dozen"


def test_record_movement_endpoint(client, company):
    response = log_movement(client)
    assert response.status_code == 200
    body = response.json()
    assert Decimal(body["item"]["quantity"]) == Decimal("500")
    assert Decimal(body["ledger_entry"]["amount"]) == Decimal("500")
    assert body["ledger_entry"]["product_name"] == "Corn"
    assert body["transaction"] is None
    assert body["warning"] is None


def test_record_movement_with_conversion(client, company):
    log_movement(client, quantity="200")
    response = log_movement(client, quantity="1", unit="tons")

    body = response.json()
    assert Decimal(body["item"]["quantity"]) == Decimal("1200")
    assert body["item"]["unit"] == "kg"
    assert Decimal(body["ledger_entry"]["amount"]) == Decimal("1000")
    assert body["converted_from"]["unit"] == "tons"


def test_subtract_unknown_product_is_404(client, company):
    response = log_movement(client, direction="subtract", reason="sale")
    assert response.status_code == 404


def test_insufficient_stock_is_400(client, company):
    log_movement(client)
    response = log_movement(client, direction="subtract", quantity="600", reason="sale")
    assert response.status_code == 400
    assert "Insufficient stock" in response.json()["detail"]

    ledger = client.get("/api/v1/inventory/ledger", headers=HEADERS).json()
    assert len(ledger) == 1


def test_priced_sale_links_transaction(client, company):
    log_movement(client, product_name="Eggs", quantity="30", unit="units")
    response = log_movement(
        client, product_name="Eggs", direction="subtract", quantity="10",
        unit="units", reason="sale", unit_price="5"
    )

    body = response.json()
    assert body["transaction"]["transaction_type"] == "income"
    assert body["transaction"]["category"] == "sales"
    assert Decimal(body["transaction"]["amount"]) == Decimal("50")
    assert body["ledger_entry"]["transaction_id"] == body["transaction"]["id"]


def test_invalid_movement_payload(client, company):
    assert log_movement(client, quantity="0").status_code == 422
    assert log_movement(client, direction="move").status_code == 422


def test_employee_works_on_employer_inventory(client, company, employee):
    log_movement(client, headers={"X-Producer-Id": employee.id})

    items = client.get("/api/v1/inventory/", headers=HEADERS).json()
    assert [i["product_name"] for i in items] == ["Corn"]


def test_create_rejects_duplicate_names(client, company):
    payload = {"product_name": "Potatoes", "unit": "kg", "quantity": "10"}
    assert client.post("/api/v1/inventory/", json=payload, headers=HEADERS).status_code == 200

    payload["product_name"] = "POTATOES"
    response = client.post("/api/v1/inventory/", json=payload, headers=HEADERS)
    assert response.status_code == 409


def test_list_items_carries_last_reason(client, company):
    log_movement(client)
    log_movement(client, direction="subtract", quantity="5", reason="spoilage")

    items = client.get("/api/v1/inventory/", headers=HEADERS).json()
    assert items[0]["last_reason"] == "spoilage"


def test_update_item_name_and_unit(client, company):
    item_id = log_movement(client).json()["item"]["id"]

    response = client.put(
        f"/api/v1/inventory/{item_id}",
        json={"product_name": "Sweet Corn", "unit": "tons"},
        headers=HEADERS,
    )
    assert response.status_code == 200
    assert response.json()["product_name"] == "Sweet Corn"
    assert response.json()["unit"] == "tons"


def test_items_of_other_owner_are_hidden(client, company, other_company):
    item_id = log_movement(client).json()["item"]["id"]

    response = client.get(f"/api/v1/inventory/{item_id}", headers={"X-Producer-Id": other_company.id})
    assert response.status_code == 404


def test_bulk_delete_removes_items_and_ledger(client, company):
    first = log_movement(client).json()["item"]["id"]
    second = log_movement(client, product_name="Oats").json()["item"]["id"]

    response = client.delete(f"/api/v1/inventory/?ids={first}&ids={second}", headers=HEADERS)
    assert response.json()["deleted"] == 2
    assert client.get("/api/v1/inventory/", headers=HEADERS).json() == []
    assert client.get("/api/v1/inventory/ledger", headers=HEADERS).json() == []


def test_ledger_is_newest_first(client, company):
    log_movement(client)
    log_movement(client, direction="subtract", quantity="20", reason="sale")

    ledger = client.get("/api/v1/inventory/ledger", headers=HEADERS).json()
    assert [e["reason"] for e in ledger] == ["sale", "harvest"]
    assert Decimal(ledger[0]["amount"]) == Decimal("-20")


def test_movement_too_small_for_item_unit_is_bad_request(client, company):
    log_movement(client, product_name="Wheat", quantity="5", unit="tons")

    response = log_movement(client, product_name="Wheat", quantity="400", unit="g")

    assert response.status_code == 400
    assert "too small" in response.json()["detail"]
    ledger = client.get("/api/v1/inventory/ledger", headers=HEADERS).json()
    assert len(ledger) == 1


def test_listing_reads_last_reason_in_one_query(client, company):
    from sqlalchemy import event
    from database import engine

    for name in ("Corn", "Beans", "Rye"):
        log_movement(client, product_name=name)
        log_movement(client, product_name=name, direction="subtract", quantity="1", reason=f"{name} sold")

    statements = []

    def count(conn, cursor, statement, *args):
        if "inventory_ledger" in statement:
            statements.append(statement)

    event.listen(engine, "before_cursor_execute", count)
    try:
        items = client.get("/api/v1/inventory/", headers=HEADERS).json()
    finally:
        event.remove(engine, "before_cursor_execute", count)

    assert {i["product_name"]: i["last_reason"] for i in items} == {
        "Beans": "Beans sold", "Corn": "Corn sold", "Rye": "Rye sold"
    }
    assert len(statements) == 1
