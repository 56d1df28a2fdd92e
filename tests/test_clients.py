HEADERS = {"X-Producer-Id": "farm-1"}


def create(client, **overrides):
    payload = {"name": "Green Grocers", "email": "orders@greengrocers.eu", "phone": "+33 1 23 45 67"}
    payload.update(overrides)
    return client.post("/api/v1/clients/", json=payload, headers=HEADERS)


def test_create_and_get_client(client, company):
    response = create(client)
    assert response.status_code == 200
    client_id = response.json()["id"]

    fetched = client.get(f"/api/v1/clients/{client_id}", headers=HEADERS).json()
    assert fetched["name"] == "Green Grocers"
    assert fetched["email"] == "orders@greengrocers.eu"


def test_invalid_email_is_rejected(client, company):
    assert create(client, email="not-an-email").status_code == 422


def test_list_is_sorted_and_searchable(client, company):
    create(client, name="Zeta Bakery")
    create(client, name="Alpha Mills")

    names = [c["name"] for c in client.get("/api/v1/clients/", headers=HEADERS).json()]
    assert names == ["Alpha Mills", "Zeta Bakery"]

    found = client.get("/api/v1/clients/?search=bak", headers=HEADERS).json()
    assert [c["name"] for c in found] == ["Zeta Bakery"]


def test_update_client(client, company):
    client_id = create(client).json()["id"]
    response = client.put(f"/api/v1/clients/{client_id}", json={"details": "Pays on delivery"}, headers=HEADERS)
    assert response.json()["details"] == "Pays on delivery"
    assert response.json()["name"] == "Green Grocers"


def test_clients_are_scoped_to_owner(client, company, other_company):
    client_id = create(client).json()["id"]
    response = client.get(f"/api/v1/clients/{client_id}", headers={"X-Producer-Id": other_company.id})
    assert response.status_code == 404


def test_bulk_delete_clients(client, company, other_company):
    first = create(client).json()["id"]
    second = create(client, name="Farm Shop").json()["id"]

    response = client.delete(
        f"/api/v1/clients/?ids={first}&ids={second}", headers={"X-Producer-Id": other_company.id}
    )
    assert response.json()["deleted"] == 0

    response = client.delete(f"/api/v1/clients/?ids={first}&ids={second}", headers=HEADERS)
    assert response.json()["deleted"] == 2
