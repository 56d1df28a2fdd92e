from crud.producers import resolve_owner_id
from models.producer import Producer, ProducerRole

OWNER = {"X-Producer-Id": "farm-1"}
WORKER = {"X-Producer-Id": "worker-1"}


def test_owner_resolution(company, employee):
    assert resolve_owner_id(company) == company.id
    assert resolve_owner_id(employee) == company.id


def test_employee_without_employer_owns_own_data(db):
    loner = Producer(id="solo", name="Dora", role=ProducerRole.EMPLOYEE)
    db.add(loner)
    db.commit()
    assert resolve_owner_id(loner) == "solo"


def test_profile_upsert_creates_with_defaults(client, db):
    response = client.put("/api/v1/producers/me", json={}, headers={"X-Producer-Id": "new-farm"})
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == "new-farm"
    assert body["role"] == "company"
    assert body["company_name"] == "My Farm"


def test_profile_upsert_updates_existing(client, company):
    response = client.put("/api/v1/producers/me", json={"produce": "Wheat", "location": "Lyon"}, headers=OWNER)
    assert response.json()["produce"] == "Wheat"
    assert response.json()["name"] == "Anna"


def test_profile_upsert_rejects_unknown_employer(client, db):
    response = client.put(
        "/api/v1/producers/me",
        json={"role": "employee", "employer_id": "ghost"},
        headers={"X-Producer-Id": "someone"},
    )
    assert response.status_code == 400


def test_list_employees(client, company, employee):
    employees = client.get("/api/v1/producers/me/employees", headers=OWNER).json()
    assert [e["id"] for e in employees] == ["worker-1"]


def test_company_creates_and_assigns_task(client, company, employee):
    response = client.post("/api/v1/tasks/", json={
        "title": " Water the south field ",
        "priority": "high",
        "assigned_to": employee.id,
        "due_date": "2026-11-01",
    }, headers=OWNER)

    assert response.status_code == 200
    task = response.json()
    assert task["title"] == "Water the south field"
    assert task["status"] == "pending"
    assert task["priority"] == "high"


def test_employee_cannot_create_task(client, company, employee):
    response = client.post("/api/v1/tasks/", json={"title": "Take a day off"}, headers=WORKER)
    assert response.status_code == 403


def test_assignee_must_be_own_employee(client, company, other_company):
    response = client.post("/api/v1/tasks/", json={"title": "Fix fence", "assigned_to": other_company.id}, headers=OWNER)
    assert response.status_code == 400


def test_employee_sees_and_updates_assigned_tasks(client, company, employee):
    client.post("/api/v1/tasks/", json={"title": "Unassigned"}, headers=OWNER)
    task_id = client.post("/api/v1/tasks/", json={"title": "Feed goats", "assigned_to": employee.id}, headers=OWNER).json()["id"]

    tasks = client.get("/api/v1/tasks/", headers=WORKER).json()
    assert [t["title"] for t in tasks] == ["Feed goats"]

    response = client.patch(f"/api/v1/tasks/{task_id}/status", json={"status": "done"}, headers=WORKER)
    assert response.json()["status"] == "done"

    open_tasks = client.get("/api/v1/tasks/?include_done=false", headers=OWNER).json()
    assert [t["title"] for t in open_tasks] == ["Unassigned"]


def test_outsider_cannot_update_task(client, company, other_company):
    task_id = client.post("/api/v1/tasks/", json={"title": "Harvest"}, headers=OWNER).json()["id"]
    response = client.patch(
        f"/api/v1/tasks/{task_id}/status", json={"status": "in_progress"},
        headers={"X-Producer-Id": other_company.id},
    )
    assert response.status_code == 404


def test_bulk_delete_tasks(client, company, employee):
    task_id = client.post("/api/v1/tasks/", json={"title": "Harvest"}, headers=OWNER).json()["id"]

    assert client.delete(f"/api/v1/tasks/?ids={task_id}", headers=WORKER).status_code == 403
    assert client.delete(f"/api/v1/tasks/?ids={task_id}", headers=OWNER).json()["deleted"] == 1
    assert client.get("/api/v1/tasks/", headers=OWNER).json() == []
