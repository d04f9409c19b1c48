"""End-to-end tests through the HTTP API."""

from conftest import register


def create_task(client, headers, assigned_to, title="Prepare demo"):
    response = client.post(
        "/api/tasks",
        json={"title": title, "description": "Slides and script", "assigned_to": assigned_to},
        headers=headers,
    )
    assert response.status_code == 201, response.json()
    return response.json()["data"]


def set_status(client, headers, task_id, status):
    return client.patch(f"/api/tasks/{task_id}/status", json={"status": status}, headers=headers)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_scenario_task_visibility(client):
    manager_id, manager = register(client, "Maria Manager", "maria@example.com", "Manager")
    employee_id, employee = register(client, "Evan Employee", "evan@example.com", "Employee")
    _, other = register(client, "Fay Employee", "fay@example.com", "Employee")

    task = create_task(client, manager, employee_id)
    assert task["status"] == "Pending"
    assert task["created_by"] == manager_id
    assert task["assigned_to_name"] == "Evan Employee"

    all_tasks = client.get("/api/tasks", headers=manager).json()["data"]
    assert [t["id"] for t in all_tasks] == [task["id"]]

    assigned = client.get("/api/tasks", headers=employee).json()["data"]
    assert [t["id"] for t in assigned] == [task["id"]]

    assert client.get("/api/tasks", headers=other).json()["data"] == []
    assert client.get(f"/api/tasks/{task['id']}", headers=other).status_code == 403


def test_scenario_complete_and_review(client):
    _, manager = register(client, "Maria Manager", "maria@example.com", "Manager")
    employee_id, employee = register(client, "Evan Employee", "evan@example.com", "Employee")
    task = create_task(client, manager, employee_id)

    assert set_status(client, employee, task["id"], "InProgress").json()["data"]["status"] == "InProgress"
    assert set_status(client, employee, task["id"], "Done").json()["data"]["status"] == "Done"

    response = client.post(
        f"/api/tasks/{task['id']}/reviews", json={"rating": 4, "comments": "Nice work"}, headers=manager
    )
    assert response.status_code == 201
    assert response.json()["message"] == "Task review added successfully."

    reviews = client.get(f"/api/tasks/{task['id']}/reviews", headers=employee).json()["data"]
    assert len(reviews) == 1
    assert reviews[0]["rating"] == 4
    assert reviews[0]["reviewer_name"] == "Maria Manager"


def test_scenario_review_before_done_is_rejected(client):
    _, manager = register(client, "Maria Manager", "maria@example.com", "Manager")
    employee_id, employee = register(client, "Evan Employee", "evan@example.com", "Employee")
    task = create_task(client, manager, employee_id)
    set_status(client, employee, task["id"], "InProgress")

    response = client.post(f"/api/tasks/{task['id']}/reviews", json={"rating": 5}, headers=manager)
    assert response.status_code == 409
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "You can only review completed tasks."

    assert client.get(f"/api/tasks/{task['id']}/reviews", headers=manager).json()["data"] == []


def test_scenario_non_assignee_cannot_change_status(client):
    _, manager = register(client, "Maria Manager", "maria@example.com", "Manager")
    employee_id, _ = register(client, "Evan Employee", "evan@example.com", "Employee")
    _, other = register(client, "Fay Employee", "fay@example.com", "Employee")
    task = create_task(client, manager, employee_id)

    response = set_status(client, other, task["id"], "Done")
    assert response.status_code == 403
    assert response.json()["message"] == "You can only update the status of your own tasks."

    current = client.get(f"/api/tasks/{task['id']}", headers=manager).json()["data"]
    assert current["status"] == "Pending"


def test_duplicate_registration_is_conflict(client):
    register(client, "Maria Manager", "maria@example.com", "Manager")
    response = client.post(
        "/api/auth/register",
        json={"full_name": "Maria Two", "email": "maria@example.com", "password": "secret123", "role": "Employee"},
    )
    assert response.status_code == 409
    assert response.json()["message"] == "Email already exists."


def test_register_validation_errors_use_envelope(client):
    response = client.post("/api/auth/register", json={"email": "nope", "password": "1"})
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Validation failed"
    assert body["success"] is False
    assert "The full_name field is required." in body["errors"]
    assert "error_kind" not in body


def test_login(client):
    register(client, "Maria Manager", "maria@example.com", "Manager")
    ok = client.post("/api/auth/login", json={"email": "maria@example.com", "password": "secret123"})
    assert ok.status_code == 200
    assert ok.json()["data"]["role"] == "Manager"

    bad = client.post("/api/auth/login", json={"email": "maria@example.com", "password": "wrong-password"})
    assert bad.status_code == 401
    assert bad.json()["message"] == "Invalid email or password."


def test_email_is_case_insensitive(client):
    register(client, "Maria Manager", "Maria@Example.com", "Manager")
    duplicate = client.post(
        "/api/auth/register",
        json={"full_name": "Maria Two", "email": "maria@example.com", "password": "secret123", "role": "Employee"},
    )
    assert duplicate.status_code == 409

    ok = client.post("/api/auth/login", json={"email": "MARIA@example.com", "password": "secret123"})
    assert ok.status_code == 200
    assert ok.json()["data"]["email"] == "maria@example.com"


def test_missing_or_bad_token_is_unauthorized(client):
    assert client.get("/api/tasks").status_code == 401
    response = client.get("/api/tasks", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.json()["message"] == "Could not validate credentials"


def test_role_gates(client):
    manager_id, manager = register(client, "Maria Manager", "maria@example.com", "Manager")
    employee_id, employee = register(client, "Evan Employee", "evan@example.com", "Employee")
    task = create_task(client, manager, employee_id)

    # managers cannot post progress updates, even on their own tasks
    own = create_task(client, manager, manager_id, "own")
    assert client.post(f"/api/tasks/{own['id']}/updates", json={"update_text": "x"}, headers=manager).status_code == 403

    # employees cannot edit, delete or review
    edit = {"title": "t", "description": "d", "assigned_to": employee_id, "status": "Done"}
    assert client.put(f"/api/tasks/{task['id']}", json=edit, headers=employee).status_code == 403
    assert client.delete(f"/api/tasks/{task['id']}", headers=employee).status_code == 403
    assert client.post(f"/api/tasks/{task['id']}/reviews", json={"rating": 3}, headers=employee).status_code == 403
    assert client.get("/api/users", headers=employee).status_code == 403


def test_employee_creates_task_only_for_self(client):
    _, manager = register(client, "Maria Manager", "maria@example.com", "Manager")
    employee_id, employee = register(client, "Evan Employee", "evan@example.com", "Employee")
    other_id, _ = register(client, "Fay Employee", "fay@example.com", "Employee")

    assert create_task(client, employee, employee_id)["created_by"] == employee_id
    response = client.post(
        "/api/tasks", json={"title": "t", "description": "d", "assigned_to": other_id}, headers=employee
    )
    assert response.status_code == 403


def test_progress_updates_flow(client):
    _, manager = register(client, "Maria Manager", "maria@example.com", "Manager")
    employee_id, employee = register(client, "Evan Employee", "evan@example.com", "Employee")
    task = create_task(client, manager, employee_id)

    for text in ("outline done", "draft done"):
        response = client.post(f"/api/tasks/{task['id']}/updates", json={"update_text": text}, headers=employee)
        assert response.status_code == 201

    updates = client.get(f"/api/tasks/{task['id']}/updates", headers=manager).json()["data"]
    assert [u["update_text"] for u in updates] == ["draft done", "outline done"]
    assert updates[0]["updated_by_name"] == "Evan Employee"

    assert client.get("/api/tasks/999/updates", headers=manager).status_code == 404


def test_full_update_and_delete_cascade(client):
    _, manager = register(client, "Maria Manager", "maria@example.com", "Manager")
    employee_id, employee = register(client, "Evan Employee", "evan@example.com", "Employee")
    task = create_task(client, manager, employee_id)
    keep = create_task(client, manager, employee_id, "Keep me")

    edit = {"title": "Renamed", "description": "New scope", "assigned_to": employee_id, "status": "Done"}
    response = client.put(f"/api/tasks/{task['id']}", json=edit, headers=manager)
    assert response.status_code == 200
    assert response.json()["data"]["title"] == "Renamed"

    bad = dict(edit, status="Complete")
    assert client.put(f"/api/tasks/{task['id']}", json=bad, headers=manager).status_code == 409

    client.post(f"/api/tasks/{task['id']}/updates", json={"update_text": "done"}, headers=employee)
    client.post(f"/api/tasks/{task['id']}/reviews", json={"rating": 5}, headers=manager)

    response = client.delete(f"/api/tasks/{task['id']}", headers=manager)
    assert response.status_code == 200
    assert response.json()["data"] is True

    assert client.get(f"/api/tasks/{task['id']}", headers=manager).status_code == 404
    assert client.get(f"/api/tasks/{task['id']}/reviews", headers=manager).status_code == 404
    assert client.get(f"/api/tasks/{keep['id']}", headers=manager).status_code == 200
    assert client.delete(f"/api/tasks/{task['id']}", headers=manager).status_code == 404


def test_review_edit_and_delete_endpoints(client):
    _, manager = register(client, "Maria Manager", "maria@example.com", "Manager")
    employee_id, employee = register(client, "Evan Employee", "evan@example.com", "Employee")
    task = create_task(client, manager, employee_id)
    set_status(client, employee, task["id"], "Done")
    review = client.post(f"/api/tasks/{task['id']}/reviews", json={"rating": 2}, headers=manager).json()["data"]

    out_of_range = client.put(f"/api/reviews/{review['id']}", json={"rating": 9}, headers=manager)
    assert out_of_range.status_code == 400

    edited = client.put(f"/api/reviews/{review['id']}", json={"rating": 5, "comments": "Reworked"}, headers=manager)
    assert edited.json()["data"]["rating"] == 5

    assert client.put(f"/api/reviews/{review['id']}", json={"rating": 5}, headers=employee).status_code == 403
    assert client.delete(f"/api/reviews/{review['id']}", headers=manager).status_code == 200
    assert client.delete(f"/api/reviews/{review['id']}", headers=manager).status_code == 404


def test_user_profile_access(client):
    manager_id, manager = register(client, "Maria Manager", "maria@example.com", "Manager")
    employee_id, employee = register(client, "Evan Employee", "evan@example.com", "Employee")

    assert client.get(f"/api/users/{employee_id}", headers=employee).json()["data"]["full_name"] == "Evan Employee"
    assert client.get(f"/api/users/{manager_id}", headers=employee).status_code == 403
    assert len(client.get("/api/users", headers=manager).json()["data"]) == 2
    assert client.get("/api/users/999", headers=manager).status_code == 404


def test_malformed_body_uses_envelope(client):
    _, manager = register(client, "Maria Manager", "maria@example.com", "Manager")
    response = client.post("/api/tasks", json={"title": "t", "description": "d", "assigned_to": "abc"}, headers=manager)
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Validation failed"
    assert any(error.startswith("assigned_to") for error in body["errors"])
