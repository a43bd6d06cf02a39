import pytest
from datetime import datetime
from fastapi.testclient import TestClient
from main import create_app
from store import EntityStore
from fixtures import load_fixtures

FIXED_NOW = datetime(2024, 2, 16, 12, 0)


@pytest.fixture
def store():
    return load_fixtures(EntityStore())


@pytest.fixture
def client(store):
    return TestClient(create_app(store, clock=lambda: FIXED_NOW))


def login(client, email, password):
    return client.post("/login", json={"email": email, "password": password})


@pytest.fixture
def as_admin(client):
    login(client, "admin@itplatform.com", "admin123")
    return client


@pytest.fixture
def as_provider(client):
    login(client, "contact@techacademypro.com", "provider123")
    return client


@pytest.fixture
def event_form():
    return {
        "title": "Kubernetes in Production",
        "type": "webinar",
        "description": "Running and scaling clusters safely.",
        "category": "DevOps",
        "date": "2024-03-10",
        "time": "10:00",
        "duration": "3 hours",
        "price": 59,
        "max_participants": 40,
        "requirements": "Docker basics",
        "image": "https://example.com/k8s.png",
    }


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["data"]["total_events"] == 1


def test_login_success(client, store):
    response = login(client, "admin@itplatform.com", "admin123")
    assert response.status_code == 200
    assert response.json()["data"] == {"email": "admin@itplatform.com", "role": "admin", "home": "/admin"}
    assert store.current_user.name == "Admin User"


def test_login_wrong_password(client, store):
    response = login(client, "admin@itplatform.com", "wrong")
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid email or password"
    assert store.current_user is None


def test_login_blank_fields(client):
    response = login(client, "", "admin123")
    assert response.status_code == 400
    assert response.json()["detail"] == "Please fill in all fields"


def test_logout(as_admin, store):
    response = as_admin.post("/logout")
    assert response.status_code == 200
    assert store.current_user is None


def test_active_and_expired_lists(client):
    active = client.get("/events/active").json()["data"]
    expired = client.get("/events/expired").json()["data"]
    assert [e["id"] for e in active] == [2]
    assert [e["id"] for e in expired] == [1, 3]


def test_active_search(client):
    assert client.get("/events/active", params={"search": "cloud", "type": "course"}).json()["data"][0]["id"] == 2
    assert client.get("/events/active", params={"type": "webinar"}).json()["data"] == []


def test_event_detail(client):
    response = client.get("/events/2")
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["label"] == "APPROVED"
    assert data["can_enroll"] is True
    assert data["status"] == "approved"


def test_event_detail_not_found(client):
    assert client.get("/events/999").status_code == 404


def test_create_requires_login(client, event_form):
    assert client.post("/events", json=event_form).status_code == 401


def test_create_requires_provider_role(as_admin, event_form):
    response = as_admin.post("/events", json=event_form)
    assert response.status_code == 403
    assert response.json()["detail"] == "Access denied"


def test_provider_creates_pending_event(as_provider, event_form):
    response = as_provider.post("/events", json=event_form)
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["status"] == "pending"
    assert data["current_participants"] == 0
    assert data["provider_email"] == "contact@techacademypro.com"
    assert data["occurs_at"] == "2024-03-10T10:00:00"
    pending = as_provider.get("/events/pending").json()["data"]
    assert [e["id"] for e in pending] == [data["id"]]
    mine = as_provider.get("/me/events").json()["data"]
    assert [e["id"] for e in mine] == [1, data["id"]]


def test_create_rejects_past_date(as_provider, event_form):
    event_form["date"] = "2024-01-31"
    response = as_provider.post("/events", json=event_form)
    assert response.status_code == 400
    assert response.json()["detail"] == "Event date must be in the future"


def test_create_rejects_invalid_form(as_provider, event_form):
    event_form["title"] = "   "
    event_form["max_participants"] = 0
    response = as_provider.post("/events", json=event_form)
    assert response.status_code == 422


def test_create_rejects_time_with_offset(as_provider, event_form):
    event_form["time"] = "10:00+02:00"
    response = as_provider.post("/events", json=event_form)
    assert response.status_code == 422
    assert as_provider.get("/events/pending").json()["data"] == []


def test_create_rejects_unknown_category(as_provider, event_form):
    event_form["category"] = "Basket Weaving"
    response = as_provider.post("/events", json=event_form)
    assert response.status_code == 422
    assert "Unknown category" in response.text


def test_admin_approves_then_rejects(client, event_form):
    login(client, "contact@techacademypro.com", "provider123")
    event_id = client.post("/events", json=event_form).json()["data"]["id"]
    login(client, "admin@itplatform.com", "admin123")
    assert client.post(f"/events/{event_id}/approve").status_code == 200
    assert event_id in [e["id"] for e in client.get("/events/active").json()["data"]]
    assert client.post(f"/events/{event_id}/reject").status_code == 200
    assert client.get(f"/events/{event_id}").json()["data"]["status"] == "rejected"


def test_approve_missing_event(as_admin):
    response = as_admin.post("/events/999/approve")
    assert response.status_code == 404


def test_student_cannot_approve(client):
    login(client, "student@example.com", "student123")
    assert client.post("/events/2/reject").status_code == 403


def test_providers_list(as_admin):
    data = as_admin.get("/providers").json()["data"]
    assert [p["email"] for p in data] == ["contact@techacademypro.com", "info@cloudmasters.com"]
    assert "password" not in data[0]


def test_dashboard_per_role(client):
    assert client.get("/dashboard").status_code == 401
    login(client, "student@example.com", "student123")
    response = client.get("/dashboard")
    assert response.json()["message"] == "Student dashboard"
    assert [e["id"] for e in response.json()["data"]["events"]] == [2]
    login(client, "admin@itplatform.com", "admin123")
    assert client.get("/dashboard").json()["data"]["expired_events"] == 2
