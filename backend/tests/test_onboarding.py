# tests/test_onboarding.py
import uuid
import pytest
from fastapi.testclient import TestClient
from fittrack.main import app
from fittrack.schemas.user import goal_label

client = TestClient(app)
PWD = "StrongPassw0rd!"

def headers():
    email = f"ob-{uuid.uuid4().hex[:8]}@ex.com"
    client.post("/auth/register", json={"email": email, "name": "New Member", "password": PWD})
    tok = client.post("/auth/login", json={"email": email, "password": PWD}).json()["access_token"]
    return {"Authorization": f"Bearer {tok}"}

def complete(**overrides):
    data = {
        "name": "Sam",
        "age": 29,
        "gender": "Other",
        "height_cm": 172,
        "weight_kg": 68.5,
        "training_experience": "Beginner",
        "fitness_goal": "Recomp",
        "equipment_available": ["Dumbbells", "Bands", "Dumbbells"],
    }
    data.update(overrides)
    return data

def test_fresh_profile_is_not_onboarded():
    r = client.get("/users/me/profile", headers=headers())
    assert r.status_code == 200
    body = r.json()
    assert body["onboarded"] is False
    assert body["fitness_goal_label"] == "Not specified"
    assert body["equipment_available"] == []

def test_complete_onboarding():
    h = headers()
    r = client.put("/users/me/profile", headers=h, json=complete())
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["onboarded"] is True
    assert body["name"] == "Sam"
    assert body["fitness_goal_label"] == "Body Recomposition"
    assert body["equipment_available"] == ["Dumbbells", "Bands"]
    assert body["weight_kg"] == 68.5

    again = client.get("/users/me/profile", headers=h).json()
    assert again == body

@pytest.mark.parametrize("field, value", [
    ("age", 12), ("age", 101),
    ("height_cm", 99), ("height_cm", 251),
    ("weight_kg", 29.9), ("weight_kg", 300.5),
    ("gender", "Unknown"),
    ("training_experience", "Expert"),
    ("fitness_goal", "Get Big"),
    ("equipment_available", ["Rowing Machine"]),
    ("name", "   "),
])
def test_onboarding_rejects_out_of_range(field, value):
    r = client.put("/users/me/profile", headers=headers(), json=complete(**{field: value}))
    assert r.status_code == 422

def test_boundaries_accepted():
    r = client.put("/users/me/profile", headers=headers(),
                   json=complete(age=13, height_cm=250, weight_kg=30, equipment_available=[]))
    assert r.status_code == 200, r.text

def test_goal_label():
    assert goal_label("Recomp") == "Body Recomposition"
    assert goal_label("Lose Fat") == "Lose Fat"
    assert goal_label(None) == "Not specified"
    assert goal_label("") == "Not specified"
