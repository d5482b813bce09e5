# tests/test_workouts.py
import uuid
from fastapi.testclient import TestClient
from fittrack.main import app

client = TestClient(app)
PWD = "StrongPassw0rd!"

def headers():
    email = f"wk-{uuid.uuid4().hex[:8]}@ex.com"
    client.post("/auth/register", json={"email": email, "name": "W", "password": PWD})
    tok = client.post("/auth/login", json={"email": email, "password": PWD}).json()["access_token"]
    return {"Authorization": f"Bearer {tok}"}

def ids_for(h, *names):
    catalogue = {ex["name"]: ex["id"] for ex in client.get("/exercises", headers=h).json()}
    return [catalogue[n] for n in names]

def test_defaults_visible_to_everyone():
    r = client.get("/workouts", headers=headers())
    assert r.status_code == 200
    defaults = [w for w in r.json() if w["is_default"]]
    names = {w["name"] for w in defaults}
    assert {"Full Body Starter", "Barbell Basics", "Upper Body Dumbbells"} <= names
    starter = next(w for w in defaults if w["name"] == "Full Body Starter")
    assert [ex["name"] for ex in starter["exercises"]] == ["Goblet Squat", "Press-ups", "Lat Pulldown", "Plank"]

def test_create_own_workout_keeps_order_and_is_listed_first():
    h = headers()
    ids = ids_for(h, "Leg Press", "Bench Press", "Plank")
    r = client.post("/workouts", headers=h, json={
        "name": "  Monday  ", "level": "Intermediate", "notes": "   ", "exercise_ids": ids,
    })
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["name"] == "Monday"
    assert body["notes"] is None
    assert body["is_default"] is False
    assert [ex["id"] for ex in body["exercises"]] == ids

    listed = client.get("/workouts", headers=h).json()
    assert listed[0]["id"] == body["id"]

def test_own_workouts_are_private():
    h1, h2 = headers(), headers()
    wid = client.post("/workouts", headers=h1, json={"name": "Secret", "exercise_ids": ids_for(h1, "Plank")}).json()["id"]
    assert client.get(f"/workouts/{wid}", headers=h2).status_code == 404
    assert all(w["id"] != wid for w in client.get("/workouts", headers=h2).json())
    assert client.delete(f"/workouts/{wid}", headers=h2).status_code == 404

def test_create_validation():
    h = headers()
    plank = ids_for(h, "Plank")[0]
    cases = [
        {"name": "   ", "exercise_ids": [plank]},
        {"name": "x" * 51, "exercise_ids": [plank]},
        {"name": "No exercises", "exercise_ids": []},
        {"name": "Dupes", "exercise_ids": [plank, plank]},
        {"name": "Bad level", "level": "Elite", "exercise_ids": [plank]},
        {"name": "Long notes", "notes": "n" * 201, "exercise_ids": [plank]},
    ]
    for payload in cases:
        assert client.post("/workouts", headers=h, json=payload).status_code == 422, payload

def test_create_with_unknown_exercise_400():
    h = headers()
    r = client.post("/workouts", headers=h, json={"name": "Ghost", "exercise_ids": [999999]})
    assert r.status_code == 400

def test_delete_own_but_not_default():
    h = headers()
    wid = client.post("/workouts", headers=h, json={"name": "Temp", "exercise_ids": ids_for(h, "Plank")}).json()["id"]
    assert client.delete(f"/workouts/{wid}", headers=h).status_code == 204
    assert client.get(f"/workouts/{wid}", headers=h).status_code == 404

    default_id = next(w["id"] for w in client.get("/workouts", headers=h).json() if w["is_default"])
    r = client.delete(f"/workouts/{default_id}", headers=h)
    assert r.status_code == 403

def test_name_is_trimmed_before_length_check():
    h = headers()
    name = "n" * 50
    r = client.post("/workouts", headers=h, json={"name": f"  {name}  ", "exercise_ids": ids_for(h, "Plank")})
    assert r.status_code == 201, r.text
    assert r.json()["name"] == name
