# tests/test_users_and_auth_edges.py
import uuid
from fastapi.testclient import TestClient
from fittrack.main import app

client = TestClient(app)

def uniq_email(prefix="u"):
    return f"{prefix}-{uuid.uuid4().hex[:8]}@ex.com"

def make_user(email=None, password="StrongPassw0rd!"):
    email = email or uniq_email("usr")
    r = client.post("/auth/register", json={"email": email, "name": "Test", "password": password})
    assert r.status_code == 201, r.text
    return email, password

def login(email, password):
    # /auth/login expects JSON, not form
    r = client.post("/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    return r.json()["access_token"]

def test_list_users_forbidden_for_non_admin():
    e, pw = make_user(uniq_email("forbidden"))
    token = login(e, pw)
    r = client.get("/users", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 403, r.text
    assert r.json()["detail"] == "Insufficient role"

def test_expired_token_rejected(monkeypatch):
    e, pw = make_user(uniq_email("expire"))
    token = login(e, pw)

    # Patch the exact symbol used in the guard
    from jose.exceptions import ExpiredSignatureError
    def fake_decode(_): raise ExpiredSignatureError()

    # deps.auth imports decode_token at import-time
    import fittrack.deps.auth as deps_auth
    monkeypatch.setattr(deps_auth, "decode_token", fake_decode)

    r = client.get("/session", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401, r.text
    assert r.json()["detail"] == "Token expired"

def test_requires_auth():
    # no token -> 401s
    assert client.get("/session").status_code in (401, 403)
    assert client.get("/workouts").status_code in (401, 403)
    assert client.get("/exercises").status_code in (401, 403)
    assert client.post("/session/submit", json={}).status_code in (401, 403)
