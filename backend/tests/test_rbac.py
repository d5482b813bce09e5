from fastapi.testclient import TestClient
from fittrack.main import app
from fittrack.db import SessionLocal
from fittrack.repositories.user_repo import UserRepository
import uuid

client = TestClient(app)
PWD = "StrongPassw0rd!"
def uniq(): return f"{uuid.uuid4().hex[:8]}@ex.com"

def make_user(email):
    client.post("/auth/register", json={"email": email, "name": "U", "password": PWD})
    tok = client.post("/auth/login", json={"email": email, "password": PWD}).json()["access_token"]
    return tok

def promote(email):
    db = SessionLocal()
    repo = UserRepository(db)
    user = repo.get_by_email(email)
    repo.set_role(user.id, role="admin")
    db.close()

def new_exercise(name):
    return {
        "name": name,
        "target_muscle_group": "Legs",
        "equipment_used": "Machine",
        "exercise_type": "Isolation",
        "level": "Beginner",
    }

def test_only_admin_can_add_exercises():
    user_token = make_user(uniq())
    admin_email = uniq()
    admin_token = make_user(admin_email)
    promote(admin_email)

    name = f"Leg Extension {uuid.uuid4().hex[:6]}"
    r = client.post("/exercises", headers={"Authorization": f"Bearer {user_token}"}, json=new_exercise(name))
    assert r.status_code == 403
    assert r.json()["detail"] == "Insufficient role"

    # role is checked on every request, the old token works after promotion
    r = client.post("/exercises", headers={"Authorization": f"Bearer {admin_token}"}, json=new_exercise(name))
    assert r.status_code == 201
    assert r.json()["name"] == name

    r = client.post("/exercises", headers={"Authorization": f"Bearer {admin_token}"}, json=new_exercise(name))
    assert r.status_code == 400

def test_admin_lists_users():
    admin_email = uniq()
    token = make_user(admin_email)
    promote(admin_email)
    r = client.get("/users", headers={"Authorization": f"Bearer {token}"}, params={"limit": 200})
    assert r.status_code == 200
    assert isinstance(r.json(), list) and len(r.json()) >= 1
