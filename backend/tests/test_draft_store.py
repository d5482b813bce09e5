from fittrack.db import SessionLocal
from fittrack.sessions import EditorRegistry, ExerciseRef, MemoryDraftStore, SqlDraftStore
from fittrack.sessions.errors import SaveWorkoutError
import uuid
import pytest

def owner(): return f"{uuid.uuid4().hex[:8]}@ex.com"

def test_sql_store_get_set_delete():
    store = SqlDraftStore(SessionLocal, owner())
    assert store.get("log_workout_session") is None
    store.set("log_workout_session", "[]")
    assert store.get("log_workout_session") == "[]"
    store.set("log_workout_session", '["x"]')
    assert store.get("log_workout_session") == '["x"]'
    store.delete("log_workout_session")
    assert store.get("log_workout_session") is None
    # deleting a missing draft is fine
    store.delete("log_workout_session")

def test_sql_store_is_scoped_per_owner_and_key():
    a = SqlDraftStore(SessionLocal, owner())
    b = SqlDraftStore(SessionLocal, owner())
    a.set("k", "from-a")
    b.set("k", "from-b")
    a.set("other", "a2")
    assert a.get("k") == "from-a"
    assert b.get("k") == "from-b"
    b.delete("k")
    assert a.get("k") == "from-a"
    assert a.get("other") == "a2"

def test_registry_reuses_editor_per_owner():
    stores = {}
    def factory(email):
        stores[email] = MemoryDraftStore()
        return stores[email]

    reg = EditorRegistry(factory, default_reps="12")
    first = reg.for_owner("Lifter@Ex.com")
    assert reg.for_owner("lifter@ex.com") is first
    assert list(stores) == ["lifter@ex.com"]

    first.add_exercise(ExerciseRef(id=1, name="Plank", target_muscle_group="Core",
                                   equipment_used="Bodyweight", exercise_type="Isometric", level="Beginner"))
    assert first.entries[0].sets[0].reps == "12"

    reg.forget("LIFTER@ex.com")
    assert reg.for_owner("lifter@ex.com") is not first

def plank(ex_id=1):
    return ExerciseRef(id=ex_id, name="Plank", target_muscle_group="Core",
                       equipment_used="Bodyweight", exercise_type="Isometric", level="Beginner")

def memory_registry(**options):
    return EditorRegistry(lambda email: MemoryDraftStore(), **options)

def test_registry_releases_cleared_editors():
    reg = memory_registry()
    for n in range(200):
        editor = reg.for_owner(f"user{n}@ex.com")
        editor.add_exercise(plank())
        editor.clear()
    assert len(reg) == 0

def test_registry_releases_after_submit_but_not_after_failure():
    reg = memory_registry()
    editor = reg.for_owner("lifter@ex.com")
    editor.add_exercise(plank())

    def boom(records):
        raise RuntimeError("db down")
    with pytest.raises(SaveWorkoutError):
        editor.submit("lifter@ex.com", boom)
    assert len(reg) == 1

    editor.submit("lifter@ex.com", lambda records: None)
    assert len(reg) == 0
    assert reg.for_owner("lifter@ex.com") is not editor

def test_registry_release_keeps_newer_editor():
    reg = memory_registry()
    old = reg.for_owner("lifter@ex.com")
    reg.forget("lifter@ex.com")
    new = reg.for_owner("lifter@ex.com")
    old.clear()
    assert reg.for_owner("lifter@ex.com") is new

def test_registry_is_bounded_and_rebuilds_from_draft():
    stores = {}
    def factory(email):
        return stores.setdefault(email, MemoryDraftStore())

    reg = EditorRegistry(factory, max_editors=3)
    first = reg.for_owner("a@ex.com")
    first.add_exercise(plank(5))
    for email in ("b@ex.com", "c@ex.com", "d@ex.com"):
        reg.for_owner(email)
    assert len(reg) == 3

    rebuilt = reg.for_owner("a@ex.com")
    assert rebuilt is not first
    assert [e.id for e in rebuilt.entries] == [5]

def test_registry_keeps_recently_used_and_submitting_editors():
    reg = memory_registry(max_editors=2)
    a = reg.for_owner("a@ex.com")
    reg.for_owner("b@ex.com")
    assert reg.for_owner("a@ex.com") is a  # a is now most recent
    reg.for_owner("c@ex.com")
    assert reg.for_owner("a@ex.com") is a

    a.state = "submitting"
    reg.for_owner("d@ex.com")
    reg.for_owner("e@ex.com")
    assert reg.for_owner("a@ex.com") is a
    a.state = "idle"
