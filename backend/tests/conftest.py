"""
Point the app at a throwaway SQLite database and build the schema before any
test module imports fittrack.main. Set DATABASE_URL yourself to run against Postgres.
"""
import os
import tempfile

_tmpdir = tempfile.mkdtemp(prefix="fittrack-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{_tmpdir}/fittrack.db")

from fittrack.db import Base, SessionLocal, engine  # noqa: E402
from fittrack import models  # noqa: E402,F401
from fittrack.seed import seed_exercises, seed_workouts  # noqa: E402

Base.metadata.create_all(bind=engine)
with SessionLocal() as _db:
    seed_exercises(_db)
    seed_workouts(_db)
