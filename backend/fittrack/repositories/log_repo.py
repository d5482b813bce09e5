from __future__ import annotations
from datetime import datetime
from typing import Iterable, Optional

from sqlalchemy import select

from fittrack.models import WorkoutLog

class LogRepository:
    def __init__(self, db):
        self.db = db

    def list_for_user(
        self,
        email: str,
        *,
        since: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> list[WorkoutLog]:
        stmt = select(WorkoutLog).where(WorkoutLog.user_email == email)
        if since is not None:
            stmt = stmt.where(WorkoutLog.logged_at >= since)
        stmt = stmt.order_by(WorkoutLog.logged_at.desc(), WorkoutLog.id.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.db.execute(stmt).scalars().unique().all())

    def insert_many(self, records: Iterable) -> list[WorkoutLog]:
        """Batched insert; either every row is committed or none is."""
        rows = [WorkoutLog(**r.model_dump()) for r in records]
        try:
            self.db.add_all(rows)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return rows

    def create(self, **fields) -> WorkoutLog:
        log = WorkoutLog(**fields)
        self.db.add(log)
        self.db.commit()
        self.db.refresh(log)
        return log
