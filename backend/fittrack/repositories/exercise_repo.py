from __future__ import annotations
from typing import Optional

from sqlalchemy import select, func, or_
from sqlalchemy.exc import IntegrityError

from fittrack.models import Exercise
from fittrack.repositories.base import BaseRepository

ALL_MUSCLES = "All"

class ExerciseRepository(BaseRepository[Exercise]):
    model = Exercise

    def list(self, *, muscle: Optional[str] = None, query: Optional[str] = None) -> list[Exercise]:
        stmt = select(Exercise).order_by(Exercise.name.asc())
        if muscle and muscle != ALL_MUSCLES:
            stmt = stmt.where(Exercise.target_muscle_group == muscle)
        if query and query.strip():
            pattern = f"%{query.strip().lower()}%"
            stmt = stmt.where(or_(
                func.lower(Exercise.name).like(pattern),
                func.lower(Exercise.target_muscle_group).like(pattern),
            ))
        return list(self.db.execute(stmt).scalars().all())

    def muscle_groups(self) -> list[str]:
        stmt = select(Exercise.target_muscle_group).distinct().order_by(Exercise.target_muscle_group.asc())
        return [ALL_MUSCLES, *self.db.execute(stmt).scalars().all()]

    def get_many(self, ids: list[int]) -> dict[int, Exercise]:
        if not ids:
            return {}
        rows = self.db.execute(select(Exercise).where(Exercise.id.in_(ids))).scalars().all()
        return {ex.id: ex for ex in rows}

    def get_by_name(self, name: str) -> Optional[Exercise]:
        stmt = select(Exercise).where(func.lower(Exercise.name) == name.lower())
        return self.db.execute(stmt).scalar_one_or_none()

    def create(self, **fields) -> Exercise:
        try:
            return self.add_and_refresh(Exercise(**fields))
        except IntegrityError:
            self.db.rollback()
            raise ValueError("exercise_already_exists")
