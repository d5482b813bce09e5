from __future__ import annotations
from typing import Optional

from sqlalchemy import select, or_
from sqlalchemy.orm import selectinload

from fittrack.models import Workout, WorkoutExercise
from fittrack.repositories.base import BaseRepository

class WorkoutRepository(BaseRepository[Workout]):
    model = Workout

    def _with_exercises(self):
        return select(Workout).options(selectinload(Workout.links).joinedload(WorkoutExercise.exercise))

    def visible_to(self, email: str) -> list[Workout]:
        """Pre-made workouts plus the ones `email` created, newest first."""
        stmt = self._with_exercises().where(
            or_(Workout.creator_email.is_(None), Workout.creator_email == email)
        ).order_by(Workout.created_at.desc(), Workout.id.desc())
        return list(self.db.execute(stmt).scalars().unique().all())

    def get_visible(self, workout_id: int, email: str) -> Optional[Workout]:
        stmt = self._with_exercises().where(Workout.id == workout_id)
        workout = self.db.execute(stmt).scalars().unique().one_or_none()
        if workout is None or not (workout.is_default or workout.creator_email == email):
            return None
        return workout

    def create(
        self,
        *,
        name: str,
        creator_email: Optional[str],
        exercise_ids: list[int],
        level: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Workout:
        workout = Workout(name=name, creator_email=creator_email, level=level, notes=notes)
        # contiguous 1..N in the order given
        workout.links = [
            WorkoutExercise(exercise_id=ex_id, order_index=position)
            for position, ex_id in enumerate(exercise_ids, start=1)
        ]
        return self.add_and_refresh(workout)

    def get_by_name(self, name: str, *, creator_email: Optional[str] = None) -> Optional[Workout]:
        stmt = select(Workout).where(Workout.name == name)
        if creator_email is None:
            stmt = stmt.where(Workout.creator_email.is_(None))
        else:
            stmt = stmt.where(Workout.creator_email == creator_email)
        return self.db.execute(stmt).scalars().first()

    def delete(self, workout: Workout) -> None:
        self.db.delete(workout)
        self.db.commit()
