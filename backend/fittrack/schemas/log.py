from typing import Annotated, Literal
from datetime import datetime
from pydantic import BaseModel, Field, StringConstraints

from fittrack.schemas.exercise import ExerciseRead

Period = Literal["week", "month", "all"]

NotesStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]

class LogCreate(BaseModel):
    exercise_id: int
    workout_id: int | None = None
    sets: Annotated[int, Field(ge=1)] = 3
    reps: Annotated[int, Field(ge=1)] = 10
    weight_kg: Annotated[float, Field(ge=0, le=1000)] = 0
    notes: NotesStr | None = None

class LogRead(BaseModel):
    id: int
    user_email: str
    workout_id: int | None = None
    exercise_id: int
    sets: int
    reps: int
    weight_kg: float
    notes: str | None = None
    logged_at: datetime
    exercise: ExerciseRead | None = None

    model_config = {"from_attributes": True}

class DayGroup(BaseModel):
    date: str
    logs: list[LogRead]

class HistoryStats(BaseModel):
    total_workouts: int
    total_exercises: int
    total_weight: float

class HistorySummary(BaseModel):
    period: Period
    stats: HistoryStats
    days: list[DayGroup]

class WeeklyStats(BaseModel):
    workouts: int
    exercises: int

class RecentActivity(BaseModel):
    stats: WeeklyStats
    logs: list[LogRead]
