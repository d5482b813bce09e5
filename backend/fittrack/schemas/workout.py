from typing import Annotated, Literal
from datetime import datetime
from pydantic import BaseModel, Field, StringConstraints, field_validator

from fittrack.schemas.exercise import ExerciseRead

Level = Literal["Beginner", "Intermediate", "Advanced"]

class WorkoutCreate(BaseModel):
    name: Annotated[str, StringConstraints(strip_whitespace=True, max_length=50)]
    level: Level = "Beginner"
    notes: Annotated[str, StringConstraints(strip_whitespace=True, max_length=200)] | None = None
    exercise_ids: Annotated[list[int], Field(min_length=1)]

    @field_validator("name")
    @classmethod
    def name_non_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("Please enter a workout name")
        return v2

    @field_validator("notes")
    @classmethod
    def blank_notes_to_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None

    @field_validator("exercise_ids")
    @classmethod
    def no_duplicates(cls, v: list[int]) -> list[int]:
        if len(set(v)) != len(v):
            raise ValueError("This exercise is already in your workout")
        return v

class WorkoutRead(BaseModel):
    id: int
    name: str
    creator_email: str | None = None
    level: str | None = None
    notes: str | None = None
    created_at: datetime
    is_default: bool
    exercises: list[ExerciseRead] = []

    model_config = {"from_attributes": True}
