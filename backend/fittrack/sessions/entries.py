from __future__ import annotations
import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, TypeAdapter

SetField = Literal["weight", "reps"]

def new_set_id() -> str:
    return uuid.uuid4().hex[:12]

class WorkoutSet(BaseModel):
    # weight/reps keep the raw text the user typed; parsing happens on submit
    id: str = Field(default_factory=new_set_id)
    weight: str = ""
    reps: str = ""

class ExerciseRef(BaseModel):
    id: int
    name: str
    target_muscle_group: str
    equipment_used: str
    exercise_type: str
    level: str
    instructions: str | None = None
    media_url: str | None = None

    model_config = {"from_attributes": True}

class ExerciseEntry(ExerciseRef):
    sets: list[WorkoutSet] = Field(min_length=1)
    order_index: int = Field(ge=1)

class LogRecord(BaseModel):
    user_email: str
    exercise_id: int
    workout_id: int | None = None
    sets: int = 1
    reps: int
    weight_kg: float
    logged_at: datetime

class SubmitResult(BaseModel):
    logged: int
    exercises: int

    @property
    def message(self) -> str:
        return f"Successfully logged {self.logged} sets across {self.exercises} exercises."

# serialized form of a whole session (the draft)
SessionAdapter = TypeAdapter(list[ExerciseEntry])
