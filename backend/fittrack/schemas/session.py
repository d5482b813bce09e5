from typing import Literal
from pydantic import BaseModel

from fittrack.sessions.entries import ExerciseEntry, SetField

class SessionRead(BaseModel):
    exercises: list[ExerciseEntry]
    state: Literal["idle", "submitting"]

class AddExercise(BaseModel):
    exercise_id: int

class MoveExercise(BaseModel):
    direction: Literal["up", "down"]

class SetUpdate(BaseModel):
    field: SetField
    value: str

class SubmitRequest(BaseModel):
    workout_id: int | None = None

class SubmitResponse(BaseModel):
    logged: int
    exercises: int
    message: str
