from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field, StringConstraints, field_validator

ShortStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=60)]

class ExerciseCreate(BaseModel):
    name: Annotated[str, Field(max_length=120)]
    target_muscle_group: ShortStr
    equipment_used: ShortStr
    exercise_type: ShortStr
    level: ShortStr
    instructions: str | None = None
    media_url: Annotated[str, Field(max_length=500)] | None = None

    @field_validator("name")
    @classmethod
    def name_non_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("name cannot be blank")
        return v2

class ExerciseRead(BaseModel):
    id: int
    name: str
    target_muscle_group: str
    equipment_used: str
    exercise_type: str
    level: str
    instructions: str | None = None
    media_url: str | None = None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
