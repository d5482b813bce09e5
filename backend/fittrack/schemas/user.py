from typing import Annotated, Literal
from pydantic import BaseModel, EmailStr, Field, StringConstraints, field_validator
from enum import Enum
from datetime import datetime

class UserRole(str, Enum):
    user = "user"
    admin = "admin"

NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]

GENDERS = ("Male", "Female", "Other")
EXPERIENCE_LEVELS = ("Beginner", "Intermediate", "Advanced")
FITNESS_GOALS = ("Build Muscle", "Lose Fat", "Recomp", "General Fitness")
EQUIPMENT_OPTIONS = ("Dumbbells", "Barbell", "Machine", "Bodyweight", "Kettlebells", "Bands")

GOAL_LABELS = {"Recomp": "Body Recomposition"}

def goal_label(goal: str | None) -> str:
    if not goal:
        return "Not specified"
    return GOAL_LABELS.get(goal, goal)

class UserBase(BaseModel):
    email: EmailStr = Field(max_length=255)
    name: NameStr

class UserRegister(UserBase):
    # no regex here; Pydantic v2 core regex doesn't support look-arounds
    password: Annotated[str, Field(min_length=12, max_length=128)]

    @field_validator("password")
    @classmethod
    def password_policy(cls, v: str) -> str:
        if not any(c.islower() for c in v):
            raise ValueError("password must include a lowercase letter")
        if not any(c.isupper() for c in v):
            raise ValueError("password must include an uppercase letter")
        if not any(c.isdigit() for c in v):
            raise ValueError("password must include a digit")
        if not any(not c.isalnum() for c in v):
            raise ValueError("password must include a special character")
        return v

class UserLogin(BaseModel):
    email: EmailStr
    password: Annotated[str, Field(min_length=1, max_length=256)]

class UserRead(UserBase):
    id: int
    role: UserRole
    created_at: datetime
    model_config = {"from_attributes": True}

class OnboardingData(BaseModel):
    """Everything collected by the three onboarding steps; all of it is required."""
    name: NameStr
    age: Annotated[int, Field(ge=13, le=100)]
    gender: Literal[GENDERS]
    height_cm: Annotated[int, Field(ge=100, le=250)]
    weight_kg: Annotated[float, Field(ge=30, le=300)]
    training_experience: Literal[EXPERIENCE_LEVELS]
    fitness_goal: Literal[FITNESS_GOALS]
    equipment_available: list[Literal[EQUIPMENT_OPTIONS]] = []

    @field_validator("equipment_available")
    @classmethod
    def dedupe_equipment(cls, v: list[str]) -> list[str]:
        return list(dict.fromkeys(v))

class ProfileRead(BaseModel):
    email: str
    name: str
    age: int | None = None
    gender: str | None = None
    height_cm: int | None = None
    weight_kg: float | None = None
    training_experience: str | None = None
    fitness_goal: str | None = None
    equipment_available: list[str] = []

    model_config = {"from_attributes": True}

class ProfileView(ProfileRead):
    onboarded: bool
    fitness_goal_label: str
