from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from fittrack.db import get_db
from fittrack.deps.auth import get_current_user, require_role
from fittrack.models import User
from fittrack.repositories.user_repo import UserRepository
from fittrack.schemas.user import OnboardingData, ProfileRead, ProfileView, UserRead, goal_label

router = APIRouter(prefix="/users", tags=["users"])

def _profile_view(user: User) -> ProfileView:
    profile = ProfileRead.model_validate(user)
    return ProfileView(
        **profile.model_dump(),
        onboarded=bool(user.training_experience and user.fitness_goal),
        fitness_goal_label=goal_label(user.fitness_goal),
    )

@router.get("", response_model=list[UserRead], dependencies=[Depends(require_role("admin"))])
def list_users(
    db: Session = Depends(get_db),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
):
    page = UserRepository(db).list(limit=limit, offset=offset)
    return page.items

@router.get("/me/profile", response_model=ProfileView)
def get_profile(current: User = Depends(get_current_user)):
    return _profile_view(current)

@router.put("/me/profile", response_model=ProfileView)
def complete_onboarding(
    payload: OnboardingData,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    user = UserRepository(db).update_profile(current.id, **payload.model_dump())
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return _profile_view(user)
