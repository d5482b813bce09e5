from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from fittrack.db import get_db
from fittrack.deps.auth import get_current_user
from fittrack.models import User
from fittrack.repositories.exercise_repo import ExerciseRepository
from fittrack.repositories.workout_repo import WorkoutRepository
from fittrack.schemas.workout import WorkoutCreate, WorkoutRead

router = APIRouter(prefix="/workouts", tags=["workouts"])

@router.get("", response_model=list[WorkoutRead])
def list_workouts(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return WorkoutRepository(db).visible_to(current.email)

@router.get("/{workout_id}", response_model=WorkoutRead)
def get_workout(workout_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    workout = WorkoutRepository(db).get_visible(workout_id, current.email)
    if not workout:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    return workout

@router.post("", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED)
def create_workout(payload: WorkoutCreate, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    known = ExerciseRepository(db).get_many(payload.exercise_ids)
    missing = [ex_id for ex_id in payload.exercise_ids if ex_id not in known]
    if missing:
        raise HTTPException(status_code=400, detail=f"unknown exercises: {missing}")

    return WorkoutRepository(db).create(
        name=payload.name,
        creator_email=current.email,
        exercise_ids=payload.exercise_ids,
        level=payload.level,
        notes=payload.notes,
    )

@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workout(workout_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    repo = WorkoutRepository(db)
    workout = repo.get_visible(workout_id, current.email)
    if not workout:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    if workout.is_default:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Default workouts cannot be deleted")
    repo.delete(workout)
