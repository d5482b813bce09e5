from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from fittrack.db import get_db
from fittrack.deps.auth import get_current_user, require_role
from fittrack.repositories.exercise_repo import ExerciseRepository
from fittrack.schemas.exercise import ExerciseCreate, ExerciseRead

router = APIRouter(prefix="/exercises", tags=["exercises"], dependencies=[Depends(get_current_user)])

@router.get("", response_model=list[ExerciseRead])
def list_exercises(
    db: Session = Depends(get_db),
    muscle: str | None = Query(None, description="Target muscle group; 'All' disables the filter"),
    q: str | None = Query(None, max_length=100),
):
    return ExerciseRepository(db).list(muscle=muscle, query=q)

@router.get("/muscle-groups", response_model=list[str])
def muscle_groups(db: Session = Depends(get_db)):
    return ExerciseRepository(db).muscle_groups()

@router.get("/{exercise_id}", response_model=ExerciseRead)
def get_exercise(exercise_id: int, db: Session = Depends(get_db)):
    ex = ExerciseRepository(db).get(exercise_id)
    if not ex:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    return ex

@router.post("", response_model=ExerciseRead, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_role("admin"))])
def create_exercise(payload: ExerciseCreate, db: Session = Depends(get_db)):
    repo = ExerciseRepository(db)
    if repo.get_by_name(payload.name):
        raise HTTPException(status_code=400, detail="exercise already exists")
    try:
        return repo.create(**payload.model_dump())
    except ValueError as e:
        if str(e) == "exercise_already_exists":
            raise HTTPException(status_code=400, detail="exercise already exists")
        raise
