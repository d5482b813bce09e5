from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from fittrack.db import get_db
from fittrack.deps.auth import get_current_user
from fittrack.deps.editor import get_editor
from fittrack.models import User
from fittrack.repositories.exercise_repo import ExerciseRepository
from fittrack.repositories.log_repo import LogRepository
from fittrack.repositories.workout_repo import WorkoutRepository
from fittrack.schemas.session import (
    AddExercise,
    MoveExercise,
    SessionRead,
    SetUpdate,
    SubmitRequest,
    SubmitResponse,
)
from fittrack.sessions import SessionEditor
from fittrack.sessions.errors import (
    DuplicateExerciseError,
    EntryNotFoundError,
    NoDataToSaveError,
    SaveWorkoutError,
    SubmissionInProgressError,
)

router = APIRouter(prefix="/session", tags=["session"])

def _read(editor: SessionEditor) -> SessionRead:
    return SessionRead(exercises=editor.entries, state=editor.state)

def _not_found(e: EntryNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

@router.get("", response_model=SessionRead)
def current_session(editor: SessionEditor = Depends(get_editor)):
    return _read(editor)

@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def discard_session(editor: SessionEditor = Depends(get_editor)):
    editor.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.post("/start/{workout_id}", response_model=SessionRead)
def start_from_workout(
    workout_id: int,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    editor: SessionEditor = Depends(get_editor),
):
    workout = WorkoutRepository(db).get_visible(workout_id, current.email)
    if not workout:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    if not workout.exercises:
        raise HTTPException(status_code=400, detail="No exercises found for this workout.")
    editor.load_workout(workout.exercises)
    return _read(editor)

@router.post("/exercises", response_model=SessionRead, status_code=status.HTTP_201_CREATED)
def add_exercise(payload: AddExercise, db: Session = Depends(get_db), editor: SessionEditor = Depends(get_editor)):
    exercise = ExerciseRepository(db).get(payload.exercise_id)
    if not exercise:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    try:
        editor.add_exercise(exercise)
    except DuplicateExerciseError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _read(editor)

@router.delete("/exercises/{index}", response_model=SessionRead)
def remove_exercise(index: int, editor: SessionEditor = Depends(get_editor)):
    try:
        editor.remove_exercise(index)
    except EntryNotFoundError as e:
        raise _not_found(e)
    return _read(editor)

@router.post("/exercises/{index}/move", response_model=SessionRead)
def move_exercise(index: int, payload: MoveExercise, editor: SessionEditor = Depends(get_editor)):
    try:
        editor.move_exercise(index, payload.direction)
    except EntryNotFoundError as e:
        raise _not_found(e)
    return _read(editor)

@router.post("/exercises/{index}/sets", response_model=SessionRead, status_code=status.HTTP_201_CREATED)
def add_set(index: int, editor: SessionEditor = Depends(get_editor)):
    try:
        editor.add_set(index)
    except EntryNotFoundError as e:
        raise _not_found(e)
    return _read(editor)

@router.delete("/exercises/{index}/sets/{set_index}", response_model=SessionRead)
def remove_set(index: int, set_index: int, editor: SessionEditor = Depends(get_editor)):
    # removing the only set is a no-op, not an error
    try:
        editor.remove_set(index, set_index)
    except EntryNotFoundError as e:
        raise _not_found(e)
    return _read(editor)

@router.patch("/exercises/{index}/sets/{set_index}", response_model=SessionRead)
def update_set(index: int, set_index: int, payload: SetUpdate, editor: SessionEditor = Depends(get_editor)):
    try:
        editor.update_set(index, set_index, payload.field, payload.value)
    except EntryNotFoundError as e:
        raise _not_found(e)
    return _read(editor)

@router.post("/submit", response_model=SubmitResponse, status_code=status.HTTP_201_CREATED)
def submit_session(
    payload: SubmitRequest | None = None,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    editor: SessionEditor = Depends(get_editor),
):
    workout_id = payload.workout_id if payload else None
    if workout_id is not None and not WorkoutRepository(db).get_visible(workout_id, current.email):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")

    try:
        result = editor.submit(current.email, LogRepository(db).insert_many, workout_id=workout_id)
    except NoDataToSaveError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SubmissionInProgressError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except SaveWorkoutError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return SubmitResponse(logged=result.logged, exercises=result.exercises, message=result.message)
