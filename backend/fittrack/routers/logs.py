from datetime import datetime, timezone
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from fittrack.db import get_db
from fittrack.deps.auth import get_current_user
from fittrack.history import group_by_day, history_stats, period_start, weekly_stats
from fittrack.models import User
from fittrack.repositories.exercise_repo import ExerciseRepository
from fittrack.repositories.log_repo import LogRepository
from fittrack.repositories.workout_repo import WorkoutRepository
from fittrack.schemas.log import HistorySummary, LogCreate, LogRead, Period, RecentActivity

router = APIRouter(prefix="/logs", tags=["logs"])

RECENT_LIMIT = 5

@router.get("", response_model=list[LogRead])
def list_logs(
    period: Period = Query("week"),
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return LogRepository(db).list_for_user(current.email, since=period_start(period))

@router.get("/summary", response_model=HistorySummary)
def history_summary(
    period: Period = Query("week"),
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    logs = LogRepository(db).list_for_user(current.email, since=period_start(period))
    return {
        "period": period,
        "stats": history_stats(logs),
        "days": [{"date": day, "logs": day_logs} for day, day_logs in group_by_day(logs)],
    }

@router.get("/recent", response_model=RecentActivity)
def recent_activity(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    week = LogRepository(db).list_for_user(current.email, since=period_start("week"))
    return {"stats": weekly_stats(week), "logs": week[:RECENT_LIMIT]}

@router.post("", response_model=LogRead, status_code=status.HTTP_201_CREATED)
def log_exercise(payload: LogCreate, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    if not ExerciseRepository(db).get(payload.exercise_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    if payload.workout_id is not None and not WorkoutRepository(db).get_visible(payload.workout_id, current.email):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")

    fields = payload.model_dump()
    fields["notes"] = fields["notes"] or None
    return LogRepository(db).create(
        user_email=current.email,
        logged_at=datetime.now(timezone.utc),
        **fields,
    )
