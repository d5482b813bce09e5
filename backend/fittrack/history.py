"""Period filters and aggregates behind the history and home screens."""
from __future__ import annotations
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

PERIOD_DAYS = {"week": 7, "month": 30}

def period_start(period: str, *, now: Optional[datetime] = None) -> Optional[datetime]:
    """Earliest logged_at included for `period`; None means no lower bound."""
    if period == "all":
        return None
    if period not in PERIOD_DAYS:
        raise ValueError(f"unknown period {period!r}")
    now = now or datetime.now(timezone.utc)
    return now - timedelta(days=PERIOD_DAYS[period])

def day_key(moment: datetime) -> str:
    return moment.date().isoformat()

def group_by_day(logs: Iterable) -> list[tuple[str, list]]:
    """Logs bucketed per calendar day, keeping the incoming (newest-first) order."""
    grouped: dict[str, list] = {}
    for log in logs:
        grouped.setdefault(day_key(log.logged_at), []).append(log)
    return list(grouped.items())

def history_stats(logs: list) -> dict:
    return {
        "total_workouts": len({day_key(log.logged_at) for log in logs}),
        "total_exercises": len(logs),
        "total_weight": float(sum(float(log.weight_kg) * log.sets * log.reps for log in logs)),
    }

def weekly_stats(logs: list) -> dict:
    return {
        "workouts": len({day_key(log.logged_at) for log in logs}),
        "exercises": len(logs),
    }
