# fittrack/sessions/editor.py
"""
In-progress workout session: an ordered list of exercises, each with its sets.

Every mutation writes the whole session to a draft store so an interrupted
session can be picked up again. Submitting flattens the session into one
log row per set with reps and hands the batch to the caller's insert function.
"""
from __future__ import annotations
import logging
import re
import threading
from datetime import datetime, timezone
from typing import Callable, Iterable, Literal, Optional

from pydantic import ValidationError

from fittrack.sessions.entries import (
    ExerciseEntry,
    ExerciseRef,
    LogRecord,
    SessionAdapter,
    SetField,
    SubmitResult,
    WorkoutSet,
)
from fittrack.sessions.errors import (
    DuplicateExerciseError,
    EntryNotFoundError,
    NoDataToSaveError,
    SaveWorkoutError,
    SubmissionInProgressError,
)
from fittrack.sessions.store import DraftStore

logger = logging.getLogger(__name__)

DEFAULT_DRAFT_KEY = "log_workout_session"

_DECIMAL_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

def parse_weight(raw: Optional[str]) -> float:
    """Leading decimal number of `raw` ("1e3" -> 1000); 0 for blank, unparseable or negative input."""
    m = _DECIMAL_PREFIX.match(raw or "")
    if not m:
        return 0.0
    value = float(m.group(1))
    return value if 0 < value < float("inf") else 0.0

def parse_reps(raw: Optional[str]) -> int:
    """Leading integer of `raw` ("8.5" -> 8); 0 for blank, unparseable or negative input."""
    m = _INT_PREFIX.match(raw or "")
    if not m:
        return 0
    value = int(m.group(1))
    return value if value > 0 else 0

class SessionEditor:
    """
    One user's session. Safe to share between request threads: every
    mutation and its draft write run under `_lock`.
    """

    def __init__(
        self,
        store: DraftStore,
        *,
        key: str = DEFAULT_DRAFT_KEY,
        default_reps: str = "10",
        on_clear: Optional[Callable[["SessionEditor"], None]] = None,
    ):
        self.store = store
        self.key = key
        self.default_reps = default_reps
        self.on_clear = on_clear
        self.entries: list[ExerciseEntry] = []
        self.state: Literal["idle", "submitting"] = "idle"
        self._lock = threading.RLock()
        self._submit_lock = threading.Lock()

    @classmethod
    def open(cls, store: DraftStore, **options) -> "SessionEditor":
        editor = cls(store, **options)
        editor.restore()
        return editor

    # DRAFT
    def restore(self) -> list[ExerciseEntry]:
        """Adopt the stored draft if it is a well-formed session, else start empty."""
        with self._lock:
            try:
                raw = self.store.get(self.key)
            except Exception:
                logger.warning("draft read failed key=%s, starting empty", self.key, exc_info=True)
                raw = None

            self.entries = []
            if raw:
                try:
                    entries = SessionAdapter.validate_json(raw)
                except ValidationError:
                    logger.info("ignoring malformed draft key=%s", self.key)
                    return self.entries
                if len({e.id for e in entries}) != len(entries):
                    logger.info("ignoring draft with repeated exercises key=%s", self.key)
                    return self.entries
                self.entries = entries
                self._renumber()
            return self.entries

    def persist(self) -> None:
        with self._lock:
            try:
                self.store.set(self.key, SessionAdapter.dump_json(self.entries).decode())
            except Exception:
                # best-effort; the in-memory session stays authoritative
                logger.warning("draft write failed key=%s", self.key, exc_info=True)

    def _drop_draft(self) -> None:
        try:
            self.store.delete(self.key)
        except Exception:
            logger.warning("draft delete failed key=%s", self.key, exc_info=True)

    # EXERCISES
    def _entry(self, index: int) -> ExerciseEntry:
        if not 0 <= index < len(self.entries):
            raise EntryNotFoundError(f"no exercise at position {index}")
        return self.entries[index]

    def _renumber(self) -> None:
        for position, entry in enumerate(self.entries, start=1):
            entry.order_index = position

    def _new_set(self, weight: str = "", reps: Optional[str] = None) -> WorkoutSet:
        return WorkoutSet(weight=weight, reps=self.default_reps if reps is None else reps)

    def add_exercise(self, exercise) -> ExerciseEntry:
        ref = ExerciseRef.model_validate(exercise, from_attributes=True)
        with self._lock:
            if any(e.id == ref.id for e in self.entries):
                raise DuplicateExerciseError(ref.id)
            entry = ExerciseEntry(
                **ref.model_dump(include=set(ExerciseRef.model_fields)),
                order_index=len(self.entries) + 1,
                sets=[self._new_set()],
            )
            self.entries.append(entry)
            self.persist()
            return entry

    def remove_exercise(self, index: int) -> None:
        with self._lock:
            self._entry(index)
            del self.entries[index]
            self._renumber()
            self.persist()

    def move_exercise(self, index: int, direction: Literal["up", "down"]) -> None:
        with self._lock:
            self._entry(index)
            target = index - 1 if direction == "up" else index + 1
            if not 0 <= target < len(self.entries):
                return
            self.entries[index], self.entries[target] = self.entries[target], self.entries[index]
            self._renumber()
            self.persist()

    def load_workout(self, exercises: Iterable) -> None:
        """Replace the session with a workout template's exercises, in order."""
        refs = [ExerciseRef.model_validate(ex, from_attributes=True) for ex in exercises]
        with self._lock:
            self.entries = [
                ExerciseEntry(
                    **ref.model_dump(include=set(ExerciseRef.model_fields)),
                    order_index=position,
                    sets=[self._new_set(weight="0", reps="0")],
                )
                for position, ref in enumerate(refs, start=1)
            ]
            self.persist()

    def clear(self) -> None:
        with self._lock:
            self.entries = []
            self._drop_draft()
        if self.on_clear is not None:
            self.on_clear(self)

    # SETS
    def add_set(self, exercise_index: int) -> WorkoutSet:
        with self._lock:
            entry = self._entry(exercise_index)
            new = self._new_set()
            entry.sets.append(new)
            self.persist()
            return new

    def remove_set(self, exercise_index: int, set_index: int) -> bool:
        """Returns False (and changes nothing) when it would remove the last set."""
        with self._lock:
            entry = self._entry(exercise_index)
            if len(entry.sets) <= 1:
                return False
            if not 0 <= set_index < len(entry.sets):
                raise EntryNotFoundError(f"no set at position {set_index}")
            del entry.sets[set_index]
            self.persist()
            return True

    def update_set(self, exercise_index: int, set_index: int, field: SetField, value: str) -> WorkoutSet:
        if field not in ("weight", "reps"):
            raise ValueError(f"unknown set field {field!r}")
        with self._lock:
            entry = self._entry(exercise_index)
            if not 0 <= set_index < len(entry.sets):
                raise EntryNotFoundError(f"no set at position {set_index}")
            target = entry.sets[set_index]
            setattr(target, field, value)
            self.persist()
            return target

    # SUBMIT
    def build_log_records(
        self,
        user_email: str,
        *,
        logged_at: Optional[datetime] = None,
        workout_id: Optional[int] = None,
    ) -> list[LogRecord]:
        logged_at = logged_at or datetime.now(timezone.utc)
        records = []
        with self._lock:
            for entry in self.entries:
                for s in entry.sets:
                    reps = parse_reps(s.reps)
                    if reps <= 0:
                        continue
                    records.append(LogRecord(
                        user_email=user_email,
                        exercise_id=entry.id,
                        workout_id=workout_id,
                        sets=1,
                        reps=reps,
                        weight_kg=parse_weight(s.weight),
                        logged_at=logged_at,
                    ))
        return records

    def submit(
        self,
        user_email: str,
        insert_logs: Callable[[list[LogRecord]], object],
        *,
        workout_id: Optional[int] = None,
    ) -> SubmitResult:
        """
        Flatten the session and insert it as one batch.

        Raises NoDataToSaveError when no set has reps, SaveWorkoutError when the
        insert fails (session and draft are kept for a retry), and
        SubmissionInProgressError while another submit is outstanding.
        Edits from other threads wait until the submit is done.
        """
        if not self._submit_lock.acquire(blocking=False):
            raise SubmissionInProgressError()
        try:
            with self._lock:
                self.state = "submitting"
                try:
                    records = self.build_log_records(user_email, workout_id=workout_id)
                    if not records:
                        raise NoDataToSaveError()
                    exercise_count = len({e.id for e in self.entries})

                    try:
                        insert_logs(records)
                    except Exception as exc:
                        logger.exception("saving %d log rows for %s failed", len(records), user_email)
                        raise SaveWorkoutError() from exc

                    logger.info("logged %d sets across %d exercises for %s",
                                len(records), exercise_count, user_email)
                    self.clear()
                finally:
                    self.state = "idle"
            return SubmitResult(logged=len(records), exercises=exercise_count)
        finally:
            self._submit_lock.release()
