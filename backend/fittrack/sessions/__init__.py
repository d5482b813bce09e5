from fittrack.sessions.editor import SessionEditor, parse_reps, parse_weight
from fittrack.sessions.entries import ExerciseEntry, ExerciseRef, LogRecord, SubmitResult, WorkoutSet
from fittrack.sessions.registry import EditorRegistry
from fittrack.sessions.store import DraftStore, MemoryDraftStore, SqlDraftStore

__all__ = [
    "SessionEditor", "parse_reps", "parse_weight",
    "ExerciseEntry", "ExerciseRef", "LogRecord", "SubmitResult", "WorkoutSet",
    "EditorRegistry", "DraftStore", "MemoryDraftStore", "SqlDraftStore",
]
