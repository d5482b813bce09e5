from fittrack.models.user import User, UserRole
from fittrack.models.exercise import Exercise
from fittrack.models.workout import Workout, WorkoutExercise
from fittrack.models.workout_log import WorkoutLog
from fittrack.models.draft import Draft

__all__ = ["User", "UserRole", "Exercise", "Workout", "WorkoutExercise", "WorkoutLog", "Draft"]
