class SessionEditorError(Exception):
    """Base for errors the session editor reports back to the user."""

class DuplicateExerciseError(SessionEditorError):
    def __init__(self, exercise_id: int):
        super().__init__("This exercise is already in your workout")
        self.exercise_id = exercise_id

class EntryNotFoundError(SessionEditorError, LookupError):
    pass

class NoDataToSaveError(SessionEditorError):
    def __init__(self):
        super().__init__("Please add some reps to save your workout")

class SubmissionInProgressError(SessionEditorError):
    def __init__(self):
        super().__init__("A save for this workout is already in progress")

class SaveWorkoutError(SessionEditorError):
    def __init__(self):
        super().__init__("Failed to log workout")
