"""
Seed the exercise catalogue and the pre-made workouts.
Run: cd backend && python -m fittrack.seed
Safe to re-run: existing exercises/workouts (matched by name) are left alone.
"""
from sqlalchemy.orm import Session

from fittrack.db import SessionLocal
from fittrack.repositories.exercise_repo import ExerciseRepository
from fittrack.repositories.workout_repo import WorkoutRepository

DEFAULT_EXERCISES = [
    {
        "name": "Barbell Back Squat",
        "target_muscle_group": "Legs",
        "equipment_used": "Barbell",
        "exercise_type": "Compound",
        "level": "Intermediate",
        "instructions": "Bar on upper back, feet shoulder-width. Sit hips back and down until thighs are parallel, then drive up through the whole foot.",
    },
    {
        "name": "Bench Press",
        "target_muscle_group": "Chest",
        "equipment_used": "Barbell",
        "exercise_type": "Compound",
        "level": "Intermediate",
        "instructions": "Lower the bar to mid-chest with elbows around 45 degrees, pause lightly, press back to lockout.",
    },
    {
        "name": "Bent Over Row",
        "target_muscle_group": "Back",
        "equipment_used": "Barbell",
        "exercise_type": "Compound",
        "level": "Intermediate",
        "instructions": "Hinge to roughly 45 degrees, pull the bar to the lower ribs, lower under control.",
    },
    {
        "name": "Dumbbell Shoulder Press",
        "target_muscle_group": "Shoulders",
        "equipment_used": "Dumbbells",
        "exercise_type": "Compound",
        "level": "Beginner",
        "instructions": "Dumbbells at shoulder height, press overhead without arching the lower back.",
    },
    {
        "name": "Goblet Squat",
        "target_muscle_group": "Legs",
        "equipment_used": "Dumbbells",
        "exercise_type": "Compound",
        "level": "Beginner",
        "instructions": "Hold a dumbbell at the chest, squat between the knees keeping the chest tall.",
    },
    {
        "name": "Dumbbell Curl",
        "target_muscle_group": "Arms",
        "equipment_used": "Dumbbells",
        "exercise_type": "Isolation",
        "level": "Beginner",
        "instructions": "Elbows pinned to the sides, curl up, lower slowly.",
    },
    {
        "name": "Lat Pulldown",
        "target_muscle_group": "Back",
        "equipment_used": "Machine",
        "exercise_type": "Compound",
        "level": "Beginner",
        "instructions": "Pull the bar to the upper chest leading with the elbows, control the return.",
    },
    {
        "name": "Leg Press",
        "target_muscle_group": "Legs",
        "equipment_used": "Machine",
        "exercise_type": "Compound",
        "level": "Beginner",
        "instructions": "Lower the sled until knees reach about 90 degrees, press without locking the knees.",
    },
    {
        "name": "Press-ups",
        "target_muscle_group": "Chest",
        "equipment_used": "Bodyweight",
        "exercise_type": "Compound",
        "level": "Beginner",
        "instructions": "Hands under shoulders, body in a straight line, lower the chest to the floor and press back up.",
    },
    {
        "name": "Plank",
        "target_muscle_group": "Core",
        "equipment_used": "Bodyweight",
        "exercise_type": "Isometric",
        "level": "Beginner",
        "instructions": "Forearms under shoulders, brace the core and hold a straight line from head to heels.",
    },
    {
        "name": "Kettlebell Swing",
        "target_muscle_group": "Glutes",
        "equipment_used": "Kettlebells",
        "exercise_type": "Power",
        "level": "Intermediate",
        "instructions": "Hinge and hike the bell back, snap the hips forward to float it to chest height.",
    },
    {
        "name": "Band Pull-Apart",
        "target_muscle_group": "Shoulders",
        "equipment_used": "Bands",
        "exercise_type": "Isolation",
        "level": "Beginner",
        "instructions": "Arms straight at shoulder height, pull the band apart by squeezing the shoulder blades.",
    },
]

# exercise names in order
DEFAULT_WORKOUTS = [
    {
        "name": "Full Body Starter",
        "level": "Beginner",
        "notes": "One movement each for legs, push, pull and core.",
        "exercises": ["Goblet Squat", "Press-ups", "Lat Pulldown", "Plank"],
    },
    {
        "name": "Barbell Basics",
        "level": "Intermediate",
        "notes": "Classic compound lifts.",
        "exercises": ["Barbell Back Squat", "Bench Press", "Bent Over Row"],
    },
    {
        "name": "Upper Body Dumbbells",
        "level": "Beginner",
        "exercises": ["Dumbbell Shoulder Press", "Dumbbell Curl", "Band Pull-Apart"],
    },
]

def seed_exercises(db: Session) -> int:
    repo = ExerciseRepository(db)
    created = 0
    for ex in DEFAULT_EXERCISES:
        if repo.get_by_name(ex["name"]) is None:
            repo.create(**ex)
            created += 1
    return created

def seed_workouts(db: Session) -> int:
    exercises = ExerciseRepository(db)
    workouts = WorkoutRepository(db)
    created = 0
    for w in DEFAULT_WORKOUTS:
        if workouts.get_by_name(w["name"]) is not None:
            continue
        ids = []
        for name in w["exercises"]:
            ex = exercises.get_by_name(name)
            if ex is None:
                raise RuntimeError(f"workout {w['name']!r} references unknown exercise {name!r}")
            ids.append(ex.id)
        workouts.create(name=w["name"], creator_email=None, exercise_ids=ids,
                        level=w.get("level"), notes=w.get("notes"))
        created += 1
    return created

def main():
    with SessionLocal() as db:
        n_ex = seed_exercises(db)
        n_wo = seed_workouts(db)
    print(f"Seeded {n_ex} exercises and {n_wo} default workouts")


if __name__ == "__main__":
    main()
