from __future__ import annotations
import logging
from typing import Optional

from sqlalchemy import select, func

from liftlog.errors import DuplicateRecord
from liftlog.models import Exercise, ExerciseCategory
from liftlog.repositories.base import BaseRepository

log = logging.getLogger(__name__)

DEFAULT_EXERCISES: list[tuple[str, str, ExerciseCategory]] = [
    ("Bench Press", "Barbell chest press on a flat bench", ExerciseCategory.upper_body),
    ("Overhead Press", "Standing barbell press for shoulders", ExerciseCategory.upper_body),
    ("Pull-ups", "Bodyweight back and bicep exercise", ExerciseCategory.upper_body),
    ("Dumbbell Rows", "Single-arm back exercise with dumbbells", ExerciseCategory.upper_body),
    ("Squats", "Barbell squat for legs and core", ExerciseCategory.lower_body),
    ("Deadlifts", "Compound exercise for posterior chain", ExerciseCategory.lower_body),
    ("Lunges", "Walking or stationary lunges for legs", ExerciseCategory.lower_body),
    ("Calf Raises", "Standing calf raises for lower legs", ExerciseCategory.lower_body),
    ("Running", "Outdoor or treadmill running", ExerciseCategory.cardio),
    ("Cycling", "Stationary bike or outdoor cycling", ExerciseCategory.cardio),
    ("Jump Rope", "High-intensity cardio workout", ExerciseCategory.cardio),
    ("Rowing", "Full-body cardio on rowing machine", ExerciseCategory.cardio),
]

class ExerciseRepository(BaseRepository[Exercise]):
    def get(self, exercise_id: int) -> Optional[Exercise]:
        return self.db.get(Exercise, exercise_id)

    def list(self) -> list[Exercise]:
        stmt = select(Exercise).order_by(Exercise.name.asc())
        return list(self.db.execute(stmt).scalars().all())

    def count(self) -> int:
        return self.db.execute(select(func.count()).select_from(Exercise)).scalar_one()

    def create(self, *, name: str, description: str | None, category: ExerciseCategory) -> Exercise:
        return self.add_and_refresh(Exercise(name=name, description=description, category=category))

    def seed_defaults(self) -> int:
        """Insert the built-in catalogue; names already present are skipped."""
        added = 0
        for name, description, category in DEFAULT_EXERCISES:
            try:
                self.create(name=name, description=description, category=category)
                added += 1
            except DuplicateRecord:
                continue
        if added:
            log.info("seeded %d default exercises", added)
        return added
