from __future__ import annotations
import logging
from typing import Optional
from zoneinfo import ZoneInfo

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from liftlog.errors import DomainError
from liftlog.models import Workout, WorkoutSet
from liftlog.repositories.base import BaseRepository
from liftlog.schemas.workout import WorkoutCreate
from liftlog.services.workout_log import draft_set_rows, renumber, workout_display_name
from liftlog.settings import get_settings

log = logging.getLogger(__name__)

_WITH_SETS = selectinload(Workout.sets).selectinload(WorkoutSet.exercise)

class WorkoutRepository(BaseRepository[Workout]):
    def get(self, workout_id: int) -> Optional[Workout]:
        stmt = select(Workout).where(Workout.id == workout_id).options(_WITH_SETS)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_by_user(self, user_id: int, *, limit: int | None = None, offset: int = 0) -> list[Workout]:
        stmt = select(Workout).where(Workout.user_id == user_id)\
                              .order_by(Workout.date.desc(), Workout.id.desc())\
                              .options(_WITH_SETS)\
                              .offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def create(self, user_id: int, payload: WorkoutCreate) -> Workout:
        workout = Workout(
            user_id=user_id,
            name=self._display_name(payload),
            date=payload.date,
            notes=payload.notes or None,
        )
        self.db.add(workout)
        try:
            self.flush()
            self._insert_sets(workout, payload)
        except DomainError:
            self.db.rollback()
            raise
        workout_id = workout.id
        self.commit()
        log.info("workout %s saved for user %s", workout_id, user_id)
        return self.get(workout_id)

    def replace(self, workout: Workout, payload: WorkoutCreate) -> Workout:
        """Overwrite date/notes and swap the whole set batch for a new one."""
        workout_id = workout.id
        workout.name = self._display_name(payload)
        workout.date = payload.date
        workout.notes = payload.notes or None
        try:
            # delete-orphan removes the old batch on flush
            workout.sets.clear()
            self.flush()
            self._insert_sets(workout, payload)
        except DomainError:
            self.db.rollback()
            raise
        self.commit()
        log.info("workout %s updated", workout_id)
        return self.get(workout_id)

    def delete(self, workout: Workout) -> None:
        workout_id = workout.id
        self.db.delete(workout)
        self.commit()
        log.info("workout %s deleted", workout_id)

    def remove_set(self, workout: Workout, set_id: int) -> Optional[Workout]:
        """Drop one set and close the gap in its exercise's numbering."""
        target = next((s for s in workout.sets if s.id == set_id), None)
        if target is None:
            return None
        workout_id = workout.id
        workout.sets.remove(target)
        renumber(workout.sets)
        self.commit()
        return self.get(workout_id)

    def _display_name(self, payload: WorkoutCreate) -> str:
        # named after the same local day the dashboard buckets it into
        return workout_display_name(payload.date, ZoneInfo(get_settings().TIMEZONE))

    def _insert_sets(self, workout: Workout, payload: WorkoutCreate) -> None:
        rows = draft_set_rows(workout.id, payload.exercises)
        workout.sets.extend(WorkoutSet(**row.model_dump()) for row in rows)
        self.flush()
