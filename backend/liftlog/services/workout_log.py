"""Rules applied to a logged workout before its sets reach the database."""
from __future__ import annotations

import math
from datetime import datetime, tzinfo
from typing import Iterable, Optional, Sequence

from liftlog.errors import NoValidSets
from liftlog.schemas.workout import MAX_REPS, MAX_WEIGHT, ExerciseEntry, SetCreate

_ORDINAL_SUFFIX = {1: "st", 2: "nd", 3: "rd"}


def ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        return f"{n}th"
    return f"{n}{_ORDINAL_SUFFIX.get(n % 10, 'th')}"


def workout_display_name(when: datetime, tz: Optional[tzinfo] = None) -> str:
    """``Workout March 1st, 2024``, dated in ``tz`` when ``when`` is aware."""
    if tz is not None and when.tzinfo is not None:
        when = when.astimezone(tz)
    return f"Workout {when:%B} {ordinal(when.day)}, {when.year}"


def _usable(weight: float, reps: int) -> bool:
    # NaN compares False against everything
    if not math.isfinite(weight):
        return False
    return 0 < weight < MAX_WEIGHT and 0 < reps <= MAX_REPS


def draft_set_rows(workout_id: int, entries: Iterable[ExerciseEntry]) -> list[SetCreate]:
    """
    Turn the exercise entries of a save request into validated set rows.

    Rows whose weight or reps are not positive finite numbers that fit the
    sets table are dropped without complaint, and the survivors are numbered
    1..n per exercise. Raises NoValidSets when nothing is left to
    insert.
    """
    rows: list[SetCreate] = []
    counters: dict[int, int] = {}
    for entry in entries:
        for s in entry.sets:
            if not _usable(s.weight, s.reps):
                continue
            # an exercise listed twice keeps counting where it left off
            n = counters.get(entry.exercise_id, 0) + 1
            counters[entry.exercise_id] = n
            rows.append(SetCreate(
                workout_id=workout_id,
                exercise_id=entry.exercise_id,
                weight=s.weight,
                reps=s.reps,
                set_number=n,
            ))
    if not rows:
        raise NoValidSets()
    return rows


def renumber(sets: Sequence) -> list:
    """
    Reassign ``set_number`` 1..n per exercise, keeping the current order.

    Works on anything with ``exercise_id`` / ``set_number`` attributes and
    returns the items whose number changed.
    """
    counters: dict[int, int] = {}
    changed = []
    for s in sorted(sets, key=lambda s: (s.set_number, s.id)):
        n = counters.get(s.exercise_id, 0) + 1
        counters[s.exercise_id] = n
        if s.set_number != n:
            s.set_number = n
            changed.append(s)
    return changed
