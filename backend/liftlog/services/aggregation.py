"""
Pure transforms from fetched workout rows to dashboard / chart view models.

Nothing here touches the database. Each function takes a fully materialized
snapshot and returns fresh structures, skipping entries that lack the data
they need (e.g. a set whose exercise join came back empty) instead of raising.
"""
from __future__ import annotations

import calendar
import logging
from datetime import date, datetime, tzinfo
from typing import Iterable, Sequence

from liftlog.schemas.progress import DashboardRead, FrequencyPoint, VolumePoint
from liftlog.schemas.workout import ExerciseGroup, SetRead, WorkoutDetail, WorkoutRead

log = logging.getLogger(__name__)


def day_key(value: datetime | date, tz: tzinfo | None = None) -> str:
    """Calendar day as ``yyyy-mm-dd``; aware datetimes are moved into ``tz`` first."""
    if isinstance(value, datetime):
        if tz is not None and value.tzinfo is not None:
            value = value.astimezone(tz)
        value = value.date()
    return value.isoformat()


def day_label(value: date) -> str:
    return f"{value:%b} {value.day}"


# Record normalizer

def group_sets_by_exercise(sets: Iterable[SetRead]) -> dict[int, ExerciseGroup]:
    """
    Group sets under their exercise, keyed by exercise id.

    Groups come out in order of first appearance and sets keep their input
    order; callers sort by ``set_number`` if they need display order.
    """
    groups: dict[int, ExerciseGroup] = {}
    for s in sets:
        if s.exercise is None:
            log.debug("set %s has no exercise joined; skipped", s.id)
            continue
        group = groups.get(s.exercise.id)
        if group is None:
            group = groups[s.exercise.id] = ExerciseGroup(exercise=s.exercise, sets=[])
        group.sets.append(s)
    return groups


def to_detail(workout: WorkoutRead) -> WorkoutDetail:
    exercises = list(group_sets_by_exercise(workout.sets).values())
    fields = workout.model_dump(exclude={"sets", "exercises"})
    return WorkoutDetail(**fields, sets=list(workout.sets), exercises=exercises)


# Daily aggregator

def _join_notes(first: str | None, second: str | None) -> str | None:
    parts = [n for n in (first, second) if n]
    return "\n".join(parts) if parts else None


def merge_workouts_by_day(
    workouts: Iterable[WorkoutRead], tz: tzinfo | None = None
) -> dict[str, WorkoutRead]:
    """
    Collapse workouts logged on the same calendar day into one.

    The first workout seen for a day keeps its identity (id, name, date);
    every later one on that day only contributes its sets and notes.
    """
    merged: dict[str, WorkoutRead] = {}
    for w in workouts:
        key = day_key(w.date, tz)
        current = merged.get(key)
        if current is None:
            merged[key] = w.model_copy(update={"sets": list(w.sets)})
            continue
        merged[key] = current.model_copy(update={
            "sets": [*current.sets, *w.sets],
            "notes": _join_notes(current.notes, w.notes),
        })
    return merged


# Volume / frequency reducer

def month_days(today: date) -> list[date]:
    _, last = calendar.monthrange(today.year, today.month)
    return [date(today.year, today.month, d) for d in range(1, last + 1)]


def monthly_frequency(
    workouts: Iterable[WorkoutRead], today: date, tz: tzinfo | None = None
) -> list[FrequencyPoint]:
    counts: dict[str, int] = {}
    for w in workouts:
        key = day_key(w.date, tz)
        counts[key] = counts.get(key, 0) + 1

    points = []
    for d in month_days(today):
        key = d.isoformat()
        points.append(FrequencyPoint(date=day_label(d), day=key, workouts=counts.get(key, 0)))
    return points


def volume_by_exercise(workouts: Iterable[WorkoutRead]) -> list[VolumePoint]:
    totals: dict[str, VolumePoint] = {}
    for w in workouts:
        for s in w.sets:
            if s.exercise is None:
                continue
            point = totals.get(s.exercise.name)
            if point is None:
                category = getattr(s.exercise.category, "value", s.exercise.category)
                point = totals[s.exercise.name] = VolumePoint(
                    name=s.exercise.name, volume=0.0, category=category
                )
            point.volume += s.weight * s.reps
    return list(totals.values())


# Dashboard

def summarize(
    workouts: Sequence[WorkoutRead], *, recent: int = 5, tz: tzinfo | None = None
) -> DashboardRead:
    by_day = merge_workouts_by_day(workouts, tz)
    total_days = len(by_day)
    total_sets = sum(len(w.sets) for w in workouts)
    # half-up, not banker's rounding
    average = int(total_sets / total_days + 0.5) if total_days else 0

    latest = sorted(by_day.values(), key=lambda w: w.date, reverse=True)[:recent]
    return DashboardRead(
        total_days=total_days,
        total_sets=total_sets,
        average_sets_per_day=average,
        recent=[to_detail(w) for w in latest],
    )
