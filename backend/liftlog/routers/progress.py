"""Dashboard and progress chart data, computed from a fresh fetch per request."""
from datetime import date, datetime
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.deps.auth import get_current_user
from liftlog.models import User
from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.schemas.progress import DashboardRead, ProgressRead
from liftlog.schemas.workout import WorkoutRead
from liftlog.services.aggregation import monthly_frequency, summarize, volume_by_exercise
from liftlog.settings import get_settings

router = APIRouter(tags=["progress"])

def _snapshot(db: Session, user: User) -> list[WorkoutRead]:
    rows = WorkoutRepository(db).list_by_user(user.id)
    return [WorkoutRead.model_validate(w) for w in rows]

@router.get("/dashboard", response_model=DashboardRead)
def dashboard(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    s = get_settings()
    return summarize(_snapshot(db, current), recent=s.RECENT_WORKOUTS, tz=ZoneInfo(s.TIMEZONE))

@router.get("/progress", response_model=ProgressRead)
def progress(
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    today: date | None = Query(None, description="Any day of the month to chart; defaults to today"),
):
    tz = ZoneInfo(get_settings().TIMEZONE)
    today = today or datetime.now(tz).date()
    workouts = _snapshot(db, current)
    return ProgressRead(
        frequency=monthly_frequency(workouts, today, tz),
        volume=volume_by_exercise(workouts),
    )
