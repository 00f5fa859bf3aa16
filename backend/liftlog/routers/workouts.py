from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.deps.auth import get_current_user, get_owned_workout
from liftlog.models import User, Workout
from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.schemas.workout import WorkoutCreate, WorkoutDetail, WorkoutRead
from liftlog.services.aggregation import to_detail

router = APIRouter(prefix="/workouts", tags=["workouts"])

def _detail(workout: Workout) -> WorkoutDetail:
    return to_detail(WorkoutRead.model_validate(workout))

@router.get("", response_model=list[WorkoutRead])
def list_my_workouts(
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
):
    return WorkoutRepository(db).list_by_user(current.id, limit=limit, offset=offset)

@router.post("", response_model=WorkoutDetail, status_code=status.HTTP_201_CREATED)
def create_workout(
    payload: WorkoutCreate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    workout = WorkoutRepository(db).create(current.id, payload)
    return _detail(workout)

@router.get("/{workout_id}", response_model=WorkoutDetail)
def get_workout(workout: Workout = Depends(get_owned_workout)):
    return _detail(workout)

@router.put("/{workout_id}", response_model=WorkoutDetail)
def update_workout(
    payload: WorkoutCreate,
    workout: Workout = Depends(get_owned_workout),
    db: Session = Depends(get_db),
):
    return _detail(WorkoutRepository(db).replace(workout, payload))

@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workout(workout: Workout = Depends(get_owned_workout), db: Session = Depends(get_db)):
    WorkoutRepository(db).delete(workout)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/{workout_id}/sets/{set_id}", response_model=WorkoutDetail)
def remove_set(
    set_id: int,
    workout: Workout = Depends(get_owned_workout),
    db: Session = Depends(get_db),
):
    updated = WorkoutRepository(db).remove_set(workout, set_id)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Set not found")
    return _detail(updated)
