from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.deps.auth import get_current_user
from liftlog.repositories.exercise_repo import ExerciseRepository
from liftlog.schemas.exercise import ExerciseCreate, ExerciseRead
from liftlog.settings import get_settings

router = APIRouter(prefix="/exercises", tags=["exercises"], dependencies=[Depends(get_current_user)])

@router.get("", response_model=list[ExerciseRead])
def list_exercises(db: Session = Depends(get_db)):
    repo = ExerciseRepository(db)
    if get_settings().SEED_DEFAULT_EXERCISES and repo.count() == 0:
        repo.seed_defaults()
    return repo.list()

@router.post("", response_model=ExerciseRead, status_code=status.HTTP_201_CREATED)
def create_exercise(payload: ExerciseCreate, db: Session = Depends(get_db)):
    # duplicate names surface as DuplicateRecord -> 400
    return ExerciseRepository(db).create(
        name=payload.name,
        description=payload.description,
        category=payload.category,
    )
