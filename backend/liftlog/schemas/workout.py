from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field, StringConstraints
from liftlog.schemas.exercise import ExerciseRead

NotesStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=2000)]
PosInt = Annotated[int, Field(gt=0)]

# sets.weight is numeric(10, 2), sets.reps a 32-bit integer
MAX_WEIGHT = 100_000_000
MAX_REPS = 2**31 - 1

class SetDraft(BaseModel):
    # Unconstrained on purpose: unusable rows are dropped before saving
    weight: float = 0
    reps: int = 0

class ExerciseEntry(BaseModel):
    exercise_id: PosInt
    sets: list[SetDraft] = Field(default_factory=list)

class WorkoutCreate(BaseModel):
    date: datetime
    notes: NotesStr | None = None
    exercises: list[ExerciseEntry] = Field(default_factory=list)

class SetCreate(BaseModel):
    """Shape of a set row right before it is inserted."""
    workout_id: PosInt
    exercise_id: PosInt
    weight: Annotated[float, Field(gt=0, lt=MAX_WEIGHT, allow_inf_nan=False)]
    reps: Annotated[int, Field(gt=0, le=MAX_REPS)]
    set_number: PosInt

class SetRead(BaseModel):
    id: int
    workout_id: int
    exercise_id: int
    weight: float
    reps: int
    set_number: int
    exercise: ExerciseRead | None = None

    model_config = {"from_attributes": True}

class WorkoutRead(BaseModel):
    id: int
    user_id: int
    name: str
    date: datetime
    notes: str | None = None
    sets: list[SetRead] = Field(default_factory=list)

    model_config = {"from_attributes": True}

class ExerciseGroup(BaseModel):
    exercise: ExerciseRead
    sets: list[SetRead] = Field(default_factory=list)

class WorkoutDetail(WorkoutRead):
    exercises: list[ExerciseGroup] = Field(default_factory=list)
