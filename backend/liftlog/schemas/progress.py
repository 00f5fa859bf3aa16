from pydantic import BaseModel, Field
from liftlog.schemas.workout import WorkoutDetail

class FrequencyPoint(BaseModel):
    date: str       # chart label, e.g. "Mar 1"
    day: str        # yyyy-mm-dd
    workouts: int = 0

class VolumePoint(BaseModel):
    name: str
    volume: float
    category: str

class ProgressRead(BaseModel):
    frequency: list[FrequencyPoint] = Field(default_factory=list)
    volume: list[VolumePoint] = Field(default_factory=list)

class DashboardRead(BaseModel):
    total_days: int = 0
    total_sets: int = 0
    average_sets_per_day: int = 0
    recent: list[WorkoutDetail] = Field(default_factory=list)
