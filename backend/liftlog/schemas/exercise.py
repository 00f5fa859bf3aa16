from typing import Annotated
from pydantic import BaseModel, Field, field_validator
from liftlog.models.exercise import ExerciseCategory

ExerciseName = Annotated[str, Field(max_length=120)]
DescriptionStr = Annotated[str, Field(max_length=1000)]

class ExerciseCreate(BaseModel):
    name: ExerciseName
    description: DescriptionStr | None = None
    category: ExerciseCategory

    @field_validator("name")
    @classmethod
    def name_non_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("name cannot be blank")
        return v2

    @field_validator("description")
    @classmethod
    def blank_description_is_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None

class ExerciseRead(BaseModel):
    id: int
    name: str
    description: str | None = None
    category: ExerciseCategory

    model_config = {"from_attributes": True}
