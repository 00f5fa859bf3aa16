from enum import Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, Text, DateTime, func, Enum as SAEnum, Integer
from liftlog.db import Base

class ExerciseCategory(str, Enum):
    upper_body = "upper_body"
    lower_body = "lower_body"
    cardio = "cardio"

class Exercise(Base):
    __tablename__ = "exercises"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(120), unique=True, index=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[ExerciseCategory] = mapped_column(
        SAEnum(ExerciseCategory, name="exercise_category"),
        nullable=False,
    )
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[DateTime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    sets = relationship("WorkoutSet", back_populates="exercise")
