from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, Numeric, DateTime, CheckConstraint, func
from liftlog.db import Base

class WorkoutSet(Base):
    __tablename__ = "sets"
    __table_args__ = (
        CheckConstraint("weight > 0", name="ck_sets_weight_positive"),
        CheckConstraint("reps > 0", name="ck_sets_reps_positive"),
        CheckConstraint("set_number > 0", name="ck_sets_set_number_positive"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    workout_id: Mapped[int] = mapped_column(ForeignKey("workouts.id", ondelete="CASCADE"), index=True)
    exercise_id: Mapped[int] = mapped_column(ForeignKey("exercises.id"), index=True)
    weight: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    set_number: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    workout = relationship("Workout", back_populates="sets")
    exercise = relationship("Exercise", back_populates="sets")
