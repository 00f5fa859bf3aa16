from liftlog.models.user import AuthIdentity, User
from liftlog.models.exercise import Exercise, ExerciseCategory
from liftlog.models.workout import Workout
from liftlog.models.workout_set import WorkoutSet

__all__ = ["AuthIdentity", "User", "Exercise", "ExerciseCategory", "Workout", "WorkoutSet"]
