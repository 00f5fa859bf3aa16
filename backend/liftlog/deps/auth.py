# liftlog/deps/auth.py
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from jose.exceptions import ExpiredSignatureError, JWTError

from liftlog.db import get_db
from liftlog.models import User, Workout
from liftlog.repositories.user_repo import IdentityRepository, UserRepository
from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.security import decode_token

# Exposes Bearer auth in Swagger; login endpoint issues the token
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")

def get_current_user(
    db: Session = Depends(get_db),
    token: str = Depends(oauth2_scheme),
) -> User:
    """Resolve the bearer token to a profile, creating the profile if it is missing."""
    unauth = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = decode_token(token)
        sub = payload.get("sub")
        if sub is None:
            raise unauth
        identity = IdentityRepository(db).get(int(sub))
    except ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token expired",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except (JWTError, ValueError):
        raise unauth

    if not identity:
        raise unauth
    return UserRepository(db).ensure_for_identity(identity)

def get_owned_workout(
    workout_id: int,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
) -> Workout:
    workout = WorkoutRepository(db).get(workout_id)
    if not workout:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    if workout.user_id != current.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed for this workout")
    return workout
