from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.errors import DuplicateRecord
from liftlog.models import User
from liftlog.schemas.user import UserRegister, UserLogin, UserRead, Token
from liftlog.security import hash_password, verify_password, create_access_token
from liftlog.deps.auth import get_current_user
from liftlog.repositories.user_repo import IdentityRepository, UserRepository

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(payload: UserRegister, db: Session = Depends(get_db)):
    identities = IdentityRepository(db)
    try:
        identity = identities.create(email=payload.email, password_hash=hash_password(payload.password))
        user = UserRepository(db).create(identity, name=payload.name)
    except DuplicateRecord:
        raise HTTPException(status_code=400, detail="email already registered")
    return user

@router.post("/login", response_model=Token)
def login(payload: UserLogin, db: Session = Depends(get_db)):
    identity = IdentityRepository(db).get_by_email(payload.email)
    if not identity or not verify_password(payload.password, identity.password_hash):
        raise HTTPException(status_code=401, detail="invalid credentials")
    # profile rows are created lazily on first sign-in
    UserRepository(db).ensure_for_identity(identity)
    token = create_access_token(sub=str(identity.id))
    return {"access_token": token, "token_type": "bearer"}

@router.get("/me", response_model=UserRead)
def me(current_user: User = Depends(get_current_user)):
    return current_user
