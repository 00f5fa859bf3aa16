# liftlog/repositories/user_repo.py
from __future__ import annotations
import logging
from typing import Optional

from sqlalchemy import select, func

from liftlog.errors import DuplicateRecord
from liftlog.models import AuthIdentity, User
from liftlog.repositories.base import BaseRepository

log = logging.getLogger(__name__)

class IdentityRepository(BaseRepository[AuthIdentity]):
    """Accounts of the auth provider."""

    def get(self, identity_id: int) -> Optional[AuthIdentity]:
        return self.db.get(AuthIdentity, identity_id)

    def get_by_email(self, email: str) -> Optional[AuthIdentity]:
        stmt = select(AuthIdentity).where(func.lower(AuthIdentity.email) == email.lower())
        return self.db.execute(stmt).scalar_one_or_none()

    def create(self, *, email: str, password_hash: str) -> AuthIdentity:
        if self.get_by_email(email):
            raise DuplicateRecord("email already registered")
        return self.add_and_refresh(AuthIdentity(email=email, password_hash=password_hash))

class UserRepository(BaseRepository[User]):
    # READS
    def get(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(func.lower(User.email) == email.lower())
        return self.db.execute(stmt).scalar_one_or_none()

    def get_by_identity(self, identity_id: int) -> Optional[User]:
        stmt = select(User).where(User.auth_id == identity_id)
        return self.db.execute(stmt).scalar_one_or_none()

    # WRITES
    def create(self, identity: AuthIdentity, *, name: str) -> User:
        user = User(auth_id=identity.id, email=identity.email, name=name)
        return self.add_and_refresh(user)

    def ensure_for_identity(self, identity: AuthIdentity) -> User:
        """Return the profile for ``identity``, creating it on first sign-in."""
        user = self.get_by_identity(identity.id)
        if user:
            return user
        name = identity.email.split("@", 1)[0]
        log.info("creating profile for identity %s", identity.id)
        return self.create(identity, name=name)
