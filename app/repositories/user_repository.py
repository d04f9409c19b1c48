# app/repositories/user_repository.py
from typing import List, Optional

from sqlalchemy import func

from app.models.user import User
from app.repositories.base import SessionRepository


def normalize_email(email: str) -> str:
    """Emails are stored and compared trimmed and lowercased"""
    return email.strip().lower()


class UserRepository(SessionRepository):

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(func.lower(User.email) == normalize_email(email)).first()

    def get_all(self) -> List[User]:
        return self.db.query(User).order_by(User.id).all()

    def email_exists(self, email: str) -> bool:
        return (
            self.db.query(User.id)
            .filter(func.lower(User.email) == normalize_email(email))
            .first()
            is not None
        )

    def create(self, user: User) -> User:
        user.email = normalize_email(user.email)
        self.db.add(user)
        self._commit()
        self.db.refresh(user)
        return user

    def update_password(self, user: User, hashed_password: str) -> User:
        user.hashed_password = hashed_password
        self._commit()
        self.db.refresh(user)
        return user
