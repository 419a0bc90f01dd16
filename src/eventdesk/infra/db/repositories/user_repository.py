"""Repository for User records. No business logic; caller owns the transaction."""
from __future__ import annotations
from sqlmodel import Session, select
from eventdesk.models.core import User, UserRole


class UserRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def get_by_id(self, user_id: int) -> User | None:
        return self._s.get(User, user_id)

    def get_by_email(self, email: str) -> User | None:
        return self._s.exec(select(User).where(User.email == email)).first()

    def create(self, *, email: str, name: str, role: UserRole = UserRole.USER) -> User:
        user = User(email=email, name=name, role=role)
        self._s.add(user)
        self._s.flush()  # get generated PK without committing
        return user
