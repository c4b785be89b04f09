from typing import List, Optional

from sqlalchemy.orm import Session

from ..models.user import User
from ..schemas.auth import RegisterRequest
from ..utils.security import get_password_hash
from . import common


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()


def create_user(db: Session, user_data: RegisterRequest, is_admin: bool = False) -> User:
    """
    Create a user account; the plain password never reaches the database.
    """
    db_user = User(
        username=user_data.username,
        email=user_data.email,
        phone=user_data.phone,
        password_hash=get_password_hash(user_data.password),
        is_admin=is_admin,
    )
    return common.save(db, db_user, "create user")


def set_verified(db: Session, user: User) -> User:
    return common.update(db, user, {"is_verified": True}, "verify user")


def set_blocked(db: Session, user: User, blocked: bool) -> User:
    return common.update(db, user, {"is_blocked": blocked}, "update user")
