import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from ..crud.user import get_user_by_username
from ..database.database import get_db
from ..models.user import User
from ..utils.security import decode_access_token, verify_password
from .gate import SessionContext

logger = logging.getLogger(__name__)

# auto_error=False: a missing token is an anonymous session, not an error
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login", auto_error=False)

BLOCKED_MESSAGE = "Your account has been blocked. Please contact administration."


def authenticate_user(db: Session, username: str, password: str):
    """Return (user, None) on success or (None, reason)."""
    user = get_user_by_username(db, username)
    if not user:
        logger.info("Login failed, unknown username: %s", username)
        return None, "Incorrect username"
    if not verify_password(password, user.password_hash):
        logger.info("Login failed, wrong password for %s", username)
        return None, "Incorrect password"
    if user.is_blocked:
        logger.warning("Login blocked for user %s: account is blocked", username)
        return None, BLOCKED_MESSAGE
    return user, None


def get_optional_user(
    db: Session = Depends(get_db),
    token: Optional[str] = Depends(oauth2_scheme),
) -> Optional[User]:
    # missing, expired and invalid tokens all look the same: anonymous
    if not token:
        return None
    username = decode_access_token(token)
    if username is None:
        return None
    user = get_user_by_username(db, username)
    if user is None or user.is_blocked:
        return None
    return user


def get_session_context(user: Optional[User] = Depends(get_optional_user)) -> SessionContext:
    return SessionContext.from_user(user)


def require_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def require_admin(user: User = Depends(require_user)) -> User:
    if not user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized")
    return user
