import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError
from sqlalchemy.orm import Session

from ..auth.auth import authenticate_user, get_session_context, require_user
from ..auth.gate import SessionContext, check_route
from ..crud.user import create_user, get_user_by_email, get_user_by_username
from ..database.database import get_db
from ..models.user import User
from ..schemas.auth import GateDecisionOut, LoginRequest, RegisterRequest, Token, UserResponse
from ..schemas.validation import FieldValidationError, format_errors
from ..utils.security import ACCESS_TOKEN_EXPIRE_MINUTES, create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


def _token_for(user: User) -> dict:
    return {
        "access_token": create_access_token({"sub": user.username}),
        "token_type": "bearer",
        "expires_in": ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        "user": UserResponse.model_validate(user),
    }


@router.post("/register", response_model=Token, status_code=201)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    if get_user_by_username(db, payload.username):
        raise HTTPException(status_code=400, detail="Username already exists")
    if payload.email and get_user_by_email(db, payload.email):
        raise HTTPException(status_code=400, detail="Email already registered")

    user = create_user(db, payload)
    logger.info("Registered user %s", user.username)
    return _token_for(user)


@router.post("/login", response_model=Token)
async def login(request: Request, db: Session = Depends(get_db)):
    # Accept both the OAuth2 form post and a JSON body
    content_type = (request.headers.get("content-type") or "").split(";")[0].strip()
    if content_type == "application/x-www-form-urlencoded" or content_type == "multipart/form-data":
        raw = dict(await request.form())
    elif content_type == "application/json":
        try:
            raw = await request.json()
        except ValueError:
            raise HTTPException(status_code=400, detail="Malformed JSON body")
    else:
        raise HTTPException(
            status_code=400,
            detail="Content-Type must be application/json or application/x-www-form-urlencoded",
        )

    try:
        credentials = LoginRequest.model_validate(raw)
    except ValidationError as exc:
        raise FieldValidationError(format_errors(exc.errors()), "login")

    logger.info("Login attempt for username: %s", credentials.username)
    user, reason = authenticate_user(db, credentials.username, credentials.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=reason or "Authentication failed",
            headers={"WWW-Authenticate": "Bearer"},
        )
    logger.info("Login successful for %s, is_admin: %s", user.username, user.is_admin)
    return _token_for(user)


@router.post("/logout")
def logout():
    # Tokens are stateless; the client drops its copy.
    return {"ok": True}


@router.get("/user", response_model=UserResponse)
def current_user(user: User = Depends(require_user)):
    return user


@router.get("/navigation", response_model=GateDecisionOut)
def navigation(path: str, ctx: SessionContext = Depends(get_session_context)):
    """Route gate decision for `path`, evaluated against the caller's current token."""
    decision = check_route(path, ctx)
    return {
        "action": decision.action,
        "location": decision.location,
        "authenticated": ctx.authenticated,
        "is_admin": ctx.is_admin,
        "username": ctx.username,
    }
