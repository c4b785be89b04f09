from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..auth.auth import require_admin
from ..crud import common
from ..crud.user import get_user, list_users, set_blocked, set_verified
from ..database.database import get_db
from ..models.project import Project
from ..models.user import User
from ..schemas.auth import BlockUpdate, UserResponse
from ..schemas.project import ProjectFields, ProjectOut

admin_router = APIRouter(prefix="/api/admin/users", tags=["admin"])


def _get_or_404(db: Session, user_id: int) -> User:
    user = get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@admin_router.get("", response_model=List[UserResponse])
def all_users(db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    return list_users(db)


@admin_router.put("/{user_id}/verify", response_model=UserResponse)
def verify_user(user_id: int, db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    return set_verified(db, _get_or_404(db, user_id))


@admin_router.put("/{user_id}/block", response_model=UserResponse)
def block_user(user_id: int, payload: BlockUpdate, db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    user = _get_or_404(db, user_id)
    if user.id == admin.id and payload.blocked:
        raise HTTPException(status_code=400, detail="You cannot block your own account")
    return set_blocked(db, user, payload.blocked)


@admin_router.post("/{user_id}/projects", response_model=ProjectOut, status_code=201)
def create_user_project(user_id: int, payload: ProjectFields, db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    user = _get_or_404(db, user_id)
    data = common.plain_values(payload.model_dump())
    return common.create(db, Project, {**data, "user_id": user.id}, "create project")
