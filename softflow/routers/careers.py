import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ..auth.auth import get_session_context, require_admin, require_user
from ..auth.gate import SessionContext
from ..crud import common
from ..crud.career import get_applications, get_careers, get_user_applications, new_application
from ..database.database import get_db
from ..models.career import Application, Career
from ..models.user import User
from ..schemas.career import (
    ApplicationCreate,
    ApplicationOut,
    ApplicationStatusUpdate,
    CareerCreate,
    CareerOut,
    CareerUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["careers"])
admin_router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


def _visible_career(db: Session, career_id: int, ctx: SessionContext) -> Career:
    career = common.get_by_id(db, Career, career_id)
    if not career or (not career.published and not ctx.is_admin):
        raise HTTPException(status_code=404, detail="Career not found")
    return career


@router.get("/careers", response_model=List[CareerOut])
def list_careers(db: Session = Depends(get_db), ctx: SessionContext = Depends(get_session_context)):
    return get_careers(db, published_only=not ctx.is_admin)


@router.get("/careers/{career_id}", response_model=CareerOut)
def get_career(career_id: int, db: Session = Depends(get_db), ctx: SessionContext = Depends(get_session_context)):
    return _visible_career(db, career_id, ctx)


@router.post("/careers/{career_id}/apply", status_code=201)
def apply(career_id: int, payload: ApplicationCreate, db: Session = Depends(get_db)):
    # applications are only accepted for published openings, admin or not
    _visible_career(db, career_id, SessionContext.anonymous())
    application = common.save(db, new_application(career_id, payload.model_dump()), "submit application")
    logger.info("Application %s submitted for career %s", application.id, career_id)
    return {"message": "Application submitted successfully"}


@router.get("/user/applications", response_model=List[ApplicationOut])
def my_applications(db: Session = Depends(get_db), user: User = Depends(require_user)):
    if not user.email:
        return []
    return get_user_applications(db, user.email)


@admin_router.post("/careers", response_model=CareerOut, status_code=201)
def create_career(payload: CareerCreate, db: Session = Depends(get_db)):
    return common.create(db, Career, payload.model_dump(), "create career")


@admin_router.put("/careers/{career_id}", response_model=CareerOut)
def update_career(career_id: int, payload: CareerUpdate, db: Session = Depends(get_db)):
    career = common.get_by_id(db, Career, career_id)
    if not career:
        raise HTTPException(status_code=404, detail="Career not found")
    return common.update(db, career, payload.model_dump(exclude_unset=True), "update career")


@admin_router.delete("/careers/{career_id}", status_code=204)
def delete_career(career_id: int, db: Session = Depends(get_db)):
    career = common.get_by_id(db, Career, career_id)
    if not career:
        raise HTTPException(status_code=404, detail="Career not found")
    common.ensure_no_children(career.applications, "career")
    common.delete(db, career, "delete career")


@admin_router.get("/applications", response_model=List[ApplicationOut])
def list_applications(career_id: Optional[int] = Query(None, alias="careerId"), db: Session = Depends(get_db)):
    return get_applications(db, career_id)


@admin_router.put("/applications/{application_id}/status", response_model=ApplicationOut)
def update_application_status(application_id: int, payload: ApplicationStatusUpdate, db: Session = Depends(get_db)):
    application = common.get_by_id(db, Application, application_id)
    if not application:
        raise HTTPException(status_code=404, detail="Application not found")
    return common.update(db, application, {"status": payload.status.value}, "update application status")
