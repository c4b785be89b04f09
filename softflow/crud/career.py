from typing import List, Optional

from sqlalchemy.orm import Session

from ..models.career import Application, ApplicationStatus, Career


def get_careers(db: Session, published_only: bool = True) -> List[Career]:
    query = db.query(Career)
    if published_only:
        query = query.filter(Career.published.is_(True))
    return query.order_by(Career.created_at.desc(), Career.id.desc()).all()


def get_applications(db: Session, career_id: Optional[int] = None) -> List[Application]:
    query = db.query(Application)
    if career_id is not None:
        query = query.filter(Application.career_id == career_id)
    return query.order_by(Application.created_at.desc(), Application.id.desc()).all()


def get_user_applications(db: Session, email: str) -> List[Application]:
    return db.query(Application)\
             .filter(Application.email == email)\
             .order_by(Application.created_at.desc(), Application.id.desc())\
             .all()


def new_application(career_id: int, data: dict) -> Application:
    return Application(**data, career_id=career_id, status=ApplicationStatus.PENDING.value)
