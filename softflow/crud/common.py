import logging

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


def get_by_id(db: Session, model, obj_id: int):
    return db.get(model, obj_id)


def integrity_detail(exc: IntegrityError, action: str) -> str:
    # sqlite says "UNIQUE constraint failed", postgres "duplicate key value"
    reason = str(exc.orig).lower()
    if "unique" in reason or "duplicate" in reason:
        return f"Failed to {action}: a record with the same unique value already exists"
    return f"Failed to {action}: the data violates a database constraint"


def save(db: Session, obj, action: str = "save record"):
    """Add + commit + refresh, rolling back on failure."""
    try:
        db.add(obj)
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Integrity error while trying to %s: %s", action, exc.orig)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=integrity_detail(exc, action),
        )
    except SQLAlchemyError:
        db.rollback()
        logger.error("Database error while trying to %s", action, exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to {action}")
    db.refresh(obj)
    return obj


def create(db: Session, model, data: dict, action: str = "create record"):
    return save(db, model(**data), action)


def update(db: Session, obj, data: dict, action: str = "update record"):
    for field, value in data.items():
        setattr(obj, field, value)
    return save(db, obj, action)


def delete(db: Session, obj, action: str = "delete record") -> None:
    try:
        db.delete(obj)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.error("Database error while trying to %s", action, exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to {action}")


def ensure_no_children(children, what: str) -> None:
    if children:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Cannot delete {what} while it still has dependent records",
        )


def plain_values(data: dict) -> dict:
    """Enum members -> their stored string values."""
    return {k: getattr(v, "value", v) for k, v in data.items()}
