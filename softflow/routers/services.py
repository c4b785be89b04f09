from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..auth.auth import get_session_context, require_admin
from ..auth.gate import SessionContext
from ..crud import common
from ..crud.content import get_service_by_slug, get_services
from ..database.database import get_db
from ..models.service import Service
from ..schemas.service import ServiceActiveUpdate, ServiceCreate, ServiceOut, ServiceUpdate

router = APIRouter(prefix="/api/services", tags=["services"])
admin_router = APIRouter(prefix="/api/admin/services", tags=["admin"], dependencies=[Depends(require_admin)])


def _get_or_404(db: Session, service_id: int) -> Service:
    service = common.get_by_id(db, Service, service_id)
    if not service:
        raise HTTPException(status_code=404, detail="Service not found")
    return service


@router.get("", response_model=List[ServiceOut])
def list_services(db: Session = Depends(get_db), ctx: SessionContext = Depends(get_session_context)):
    return get_services(db, active_only=not ctx.is_admin)


@router.get("/{slug}", response_model=ServiceOut)
def get_service(slug: str, db: Session = Depends(get_db), ctx: SessionContext = Depends(get_session_context)):
    service = get_service_by_slug(db, slug)
    if not service or (not service.active and not ctx.is_admin):
        raise HTTPException(status_code=404, detail="Service not found")
    return service


@admin_router.get("", response_model=List[ServiceOut])
def list_all_services(db: Session = Depends(get_db)):
    return get_services(db, active_only=False)


@admin_router.post("", response_model=ServiceOut, status_code=201)
def create_service(payload: ServiceCreate, db: Session = Depends(get_db)):
    return common.create(db, Service, payload.model_dump(), "create service")


@admin_router.put("/{service_id}", response_model=ServiceOut)
def update_service(service_id: int, payload: ServiceUpdate, db: Session = Depends(get_db)):
    service = _get_or_404(db, service_id)
    return common.update(db, service, payload.model_dump(exclude_unset=True), "update service")


@admin_router.patch("/{service_id}/active", response_model=ServiceOut)
def toggle_service(service_id: int, payload: ServiceActiveUpdate, db: Session = Depends(get_db)):
    service = _get_or_404(db, service_id)
    return common.update(db, service, {"active": payload.active}, "update service")


@admin_router.delete("/{service_id}", status_code=204)
def delete_service(service_id: int, db: Session = Depends(get_db)):
    common.delete(db, _get_or_404(db, service_id), "delete service")
