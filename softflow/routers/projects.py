from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..auth.auth import require_admin, require_user
from ..crud import common
from ..crud.invoice import create_invoice, get_project_invoices
from ..crud.project import (
    add_project_update,
    delete_project,
    get_all_projects,
    get_project_for,
    get_project_updates,
    get_projects,
)
from ..crud.user import get_user
from ..database.database import get_db
from ..models.project import Project
from ..models.user import User
from ..schemas.invoice import InvoiceCreate, InvoiceOut
from ..schemas.project import ProjectCreate, ProjectOut, ProjectUpdate, ProjectUpdateCreate, ProjectUpdateOut

router = APIRouter(prefix="/api/projects", tags=["projects"])
admin_router = APIRouter(prefix="/api/admin/projects", tags=["admin"], dependencies=[Depends(require_admin)])


def _owned_or_404(db: Session, project_id: int, user: User) -> Project:
    project = get_project_for(db, project_id, user)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


def _admin_project_or_404(db: Session, project_id: int) -> Project:
    project = common.get_by_id(db, Project, project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


@router.get("", response_model=List[ProjectOut])
def my_projects(db: Session = Depends(get_db), user: User = Depends(require_user)):
    """Projects owned by the caller."""
    return get_projects(db, user.id)


@router.get("/{project_id}", response_model=ProjectOut)
def get_project(project_id: int, db: Session = Depends(get_db), user: User = Depends(require_user)):
    return _owned_or_404(db, project_id, user)


@router.get("/{project_id}/updates", response_model=List[ProjectUpdateOut])
def project_updates(project_id: int, db: Session = Depends(get_db), user: User = Depends(require_user)):
    project = _owned_or_404(db, project_id, user)
    return get_project_updates(db, project.id)


@router.get("/{project_id}/invoices", response_model=List[InvoiceOut])
def project_invoices(project_id: int, db: Session = Depends(get_db), user: User = Depends(require_user)):
    project = _owned_or_404(db, project_id, user)
    return get_project_invoices(db, project.id)


@admin_router.get("", response_model=List[ProjectOut])
def all_projects(db: Session = Depends(get_db)):
    return get_all_projects(db)


@admin_router.post("", response_model=ProjectOut, status_code=201)
def create_project(payload: ProjectCreate, db: Session = Depends(get_db)):
    if not get_user(db, payload.user_id):
        raise HTTPException(status_code=400, detail="Owner not found")
    return common.create(db, Project, common.plain_values(payload.model_dump()), "create project")


@admin_router.put("/{project_id}", response_model=ProjectOut)
def update_project(project_id: int, payload: ProjectUpdate, db: Session = Depends(get_db)):
    project = _admin_project_or_404(db, project_id)
    data = common.plain_values(payload.model_dump(exclude_unset=True))
    if data.get("user_id") is not None and not get_user(db, data["user_id"]):
        raise HTTPException(status_code=400, detail="Owner not found")
    return common.update(db, project, data, "update project")


@admin_router.delete("/{project_id}", status_code=204)
def remove_project(project_id: int, db: Session = Depends(get_db)):
    delete_project(db, _admin_project_or_404(db, project_id))


@admin_router.post("/{project_id}/updates", response_model=ProjectUpdateOut, status_code=201)
def create_project_update(project_id: int, payload: ProjectUpdateCreate, db: Session = Depends(get_db)):
    project = _admin_project_or_404(db, project_id)
    return add_project_update(db, project, common.plain_values(payload.model_dump()))


@admin_router.post("/{project_id}/invoices", response_model=InvoiceOut, status_code=201)
def new_invoice(project_id: int, payload: InvoiceCreate, db: Session = Depends(get_db)):
    project = _admin_project_or_404(db, project_id)
    return create_invoice(db, project, common.plain_values(payload.model_dump()))
