from typing import List, Optional

from sqlalchemy.orm import Session

from ..models.project import Project, ProjectUpdate
from ..models.user import User
from . import common


def get_projects(db: Session, user_id: int) -> List[Project]:
    return db.query(Project)\
             .filter(Project.user_id == user_id)\
             .order_by(Project.created_at.desc(), Project.id.desc())\
             .all()


def get_all_projects(db: Session) -> List[Project]:
    return db.query(Project).order_by(Project.created_at.desc(), Project.id.desc()).all()


def get_project_for(db: Session, project_id: int, user: User) -> Optional[Project]:
    """The project if `user` owns it (admins see every project)."""
    project = db.get(Project, project_id)
    if project is None:
        return None
    if not user.is_admin and project.user_id != user.id:
        return None
    return project


def get_project_updates(db: Session, project_id: int) -> List[ProjectUpdate]:
    return db.query(ProjectUpdate)\
             .filter(ProjectUpdate.project_id == project_id)\
             .order_by(ProjectUpdate.created_at.desc(), ProjectUpdate.id.desc())\
             .all()


def add_project_update(db: Session, project: Project, data: dict) -> ProjectUpdate:
    entry = ProjectUpdate(**data, project_id=project.id)
    # progress carried by the update is mirrored onto the project itself
    if data.get("completion_percentage") is not None:
        project.completion_percentage = data["completion_percentage"]
    if data.get("status") is not None:
        project.status = data["status"]
    db.add(project)
    return common.save(db, entry, "create project update")


def delete_project(db: Session, project: Project) -> None:
    common.ensure_no_children(project.invoices or project.updates, "project")
    common.delete(db, project, "delete project")
