from enum import Enum

from sqlalchemy import CheckConstraint, Column, Date, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from ..database.database import Base


class ProjectStatus(str, Enum):
    PLANNING = "planning"
    IN_PROGRESS = "in-progress"
    REVIEW = "review"
    COMPLETED = "completed"
    ON_HOLD = "on-hold"

    @property
    def label(self) -> str:
        return PROJECT_STATUS_DISPLAY[self][0]

    @property
    def style(self) -> str:
        return PROJECT_STATUS_DISPLAY[self][1]


PROJECT_STATUS_DISPLAY = {
    ProjectStatus.PLANNING: ("Planning", "secondary"),
    ProjectStatus.IN_PROGRESS: ("In Progress", "default"),
    ProjectStatus.REVIEW: ("Review", "outline"),
    ProjectStatus.COMPLETED: ("Completed", "success"),
    ProjectStatus.ON_HOLD: ("On Hold", "destructive"),
}


class Project(Base):
    __tablename__ = "projects"
    __table_args__ = (
        CheckConstraint(
            "completion_percentage >= 0 AND completion_percentage <= 100",
            name="ck_project_completion_range",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    status = Column(String(20), default=ProjectStatus.PLANNING.value, nullable=False)
    completion_percentage = Column(Integer, default=0, nullable=False)
    start_date = Column(Date)
    estimated_end_date = Column(Date)
    service_type = Column(String(150))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    owner = relationship("User", back_populates="projects")
    updates = relationship("ProjectUpdate", back_populates="project")
    invoices = relationship("Invoice", back_populates="project")


class ProjectUpdate(Base):
    """Append-only progress log entry."""
    __tablename__ = "project_updates"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    completion_percentage = Column(Integer)
    status = Column(String(20))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    project = relationship("Project", back_populates="updates")
