from enum import Enum

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from ..database.database import Base


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    REVIEWED = "reviewed"
    INTERVIEWING = "interviewing"
    REJECTED = "rejected"
    HIRED = "hired"

    @property
    def label(self) -> str:
        return APPLICATION_STATUS_DISPLAY[self][0]

    @property
    def style(self) -> str:
        return APPLICATION_STATUS_DISPLAY[self][1]


APPLICATION_STATUS_DISPLAY = {
    ApplicationStatus.PENDING: ("Pending", "secondary"),
    ApplicationStatus.REVIEWED: ("Reviewed", "outline"),
    ApplicationStatus.INTERVIEWING: ("Interviewing", "default"),
    ApplicationStatus.REJECTED: ("Rejected", "destructive"),
    ApplicationStatus.HIRED: ("Hired", "success"),
}


class Career(Base):
    __tablename__ = "careers"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    department = Column(String(100), nullable=False)
    location = Column(String(100), nullable=False)
    type = Column(String(50), nullable=False)  # full-time, part-time, contract
    description = Column(Text, nullable=False)
    requirements = Column(Text, nullable=False)
    published = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    applications = relationship("Application", back_populates="career")


class Application(Base):
    __tablename__ = "applications"

    id = Column(Integer, primary_key=True, index=True)
    career_id = Column(Integer, ForeignKey("careers.id"), nullable=False, index=True)
    name = Column(String(150), nullable=False)
    email = Column(String(256), nullable=False, index=True)
    phone = Column(String(32), nullable=False)
    resume = Column(String(500), nullable=False)
    cover_letter = Column(Text)
    status = Column(String(20), default=ApplicationStatus.PENDING.value, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    career = relationship("Career", back_populates="applications")
