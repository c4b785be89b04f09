# models/user.py
from sqlalchemy import Boolean, Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from ..database.database import Base


class User(Base):
    __tablename__ = "users"

    id            = Column(Integer, primary_key=True, index=True)
    username      = Column(String(100), nullable=False, unique=True, index=True)
    email         = Column(String(256), unique=True, index=True)
    phone         = Column(String(32))
    password_hash = Column(String(256), nullable=False)
    is_admin      = Column(Boolean, default=False, nullable=False)
    is_verified   = Column(Boolean, default=False, nullable=False)
    is_blocked    = Column(Boolean, default=False, nullable=False)
    created_at    = Column(DateTime(timezone=True), server_default=func.now())

    projects = relationship("Project", back_populates="owner")
