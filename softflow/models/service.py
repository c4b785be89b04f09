from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, func

from ..database.database import Base


class Service(Base):
    __tablename__ = "services"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(150), nullable=False)
    description = Column(Text, nullable=False)
    icon = Column(String(50), nullable=False)
    slug = Column(String(150), nullable=False, unique=True, index=True)
    order = Column(Integer, default=0, nullable=False)  # display sequence
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
