from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, func

from ..database.database import Base


class Message(Base):
    """Contact form submission. Only admins flip `read`."""
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(150), nullable=False)
    email = Column(String(256), nullable=False)
    company = Column(String(150))
    service = Column(String(150))
    message = Column(Text, nullable=False)
    read = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
