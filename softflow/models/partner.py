from sqlalchemy import Column, Integer, String

from ..database.database import Base


class Partner(Base):
    __tablename__ = "partners"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(150), nullable=False)
    logo = Column(String(500), nullable=False)
    website = Column(String(500))
