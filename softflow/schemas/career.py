from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, constr, field_validator

from ..models.career import ApplicationStatus
from .validation import OptionalStr, Url, reject_null


class CareerCreate(BaseModel):
    title: constr(min_length=1, strip_whitespace=True)
    department: constr(min_length=1, strip_whitespace=True)
    location: constr(min_length=1, strip_whitespace=True)
    type: constr(min_length=1, strip_whitespace=True)
    description: constr(min_length=1)
    requirements: constr(min_length=1)
    published: bool = True


class CareerUpdate(BaseModel):
    title: Optional[constr(min_length=1, strip_whitespace=True)] = None
    department: Optional[constr(min_length=1, strip_whitespace=True)] = None
    location: Optional[constr(min_length=1, strip_whitespace=True)] = None
    type: Optional[constr(min_length=1, strip_whitespace=True)] = None
    description: Optional[constr(min_length=1)] = None
    requirements: Optional[constr(min_length=1)] = None
    published: Optional[bool] = None

    @field_validator("*")
    @classmethod
    def required_columns(cls, v):
        return reject_null(v)


class CareerOut(BaseModel):
    id: int
    title: str
    department: str
    location: str
    type: str
    description: str
    requirements: str
    published: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ApplicationCreate(BaseModel):
    # career_id comes from the path, status is always "pending" on insert
    name: constr(min_length=1, strip_whitespace=True)
    email: EmailStr
    phone: constr(min_length=1, strip_whitespace=True)
    resume: Url
    cover_letter: OptionalStr = None


class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus


class ApplicationOut(BaseModel):
    id: int
    career_id: int
    name: str
    email: str
    phone: str
    resume: str
    cover_letter: Optional[str] = None
    status: ApplicationStatus
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
