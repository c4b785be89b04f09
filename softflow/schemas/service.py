from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, constr, field_validator

from .validation import SLUG_PATTERN, reject_null


class ServiceCreate(BaseModel):
    title: constr(min_length=1, strip_whitespace=True)
    description: constr(min_length=1)
    icon: constr(min_length=1, strip_whitespace=True)
    slug: constr(min_length=1, max_length=150, pattern=SLUG_PATTERN)
    order: int = Field(0, ge=0)
    active: bool = True


class ServiceUpdate(BaseModel):
    title: Optional[constr(min_length=1, strip_whitespace=True)] = None
    description: Optional[constr(min_length=1)] = None
    icon: Optional[constr(min_length=1, strip_whitespace=True)] = None
    slug: Optional[constr(min_length=1, max_length=150, pattern=SLUG_PATTERN)] = None
    order: Optional[int] = Field(None, ge=0)
    active: Optional[bool] = None

    @field_validator("*")
    @classmethod
    def required_columns(cls, v):
        return reject_null(v)


class ServiceActiveUpdate(BaseModel):
    active: bool


class ServiceOut(BaseModel):
    id: int
    title: str
    description: str
    icon: str
    slug: str
    order: int
    active: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
