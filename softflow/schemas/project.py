from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, constr, field_validator, model_validator

from ..models.project import ProjectStatus
from .validation import OptionalStr, reject_null


class ProjectFields(BaseModel):
    title: constr(min_length=1, strip_whitespace=True)
    description: constr(min_length=1)
    status: ProjectStatus = ProjectStatus.PLANNING
    completion_percentage: int = Field(0, ge=0, le=100)
    start_date: Optional[date] = None
    estimated_end_date: Optional[date] = None
    service_type: OptionalStr = None

    @model_validator(mode="after")
    def check_dates(self):
        if self.start_date and self.estimated_end_date and self.estimated_end_date < self.start_date:
            raise ValueError("Estimated end date must not be before the start date")
        return self


class ProjectCreate(ProjectFields):
    user_id: int


class ProjectUpdate(BaseModel):
    user_id: Optional[int] = None
    title: Optional[constr(min_length=1, strip_whitespace=True)] = None
    description: Optional[constr(min_length=1)] = None
    status: Optional[ProjectStatus] = None
    completion_percentage: Optional[int] = Field(None, ge=0, le=100)
    start_date: Optional[date] = None
    estimated_end_date: Optional[date] = None
    service_type: OptionalStr = None

    @field_validator("user_id", "title", "description", "status", "completion_percentage")
    @classmethod
    def required_columns(cls, v):
        return reject_null(v)


class ProjectOut(BaseModel):
    id: int
    user_id: int
    title: str
    description: str
    status: ProjectStatus
    completion_percentage: int
    start_date: Optional[date] = None
    estimated_end_date: Optional[date] = None
    service_type: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ProjectUpdateCreate(BaseModel):
    title: constr(min_length=1, strip_whitespace=True)
    description: constr(min_length=1)
    completion_percentage: Optional[int] = Field(None, ge=0, le=100)
    status: Optional[ProjectStatus] = None


class ProjectUpdateOut(BaseModel):
    id: int
    project_id: int
    title: str
    description: str
    completion_percentage: Optional[int] = None
    status: Optional[ProjectStatus] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
