from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, constr

from .validation import OptionalStr


class MessageCreate(BaseModel):
    # `read` is not part of the insert shape
    name: constr(min_length=1, strip_whitespace=True)
    email: EmailStr
    company: OptionalStr = None
    service: OptionalStr = None
    message: constr(min_length=1)


class MessageOut(BaseModel):
    id: int
    name: str
    email: str
    company: Optional[str] = None
    service: Optional[str] = None
    message: str
    read: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
