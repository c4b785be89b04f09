from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .validation import OptionalUrl, Url


class PartnerForm(BaseModel):
    """Insert shape for partners, used for both create and edit."""
    name: str = Field(..., min_length=2)
    logo: Url
    website: OptionalUrl = None

    model_config = ConfigDict(str_strip_whitespace=True)


class PartnerOut(BaseModel):
    id: int
    name: str
    logo: str
    website: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
