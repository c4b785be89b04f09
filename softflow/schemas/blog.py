from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, constr, field_validator

from .validation import SLUG_PATTERN, OptionalUrl, reject_null


class BlogPostCreate(BaseModel):
    title: constr(min_length=1, strip_whitespace=True)
    slug: constr(min_length=1, max_length=200, pattern=SLUG_PATTERN)
    summary: constr(min_length=1)
    content: constr(min_length=1)
    category: constr(min_length=1, strip_whitespace=True)
    cover_image: OptionalUrl = None
    published: bool = False


class BlogPostUpdate(BaseModel):
    title: Optional[constr(min_length=1, strip_whitespace=True)] = None
    slug: Optional[constr(min_length=1, max_length=200, pattern=SLUG_PATTERN)] = None
    summary: Optional[constr(min_length=1)] = None
    content: Optional[constr(min_length=1)] = None
    category: Optional[constr(min_length=1, strip_whitespace=True)] = None
    cover_image: OptionalUrl = None
    published: Optional[bool] = None

    @field_validator("title", "slug", "summary", "content", "category", "published")
    @classmethod
    def required_columns(cls, v):
        return reject_null(v)


class BlogPostOut(BaseModel):
    id: int
    title: str
    slug: str
    summary: str
    content: str
    category: str
    cover_image: Optional[str] = None
    published: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
