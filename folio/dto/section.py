from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..auth.validators import sanitize_url
from ..database.models import MAX_INTEGER


class SectionItem(BaseModel):
    """One entry of a section. Unknown keys are dropped, ``link`` is sanitised."""

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    company: Optional[str] = None
    date: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None
    technologies: Optional[List[str]] = None

    @field_validator("link")
    @classmethod
    def sanitize_link(cls, v):
        if v is None:
            return v
        return sanitize_url(v)


class SectionCreateRequest(BaseModel):
    type: Optional[str] = None
    title: Optional[str] = None
    items: Optional[Any] = None
    visible: Optional[bool] = None
    order: Optional[int] = Field(None, ge=-MAX_INTEGER - 1, le=MAX_INTEGER)


class SectionUpdateRequest(BaseModel):
    id: Optional[Any] = None
    items: Optional[Any] = None
    title: Optional[str] = None
    visible: Optional[bool] = None
    order: Optional[int] = Field(None, ge=-MAX_INTEGER - 1, le=MAX_INTEGER)
