"""
Curriculum Pydantic schemas
"""
from datetime import datetime
from typing import Optional

from landing_backend.app.schemas.common import CamelModel


class CurriculumCreate(CamelModel):
    user_id: str
    about_me: Optional[str] = None
    github_slug: Optional[str] = None
    linkedin_slug: Optional[str] = None


class CurriculumUpdate(CamelModel):
    user_id: Optional[str] = None
    about_me: Optional[str] = None
    github_slug: Optional[str] = None
    linkedin_slug: Optional[str] = None


class CurriculumOut(CamelModel):
    id: str
    user_id: str
    about_me: Optional[str] = None
    github_slug: Optional[str] = None
    linkedin_slug: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
