"""
Skill Pydantic schemas
"""
from datetime import datetime
from typing import Optional

from landing_backend.app.schemas.common import CamelModel


class SkillCreate(CamelModel):
    user_id: str
    skill_name: str
    url_certificate: Optional[str] = None


class SkillUpdate(CamelModel):
    user_id: Optional[str] = None
    skill_name: Optional[str] = None
    url_certificate: Optional[str] = None


class SkillOut(CamelModel):
    id: str
    user_id: str
    skill_name: str
    url_certificate: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
