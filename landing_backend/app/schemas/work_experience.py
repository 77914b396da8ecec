"""
Work experience Pydantic schemas
"""
from datetime import date, datetime
from typing import Optional

from landing_backend.app.schemas.common import CamelModel


class WorkExperienceCreate(CamelModel):
    user_id: str
    role: str
    company_name: str
    from_year: date
    until_year: Optional[date] = None
    role_description: Optional[str] = None


class WorkExperienceUpdate(CamelModel):
    user_id: Optional[str] = None
    role: Optional[str] = None
    company_name: Optional[str] = None
    from_year: Optional[date] = None
    until_year: Optional[date] = None
    role_description: Optional[str] = None


class WorkExperienceOut(CamelModel):
    id: str
    user_id: str
    role: str
    company_name: str
    from_year: date
    until_year: Optional[date] = None
    role_description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
