"""
Vacancy Pydantic schemas
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from landing_backend.app.schemas.application import ApplicationOut
from landing_backend.app.schemas.common import CamelModel


class VacancyCreate(CamelModel):
    job_title: str
    slug: Optional[str] = None
    mode: str
    years_experience: int
    short_description: str
    description: str
    stack_required: List[str]
    is_active: Optional[bool] = None
    status: Optional[str] = None


class VacancyUpdate(CamelModel):
    job_title: Optional[str] = None
    slug: Optional[str] = None
    mode: Optional[str] = None
    years_experience: Optional[int] = None
    short_description: Optional[str] = None
    description: Optional[str] = None
    stack_required: Optional[List[str]] = None
    is_active: Optional[bool] = None
    status: Optional[str] = None


class VacancyStatusUpdate(CamelModel):
    status: str


class VacancyOut(CamelModel):
    id: str
    job_title: str
    slug: str
    mode: str
    years_experience: int
    short_description: str
    description: str
    stack_required: List[str] = Field(default_factory=list)
    is_active: bool
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class VacancyDetailOut(VacancyOut):
    applications: List[ApplicationOut] = Field(default_factory=list)


def vacancy_to_response(vacancy, include_applications: bool = False) -> VacancyOut:
    """Convert Vacancy DB model to its response schema; applications only when requested."""
    if include_applications:
        return VacancyDetailOut.model_validate(vacancy)
    return VacancyOut.model_validate(vacancy)
