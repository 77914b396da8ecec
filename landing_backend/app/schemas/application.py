"""
Application Pydantic schemas
"""
from datetime import datetime
from typing import Optional

from landing_backend.app.schemas.common import CamelModel


class ApplicationCreate(CamelModel):
    vacancy_id: str
    name: str
    email: str
    phone: str
    application_motivation: Optional[str] = None
    cv_url: Optional[str] = None
    is_active: Optional[bool] = None
    # Accepted for compatibility, always replaced by "pending"
    status: Optional[str] = None


class ApplicationUpdate(CamelModel):
    vacancy_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    application_motivation: Optional[str] = None
    cv_url: Optional[str] = None
    is_active: Optional[bool] = None


class ApplicationStatusUpdate(CamelModel):
    status: str


class ApplicationOut(CamelModel):
    id: str
    vacancy_id: str
    name: str
    email: str
    phone: str
    status: str
    application_motivation: Optional[str] = None
    is_active: bool
    cv_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class VacancySummaryOut(CamelModel):
    id: str
    job_title: str
    slug: str
    mode: str
    status: str
    is_active: bool


class ApplicationWithVacancyOut(ApplicationOut):
    vacancy: Optional[VacancySummaryOut] = None
