"""
User Pydantic schemas for request/response validation
"""
from datetime import datetime
from typing import Optional

from landing_backend.app.schemas.card_configuration import CardConfigurationOut
from landing_backend.app.schemas.common import CamelModel
from landing_backend.app.schemas.curriculum import CurriculumOut


class UserCreate(CamelModel):
    """Schema for user creation"""
    first_name: str
    last_name: str
    email: str
    role: Optional[str] = None
    slug: Optional[str] = None
    image: Optional[str] = None
    is_active: Optional[bool] = None
    show_curriculum: Optional[bool] = None


class UserUpdate(CamelModel):
    """Partial update; child records are never touched"""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    slug: Optional[str] = None
    image: Optional[str] = None
    is_active: Optional[bool] = None
    show_curriculum: Optional[bool] = None


class UserOut(CamelModel):
    """Schema for user response"""
    id: str
    first_name: str
    last_name: str
    full_name: str
    email: str
    role: Optional[str] = None
    slug: str
    image: Optional[str] = None
    is_active: bool
    show_curriculum: bool
    card_configuration: Optional[CardConfigurationOut] = None
    curriculum: Optional[CurriculumOut] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
