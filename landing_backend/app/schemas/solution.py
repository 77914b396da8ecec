"""
Solution / Feature Pydantic schemas
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from landing_backend.app.schemas.common import CamelModel


class FeatureCreate(CamelModel):
    feature_description: str
    is_active: Optional[bool] = None


class FeatureUpdate(CamelModel):
    feature_description: Optional[str] = None
    is_active: Optional[bool] = None


class FeatureOut(CamelModel):
    id: str
    solution_id: str
    feature_description: str
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SolutionCreate(CamelModel):
    title: str
    icon: Optional[str] = None
    description: str
    is_active: Optional[bool] = None
    order: Optional[int] = None
    features: List[FeatureCreate] = Field(default_factory=list)


class SolutionUpdate(CamelModel):
    title: Optional[str] = None
    icon: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None
    order: Optional[int] = None
    # Appended to the existing features
    features: Optional[List[FeatureCreate]] = None


class SolutionOut(CamelModel):
    id: str
    title: str
    icon: Optional[str] = None
    description: str
    is_active: bool
    order: int
    features: List[FeatureOut] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
