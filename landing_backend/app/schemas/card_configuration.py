"""
Card configuration Pydantic schemas
"""
from datetime import datetime
from typing import Optional

from landing_backend.app.schemas.common import CamelModel


class CardConfigurationFields(CamelModel):
    image_size: Optional[int] = None
    image_left_offset: Optional[str] = None
    bg_color: Optional[str] = None
    text_above: Optional[str] = None
    text_above_color: Optional[str] = None
    above_font_family: Optional[str] = None
    above_font_size: Optional[str] = None
    above_font_weight: Optional[str] = None
    above_letter_spacing: Optional[str] = None
    above_text_transform: Optional[str] = None
    above_text_top_offset: Optional[str] = None
    text_below: Optional[str] = None
    text_below_color: Optional[str] = None
    below_font_family: Optional[str] = None
    below_font_size: Optional[str] = None
    below_font_weight: Optional[str] = None
    below_letter_spacing: Optional[str] = None
    below_text_transform: Optional[str] = None


class CardConfigurationCreate(CardConfigurationFields):
    user_id: str


class CardConfigurationUpdate(CardConfigurationFields):
    pass


class CardConfigurationOut(CardConfigurationFields):
    id: str
    user_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
