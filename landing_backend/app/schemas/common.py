"""
Shared schema pieces: camelCase wire format and the paginated envelope
"""
from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """snake_case attributes, camelCase JSON. Reads ORM objects directly."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PageMeta(CamelModel):
    current_page: int
    items_per_page: int
    total_items: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


class Page(CamelModel, Generic[T]):
    items: List[T]
    meta: PageMeta

