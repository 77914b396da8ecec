"""
Blog and blog section Pydantic schemas
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from landing_backend.app.schemas.common import CamelModel, Page


class BlogSectionCreate(CamelModel):
    # type/style stay plain strings so the service reports the domain error code
    blog_id: Optional[str] = None
    order: Optional[int] = Field(default=None, ge=0)
    type: str = "paragraph"
    content: Optional[str] = None
    src: Optional[str] = None
    alt: Optional[str] = None
    caption: Optional[str] = None
    style: Optional[str] = None
    items: Optional[List[str]] = None


class BlogSectionUpdate(CamelModel):
    blog_id: Optional[str] = None
    order: Optional[int] = Field(default=None, ge=0)
    type: Optional[str] = None
    content: Optional[str] = None
    src: Optional[str] = None
    alt: Optional[str] = None
    caption: Optional[str] = None
    style: Optional[str] = None
    items: Optional[List[str]] = None


class BlogSectionOut(CamelModel):
    id: str
    blog_id: str
    order: int
    type: str
    content: Optional[str] = None
    src: Optional[str] = None
    alt: Optional[str] = None
    caption: Optional[str] = None
    style: Optional[str] = None
    items: Optional[List[str]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ReorderSectionsIn(CamelModel):
    section_ids: List[str]


class BlogCreate(CamelModel):
    user_id: str
    title: str
    slug: Optional[str] = None
    image: Optional[str] = None
    short_description: str
    categories: List[str] = Field(default_factory=list)
    is_active: Optional[bool] = None
    sections: List[BlogSectionCreate] = Field(default_factory=list)


class BlogUpdate(CamelModel):
    user_id: Optional[str] = None
    title: Optional[str] = None
    slug: Optional[str] = None
    image: Optional[str] = None
    short_description: Optional[str] = None
    categories: Optional[List[str]] = None
    is_active: Optional[bool] = None
    sections: Optional[List[BlogSectionCreate]] = None


class AuthorOut(CamelModel):
    name: str
    avatar: str
    role: str


class BlogOut(CamelModel):
    id: str
    user_id: str
    title: str
    slug: str
    image: Optional[str] = None
    short_description: str
    categories: List[str] = Field(default_factory=list)
    is_active: bool
    author: AuthorOut
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BlogWithSectionsOut(BlogOut):
    sections: List[BlogSectionOut] = Field(default_factory=list)


def blog_to_response(blog, include_sections: bool = True) -> BlogOut:
    """Convert Blog DB model to its response schema; sections only when requested."""
    if include_sections:
        return BlogWithSectionsOut.model_validate(blog)
    return BlogOut.model_validate(blog)


def blog_page_to_response(result: dict, include_sections: bool = False) -> Page:
    """Paginated variant of blog_to_response for the service's {items, meta} dict."""
    if include_sections:
        return Page[BlogWithSectionsOut].model_validate(result)
    return Page[BlogOut].model_validate(result)
