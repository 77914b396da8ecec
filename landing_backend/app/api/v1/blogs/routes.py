"""
Blog API - posts, their typed sections, and section reordering.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from landing_backend.app.core.dependencies import get_blog_service
from landing_backend.app.schemas.blog import (
    BlogCreate,
    BlogSectionCreate,
    BlogSectionOut,
    BlogSectionUpdate,
    BlogUpdate,
    BlogWithSectionsOut,
    ReorderSectionsIn,
    blog_page_to_response,
    blog_to_response,
)
from landing_backend.app.services.blog_service import BlogService

router = APIRouter(prefix="/blogs", tags=["blogs"])


@router.get("")
def list_blogs(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    user_id: Optional[str] = Query(None, alias="userId"),
    category: Optional[str] = None,
    search: Optional[str] = None,
    include_sections: bool = Query(False, alias="includeSections"),
    service: BlogService = Depends(get_blog_service),
):
    result = service.find_all(
        page=page,
        limit=limit,
        is_active=is_active,
        user_id=user_id,
        category=category,
        search=search,
        include_sections=include_sections,
    )
    return blog_page_to_response(result, include_sections)


@router.get("/user/{user_id}")
def list_blogs_for_user(
    user_id: str,
    include_sections: bool = Query(False, alias="includeSections"),
    service: BlogService = Depends(get_blog_service),
):
    blogs = service.find_by_user_id(user_id, include_sections=include_sections)
    return [blog_to_response(blog, include_sections) for blog in blogs]


@router.get("/slug/{slug}", responses={200: {"model": BlogWithSectionsOut}})
def get_blog_by_slug(
    slug: str,
    include_sections: bool = Query(True, alias="includeSections"),
    service: BlogService = Depends(get_blog_service),
):
    return blog_to_response(service.find_by_slug(slug, include_sections), include_sections)


@router.get("/{blog_id}", responses={200: {"model": BlogWithSectionsOut}})
def get_blog(
    blog_id: str,
    include_sections: bool = Query(True, alias="includeSections"),
    service: BlogService = Depends(get_blog_service),
):
    return blog_to_response(service.find_by_id(blog_id, include_sections), include_sections)


@router.post("", response_model=BlogWithSectionsOut, status_code=status.HTTP_201_CREATED)
def create_blog(payload: BlogCreate, service: BlogService = Depends(get_blog_service)):
    return service.create(payload)


@router.put("/{blog_id}", response_model=BlogWithSectionsOut)
def update_blog(blog_id: str, payload: BlogUpdate, service: BlogService = Depends(get_blog_service)):
    """A non-empty `sections` list replaces all existing sections."""
    return service.update(blog_id, payload)


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_blog(blog_id: str, service: BlogService = Depends(get_blog_service)):
    service.delete(blog_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{blog_id}/sections", response_model=BlogSectionOut, status_code=status.HTTP_201_CREATED)
def create_blog_section(
    blog_id: str,
    payload: BlogSectionCreate,
    service: BlogService = Depends(get_blog_service),
):
    return service.create_section(blog_id, payload)


@router.patch("/{blog_id}/sections/reorder", response_model=List[BlogSectionOut])
def reorder_blog_sections(
    blog_id: str,
    payload: ReorderSectionsIn,
    service: BlogService = Depends(get_blog_service),
):
    return service.reorder_sections(blog_id, payload.section_ids)


@router.put("/{blog_id}/sections/{section_id}", response_model=BlogSectionOut)
def update_blog_section(
    blog_id: str,
    section_id: str,
    payload: BlogSectionUpdate,
    service: BlogService = Depends(get_blog_service),
):
    return service.update_section(blog_id, section_id, payload)


@router.delete("/{blog_id}/sections/{section_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_blog_section(
    blog_id: str,
    section_id: str,
    service: BlogService = Depends(get_blog_service),
):
    service.delete_section(blog_id, section_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
