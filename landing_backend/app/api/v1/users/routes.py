"""
User API - profiles, lookup by slug, and bootstrap of default card/curriculum on create.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from landing_backend.app.core.dependencies import get_user_service
from landing_backend.app.core.logging_config import get_logger
from landing_backend.app.schemas.common import Page
from landing_backend.app.schemas.user import UserCreate, UserOut, UserUpdate
from landing_backend.app.services.user_service import UserService

logger = get_logger("api.users")
router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=Page[UserOut])
def list_users(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    search: Optional[str] = None,
    service: UserService = Depends(get_user_service),
):
    return service.find_all(page=page, limit=limit, is_active=is_active, search=search)


@router.get("/slug/{slug}", response_model=UserOut)
def get_user_by_slug(slug: str, service: UserService = Depends(get_user_service)):
    return service.find_by_slug(slug)


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    return service.find_by_id(user_id)


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, service: UserService = Depends(get_user_service)):
    """
    Creates the user, then its default card configuration and curriculum.
    The user is returned even when a default record could not be created.
    """
    result = service.create(payload)
    if not result.defaults_created:
        logger.warning(
            "User created without all defaults user_id=%s failures=%s",
            result.user.id,
            result.failures,
        )
    return result.user


@router.patch("/{user_id}", response_model=UserOut)
def update_user(user_id: str, payload: UserUpdate, service: UserService = Depends(get_user_service)):
    return service.update(user_id, payload)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: str, service: UserService = Depends(get_user_service)):
    """Logical delete."""
    service.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
