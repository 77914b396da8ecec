"""
Work experience API - dated positions on a user's profile.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from landing_backend.app.core.dependencies import get_work_experience_service
from landing_backend.app.schemas.common import Page
from landing_backend.app.schemas.work_experience import (
    WorkExperienceCreate,
    WorkExperienceOut,
    WorkExperienceUpdate,
)
from landing_backend.app.services.work_experience_service import WorkExperienceService

router = APIRouter(prefix="/work-experiences", tags=["work-experiences"])


@router.get("", response_model=Page[WorkExperienceOut])
def list_work_experiences(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    user_id: Optional[str] = Query(None, alias="userId"),
    service: WorkExperienceService = Depends(get_work_experience_service),
):
    return service.find_all(page=page, limit=limit, user_id=user_id)


@router.get("/user/{user_id}", response_model=List[WorkExperienceOut])
def list_work_experiences_for_user(
    user_id: str,
    service: WorkExperienceService = Depends(get_work_experience_service),
):
    """Most recent first."""
    return service.find_by_user_id(user_id)


@router.get("/{experience_id}", response_model=WorkExperienceOut)
def get_work_experience(
    experience_id: str,
    service: WorkExperienceService = Depends(get_work_experience_service),
):
    return service.find_by_id(experience_id)


@router.post("", response_model=WorkExperienceOut, status_code=status.HTTP_201_CREATED)
def create_work_experience(
    payload: WorkExperienceCreate,
    service: WorkExperienceService = Depends(get_work_experience_service),
):
    return service.create(payload)


@router.put("/{experience_id}", response_model=WorkExperienceOut)
def update_work_experience(
    experience_id: str,
    payload: WorkExperienceUpdate,
    service: WorkExperienceService = Depends(get_work_experience_service),
):
    return service.update(experience_id, payload)


@router.delete("/{experience_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_work_experience(
    experience_id: str,
    service: WorkExperienceService = Depends(get_work_experience_service),
):
    service.delete(experience_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
