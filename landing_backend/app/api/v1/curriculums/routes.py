"""
Curriculum API - one curriculum per user.
"""
from fastapi import APIRouter, Depends, Response, status

from landing_backend.app.core.dependencies import get_curriculum_service
from landing_backend.app.schemas.curriculum import CurriculumCreate, CurriculumOut, CurriculumUpdate
from landing_backend.app.services.curriculum_service import CurriculumService

router = APIRouter(prefix="/curriculums", tags=["curriculums"])


@router.get("/user/{user_id}", response_model=CurriculumOut)
def get_curriculum_by_user(user_id: str, service: CurriculumService = Depends(get_curriculum_service)):
    return service.find_by_user_id(user_id)


@router.get("/{curriculum_id}", response_model=CurriculumOut)
def get_curriculum(curriculum_id: str, service: CurriculumService = Depends(get_curriculum_service)):
    return service.find_by_id(curriculum_id)


@router.post("", response_model=CurriculumOut, status_code=status.HTTP_201_CREATED)
def create_curriculum(payload: CurriculumCreate, service: CurriculumService = Depends(get_curriculum_service)):
    return service.create(payload)


@router.post("/create-or-update", response_model=CurriculumOut)
def create_or_update_curriculum(
    payload: CurriculumCreate,
    service: CurriculumService = Depends(get_curriculum_service),
):
    """Create the user's curriculum, or overwrite the given fields of the existing one."""
    return service.create_or_update(payload)


@router.put("/{curriculum_id}", response_model=CurriculumOut)
def update_curriculum(
    curriculum_id: str,
    payload: CurriculumUpdate,
    service: CurriculumService = Depends(get_curriculum_service),
):
    return service.update(curriculum_id, payload)


@router.delete("/{curriculum_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_curriculum(curriculum_id: str, service: CurriculumService = Depends(get_curriculum_service)):
    service.delete(curriculum_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
