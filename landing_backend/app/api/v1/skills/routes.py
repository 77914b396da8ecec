"""
Skill API
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from landing_backend.app.core.dependencies import get_skill_service
from landing_backend.app.schemas.common import Page
from landing_backend.app.schemas.skill import SkillCreate, SkillOut, SkillUpdate
from landing_backend.app.services.skill_service import SkillService

router = APIRouter(prefix="/skills", tags=["skills"])


@router.get("", response_model=Page[SkillOut])
def list_skills(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    user_id: Optional[str] = Query(None, alias="userId"),
    service: SkillService = Depends(get_skill_service),
):
    return service.find_all(page=page, limit=limit, user_id=user_id)


@router.get("/user/{user_id}", response_model=List[SkillOut])
def list_skills_for_user(user_id: str, service: SkillService = Depends(get_skill_service)):
    return service.find_by_user_id(user_id)


@router.get("/{skill_id}", response_model=SkillOut)
def get_skill(skill_id: str, service: SkillService = Depends(get_skill_service)):
    return service.find_by_id(skill_id)


@router.post("", response_model=SkillOut, status_code=status.HTTP_201_CREATED)
def create_skill(payload: SkillCreate, service: SkillService = Depends(get_skill_service)):
    return service.create(payload)


@router.put("/{skill_id}", response_model=SkillOut)
def update_skill(skill_id: str, payload: SkillUpdate, service: SkillService = Depends(get_skill_service)):
    return service.update(skill_id, payload)


@router.delete("/{skill_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_skill(skill_id: str, service: SkillService = Depends(get_skill_service)):
    service.delete(skill_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
