"""
Vacancy API - job openings, status changes and logical/physical deletion.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from landing_backend.app.core.dependencies import get_vacancy_service
from landing_backend.app.schemas.common import Page
from landing_backend.app.schemas.vacancy import (
    VacancyCreate,
    VacancyDetailOut,
    VacancyOut,
    VacancyStatusUpdate,
    VacancyUpdate,
    vacancy_to_response,
)
from landing_backend.app.services.vacancy_service import VacancyService

router = APIRouter(prefix="/vacancies", tags=["vacancies"])


@router.get("", response_model=Page[VacancyOut])
def list_vacancies(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    status_filter: Optional[str] = Query(None, alias="status"),
    mode: Optional[str] = None,
    search: Optional[str] = None,
    service: VacancyService = Depends(get_vacancy_service),
):
    """Paginated vacancies, newest first. `search` matches title, descriptions and stack."""
    return service.find_all(
        page=page,
        limit=limit,
        is_active=is_active,
        status=status_filter,
        mode=mode,
        search=search,
    )


@router.get("/slug/{slug}", responses={200: {"model": VacancyDetailOut}})
def get_vacancy_by_slug(
    slug: str,
    include_applications: bool = Query(False, alias="includeApplications"),
    service: VacancyService = Depends(get_vacancy_service),
):
    vacancy = service.find_by_slug(slug, include_applications=include_applications)
    return vacancy_to_response(vacancy, include_applications)


@router.get("/{vacancy_id}", responses={200: {"model": VacancyDetailOut}})
def get_vacancy(
    vacancy_id: str,
    include_applications: bool = Query(False, alias="includeApplications"),
    service: VacancyService = Depends(get_vacancy_service),
):
    vacancy = service.find_by_id(vacancy_id, include_applications=include_applications)
    return vacancy_to_response(vacancy, include_applications)


@router.post("", response_model=VacancyOut, status_code=status.HTTP_201_CREATED)
def create_vacancy(
    payload: VacancyCreate,
    service: VacancyService = Depends(get_vacancy_service),
):
    """Slug derived from jobTitle when not given; status defaults to open."""
    return service.create(payload)


@router.put("/{vacancy_id}", response_model=VacancyOut)
def update_vacancy(
    vacancy_id: str,
    payload: VacancyUpdate,
    service: VacancyService = Depends(get_vacancy_service),
):
    return service.update(vacancy_id, payload)


@router.patch("/{vacancy_id}/status", response_model=VacancyOut)
def change_vacancy_status(
    vacancy_id: str,
    payload: VacancyStatusUpdate,
    service: VacancyService = Depends(get_vacancy_service),
):
    return service.change_status(vacancy_id, payload.status)


@router.delete("/{vacancy_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_vacancy(
    vacancy_id: str,
    physical_delete: bool = Query(False, alias="physicalDelete"),
    service: VacancyService = Depends(get_vacancy_service),
):
    """Logical delete (default) deactivates and closes the vacancy."""
    service.delete(vacancy_id, physical_delete=physical_delete)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
