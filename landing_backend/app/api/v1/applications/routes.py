"""
Application API - candidates applying to vacancies, with optional CV upload.
"""
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile, status

from landing_backend.app.core.dependencies import get_application_service
from landing_backend.app.core.logging_config import get_logger
from landing_backend.app.schemas.application import (
    ApplicationCreate,
    ApplicationOut,
    ApplicationStatusUpdate,
    ApplicationUpdate,
    ApplicationWithVacancyOut,
)
from landing_backend.app.schemas.common import Page
from landing_backend.app.services.application_service import ApplicationService

logger = get_logger("api.applications")
router = APIRouter(prefix="/applications", tags=["applications"])


@router.get("", response_model=Page[ApplicationWithVacancyOut])
def list_applications(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    status_filter: Optional[str] = Query(None, alias="status"),
    vacancy_id: Optional[str] = Query(None, alias="vacancyId"),
    search: Optional[str] = None,
    service: ApplicationService = Depends(get_application_service),
):
    """Paginated applications with their vacancy. `search` matches name, email, phone and motivation."""
    return service.find_all(
        page=page,
        limit=limit,
        is_active=is_active,
        status=status_filter,
        vacancy_id=vacancy_id,
        search=search,
    )


@router.get("/vacancy/{vacancy_id}", response_model=Page[ApplicationWithVacancyOut])
def list_applications_for_vacancy(
    vacancy_id: str,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    status_filter: Optional[str] = Query(None, alias="status"),
    service: ApplicationService = Depends(get_application_service),
):
    return service.find_by_vacancy_id(
        vacancy_id,
        page=page,
        limit=limit,
        is_active=is_active,
        status=status_filter,
    )


@router.get("/{application_id}", response_model=ApplicationWithVacancyOut)
def get_application(
    application_id: str,
    service: ApplicationService = Depends(get_application_service),
):
    return service.find_by_id(application_id)


@router.post("", response_model=ApplicationOut, status_code=status.HTTP_201_CREATED)
def create_application(
    payload: ApplicationCreate,
    service: ApplicationService = Depends(get_application_service),
):
    """Status is always stored as pending, whatever the body says."""
    return service.create(payload)


@router.post("/with-cv", response_model=ApplicationOut, status_code=status.HTTP_201_CREATED)
async def create_application_with_cv(
    vacancy_id: str = Form(..., alias="vacancyId"),
    name: str = Form(...),
    email: str = Form(...),
    phone: str = Form(...),
    application_motivation: Optional[str] = Form(None, alias="applicationMotivation"),
    cv: UploadFile = File(...),
    service: ApplicationService = Depends(get_application_service),
):
    """Multipart variant: the CV file is uploaded to object storage and its URL stored."""
    file_buffer = await cv.read()
    logger.info(
        "CV received vacancy_id=%s file_name=%s size_bytes=%d",
        vacancy_id,
        cv.filename,
        len(file_buffer),
    )
    payload = ApplicationCreate(
        vacancy_id=vacancy_id,
        name=name,
        email=email,
        phone=phone,
        application_motivation=application_motivation,
    )
    return service.create_with_cv(
        payload,
        file_buffer=file_buffer,
        file_name=cv.filename or "cv.pdf",
        mime_type=cv.content_type or "application/pdf",
    )


@router.put("/{application_id}", response_model=ApplicationOut)
def update_application(
    application_id: str,
    payload: ApplicationUpdate,
    service: ApplicationService = Depends(get_application_service),
):
    return service.update(application_id, payload)


@router.patch("/{application_id}/status", response_model=ApplicationOut)
def update_application_status(
    application_id: str,
    payload: ApplicationStatusUpdate,
    service: ApplicationService = Depends(get_application_service),
):
    return service.update_status(application_id, payload.status)


@router.delete("/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_application(
    application_id: str,
    physical_delete: bool = Query(False, alias="physicalDelete"),
    service: ApplicationService = Depends(get_application_service),
):
    service.delete(application_id, physical_delete=physical_delete)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
