"""
Application service - candidates applying to vacancies.

Rules:
- the target vacancy must exist and be open (and active for CV uploads)
- one application per (vacancy, email)
- new applications always start as "pending"; status changes go through update_status
"""
import uuid
from pathlib import Path

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from landing_backend.app.core.config import APPLICATION_STATUSES, DEFAULT_LIMIT, DEFAULT_PAGE, settings
from landing_backend.app.core.error_catalog import ApplicationErrors, VacancyErrors
from landing_backend.app.core.exceptions import AppError, ErrorDefinition, handle_service_errors
from landing_backend.app.core.logging_config import get_logger
from landing_backend.app.models.application import Application
from landing_backend.app.models.vacancy import Vacancy
from landing_backend.app.schemas.application import ApplicationCreate, ApplicationUpdate
from landing_backend.app.services.s3_service import delete_file, upload_file
from landing_backend.app.services.vacancy_service import VacancyService
from landing_backend.app.utils.pagination import paginate
from landing_backend.app.utils.validators import is_blank, is_http_url, is_valid_email

logger = get_logger("services.application")

_REQUIRED_FIELDS = ("vacancy_id", "name", "email", "phone", "is_active")


class ApplicationService:
    def __init__(self, db: Session, vacancies: VacancyService | None = None):
        self.db = db
        self.vacancies = vacancies or VacancyService(db)

    def _guard(self, action: str):
        return handle_service_errors(self.db, ApplicationErrors.DATABASE_ERROR, logger, action)

    @staticmethod
    def _validate(data: dict) -> None:
        if "name" in data and is_blank(data["name"]):
            raise AppError(ApplicationErrors.INVALID_NAME)
        if "email" in data and not is_valid_email(data["email"]):
            raise AppError(ApplicationErrors.INVALID_EMAIL)
        if "phone" in data and is_blank(data["phone"]):
            raise AppError(ApplicationErrors.INVALID_PHONE)
        if data.get("cv_url") and not is_http_url(data["cv_url"]):
            raise AppError(ApplicationErrors.INVALID_CV_URL)

    def _get_vacancy(self, vacancy_id: str) -> Vacancy:
        try:
            return self.vacancies.find_by_id(vacancy_id)
        except AppError as exc:
            if exc.error_code == VacancyErrors.NOT_FOUND.error_code:
                raise AppError(ApplicationErrors.VACANCY_NOT_FOUND) from exc
            raise

    def _already_applied(self, vacancy_id: str, email: str, exclude_id: str | None = None) -> bool:
        query = self.db.query(Application.id).filter(
            Application.vacancy_id == vacancy_id,
            Application.email == email,
        )
        if exclude_id:
            query = query.filter(Application.id != exclude_id)
        return query.first() is not None

    def _commit(self, application: Application, duplicate: ErrorDefinition) -> Application:
        # the unique (vacancy, email) index catches concurrent duplicates
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise AppError(duplicate) from exc
        self.db.refresh(application)
        return application

    def find_all(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
        is_active: bool | None = None,
        status: str | None = None,
        vacancy_id: str | None = None,
        search: str | None = None,
    ) -> dict:
        with self._guard("application.find_all"):
            if status and status not in APPLICATION_STATUSES:
                raise AppError(ApplicationErrors.INVALID_STATUS)

            query = self.db.query(Application).options(joinedload(Application.vacancy))
            if is_active is not None:
                query = query.filter(Application.is_active == is_active)
            if status:
                query = query.filter(Application.status == status)
            if vacancy_id:
                query = query.filter(Application.vacancy_id == vacancy_id)
            if search:
                term = f"%{search.strip()}%"
                query = query.filter(
                    or_(
                        Application.name.ilike(term),
                        Application.email.ilike(term),
                        Application.phone.ilike(term),
                        Application.application_motivation.ilike(term),
                    )
                )
            query = query.order_by(Application.created_at.desc())
            return paginate(query, page, limit)

    def find_by_id(self, application_id: str) -> Application:
        with self._guard("application.find_by_id"):
            application = (
                self.db.query(Application)
                .options(joinedload(Application.vacancy))
                .filter(Application.id == application_id)
                .first()
            )
            if not application:
                raise AppError(ApplicationErrors.NOT_FOUND)
            return application

    def find_by_vacancy_id(
        self,
        vacancy_id: str,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
        is_active: bool | None = None,
        status: str | None = None,
    ) -> dict:
        with self._guard("application.find_by_vacancy_id"):
            self._get_vacancy(vacancy_id)
            return self.find_all(page=page, limit=limit, is_active=is_active, status=status, vacancy_id=vacancy_id)

    def create(self, payload: ApplicationCreate) -> Application:
        with self._guard("application.create"):
            data = payload.model_dump(exclude_unset=True)
            data.pop("status", None)
            self._validate(data)

            vacancy = self._get_vacancy(data["vacancy_id"])
            if vacancy.status != "open":
                raise AppError(ApplicationErrors.VACANCY_CLOSED)
            if self._already_applied(vacancy.id, data["email"]):
                raise AppError(ApplicationErrors.ALREADY_APPLIED)

            application = Application(
                vacancy_id=vacancy.id,
                name=data["name"].strip(),
                email=data["email"].strip(),
                phone=data["phone"].strip(),
                application_motivation=data.get("application_motivation"),
                cv_url=data.get("cv_url"),
                is_active=True if data.get("is_active") is None else data["is_active"],
                status="pending",
            )
            self.db.add(application)
            application = self._commit(application, ApplicationErrors.ALREADY_APPLIED)
            logger.info("Application created id=%s vacancy_id=%s", application.id, vacancy.id)
            return application

    def create_with_cv(
        self,
        payload: ApplicationCreate,
        file_buffer: bytes,
        file_name: str,
        mime_type: str = "application/pdf",
    ) -> Application:
        """
        Same checks as create plus an active vacancy. The CV is uploaded before
        the row is written and removed again if the row cannot be committed.
        """
        with self._guard("application.create_with_cv"):
            data = payload.model_dump(exclude_unset=True)
            data.pop("status", None)
            data.pop("cv_url", None)
            self._validate(data)
            if len(file_buffer) > settings.cv_max_size_bytes:
                raise AppError(ApplicationErrors.CV_TOO_LARGE)

            vacancy = self._get_vacancy(data["vacancy_id"])
            if not vacancy.is_active:
                raise AppError(ApplicationErrors.VACANCY_INACTIVE)
            if vacancy.status != "open":
                raise AppError(ApplicationErrors.VACANCY_CLOSED)
            if self._already_applied(vacancy.id, data["email"]):
                raise AppError(ApplicationErrors.ALREADY_EXISTS)

            stored_name = f"{uuid.uuid4()}{Path(file_name or '').suffix.lower() or '.pdf'}"
            try:
                cv_url = upload_file(file_buffer, stored_name, settings.cv_upload_folder, mime_type)
            except Exception as exc:
                logger.error("CV upload failed vacancy_id=%s email=%s error=%s", vacancy.id, data["email"], exc)
                raise AppError(ApplicationErrors.CV_UPLOAD_ERROR) from exc

            application = Application(
                vacancy_id=vacancy.id,
                name=data["name"].strip(),
                email=data["email"].strip(),
                phone=data["phone"].strip(),
                application_motivation=data.get("application_motivation"),
                cv_url=cv_url,
                is_active=True,
                status="pending",
            )
            self.db.add(application)
            try:
                application = self._commit(application, ApplicationErrors.ALREADY_EXISTS)
            except AppError:
                # lost a duplicate race: the uploaded CV has no row
                logger.warning("Removing orphaned CV vacancy_id=%s cv_url=%s", vacancy.id, cv_url)
                delete_file(cv_url)
                raise
            logger.info(
                "Application with CV created id=%s vacancy_id=%s cv_url=%s",
                application.id,
                vacancy.id,
                cv_url,
            )
            return application

    def update(self, application_id: str, payload: ApplicationUpdate) -> Application:
        with self._guard("application.update"):
            application = self.find_by_id(application_id)
            data = payload.model_dump(exclude_unset=True)
            data.pop("status", None)
            data = {k: v for k, v in data.items() if v is not None or k not in _REQUIRED_FIELDS}
            self._validate(data)

            effective_email = data.get("email", application.email)
            new_vacancy_id = data.get("vacancy_id")
            if new_vacancy_id and new_vacancy_id != application.vacancy_id:
                vacancy = self._get_vacancy(new_vacancy_id)
                if vacancy.status != "open":
                    raise AppError(ApplicationErrors.VACANCY_CLOSED)
                if self._already_applied(new_vacancy_id, effective_email, exclude_id=application.id):
                    raise AppError(ApplicationErrors.ALREADY_APPLIED)
            elif effective_email != application.email:
                if self._already_applied(application.vacancy_id, effective_email, exclude_id=application.id):
                    raise AppError(ApplicationErrors.ALREADY_APPLIED)

            for key, value in data.items():
                setattr(application, key, value)
            application = self._commit(application, ApplicationErrors.ALREADY_APPLIED)
            logger.info("Application updated id=%s fields=%s", application.id, sorted(data))
            return application

    def update_status(self, application_id: str, status: str) -> Application:
        """Any of the four statuses may follow any other."""
        with self._guard("application.update_status"):
            if status not in APPLICATION_STATUSES:
                raise AppError(ApplicationErrors.INVALID_STATUS)
            application = self.find_by_id(application_id)
            previous = application.status
            application.status = status
            self.db.commit()
            self.db.refresh(application)
            logger.info("Application status changed id=%s from=%s to=%s", application.id, previous, status)
            return application

    def delete(self, application_id: str, physical_delete: bool = False) -> bool:
        """
        Logical delete only deactivates; the status is left untouched.
        Physical delete also removes an uploaded CV from the bucket.
        """
        with self._guard("application.delete"):
            application = self.find_by_id(application_id)
            cv_url = application.cv_url
            if physical_delete:
                self.db.delete(application)
            else:
                application.is_active = False
            self.db.commit()
            if physical_delete and cv_url:
                delete_file(cv_url)
            logger.info("Application deleted id=%s physical=%s", application_id, physical_delete)
            return True
