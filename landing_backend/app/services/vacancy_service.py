"""
Vacancy service - lifecycle of job openings (open / closed / on_hold) and slug uniqueness
"""
import time

from sqlalchemy import String, cast, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from landing_backend.app.core.config import DEFAULT_LIMIT, DEFAULT_PAGE, VACANCY_MODES, VACANCY_STATUSES
from landing_backend.app.core.error_catalog import VacancyErrors
from landing_backend.app.core.exceptions import AppError, handle_service_errors
from landing_backend.app.core.logging_config import get_logger
from landing_backend.app.models.vacancy import Vacancy
from landing_backend.app.schemas.vacancy import VacancyCreate, VacancyUpdate
from landing_backend.app.utils.pagination import paginate
from landing_backend.app.utils.slug import generate_slug
from landing_backend.app.utils.validators import is_blank

logger = get_logger("services.vacancy")


def _timestamp_suffix() -> str:
    """Last four digits of the current epoch milliseconds."""
    return str(int(time.time() * 1000))[-4:]


class VacancyService:
    def __init__(self, db: Session):
        self.db = db

    def _guard(self, action: str):
        return handle_service_errors(self.db, VacancyErrors.DATABASE_ERROR, logger, action)

    @staticmethod
    def _validate(data: dict) -> None:
        if "job_title" in data and is_blank(data["job_title"]):
            raise AppError(VacancyErrors.INVALID_JOB_TITLE)
        if "mode" in data and data["mode"] not in VACANCY_MODES:
            raise AppError(VacancyErrors.INVALID_MODE)
        if "years_experience" in data and (data["years_experience"] is None or data["years_experience"] < 0):
            raise AppError(VacancyErrors.INVALID_YEARS_EXPERIENCE)
        if "stack_required" in data:
            stack = data["stack_required"]
            if not stack or any(is_blank(item) for item in stack):
                raise AppError(VacancyErrors.INVALID_STACK)
        if data.get("status") is not None and data["status"] not in VACANCY_STATUSES:
            raise AppError(VacancyErrors.INVALID_STATUS)

    def _slug_taken(self, slug: str, exclude_id: str | None = None) -> bool:
        query = self.db.query(Vacancy.id).filter(Vacancy.slug == slug)
        if exclude_id:
            query = query.filter(Vacancy.id != exclude_id)
        return query.first() is not None

    def _commit(self, vacancy: Vacancy) -> Vacancy:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise AppError(VacancyErrors.SLUG_ALREADY_EXISTS) from exc
        self.db.refresh(vacancy)
        return vacancy

    def find_all(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
        is_active: bool | None = None,
        status: str | None = None,
        mode: str | None = None,
        search: str | None = None,
    ) -> dict:
        with self._guard("vacancy.find_all"):
            if status and status not in VACANCY_STATUSES:
                raise AppError(VacancyErrors.INVALID_STATUS)
            if mode and mode not in VACANCY_MODES:
                raise AppError(VacancyErrors.INVALID_MODE)

            query = self.db.query(Vacancy)
            if is_active is not None:
                query = query.filter(Vacancy.is_active == is_active)
            if status:
                query = query.filter(Vacancy.status == status)
            if mode:
                query = query.filter(Vacancy.mode == mode)
            if search:
                term = f"%{search.strip()}%"
                query = query.filter(
                    or_(
                        Vacancy.job_title.ilike(term),
                        Vacancy.short_description.ilike(term),
                        Vacancy.description.ilike(term),
                        cast(Vacancy.stack_required, String).ilike(term),
                    )
                )
            query = query.order_by(Vacancy.created_at.desc())
            return paginate(query, page, limit)

    def find_by_id(self, vacancy_id: str, include_applications: bool = False) -> Vacancy:
        with self._guard("vacancy.find_by_id"):
            query = self.db.query(Vacancy)
            if include_applications:
                query = query.options(selectinload(Vacancy.applications))
            vacancy = query.filter(Vacancy.id == vacancy_id).first()
            if not vacancy:
                raise AppError(VacancyErrors.NOT_FOUND)
            return vacancy

    def find_by_slug(self, slug: str, include_applications: bool = False) -> Vacancy:
        with self._guard("vacancy.find_by_slug"):
            query = self.db.query(Vacancy)
            if include_applications:
                query = query.options(selectinload(Vacancy.applications))
            vacancy = query.filter(Vacancy.slug == slug).first()
            if not vacancy:
                raise AppError(VacancyErrors.SLUG_NOT_FOUND)
            return vacancy

    def create(self, payload: VacancyCreate) -> Vacancy:
        with self._guard("vacancy.create"):
            data = payload.model_dump(exclude_unset=True)
            self._validate(data)

            if not is_blank(data.get("slug")):
                slug = generate_slug(data["slug"])
                if not slug:
                    raise AppError(VacancyErrors.INVALID_SLUG)
            else:
                slug = generate_slug(data["job_title"])
            if not slug:
                raise AppError(VacancyErrors.INVALID_JOB_TITLE)
            if self._slug_taken(slug):
                raise AppError(VacancyErrors.SLUG_ALREADY_EXISTS)

            vacancy = Vacancy(
                job_title=data["job_title"].strip(),
                slug=slug,
                mode=data["mode"],
                years_experience=data["years_experience"],
                short_description=data["short_description"],
                description=data["description"],
                stack_required=list(data["stack_required"]),
                is_active=True if data.get("is_active") is None else data["is_active"],
                status=data.get("status") or "open",
            )
            self.db.add(vacancy)
            vacancy = self._commit(vacancy)
            logger.info("Vacancy created id=%s slug=%s status=%s", vacancy.id, vacancy.slug, vacancy.status)
            return vacancy

    def update(self, vacancy_id: str, payload: VacancyUpdate) -> Vacancy:
        """
        Explicit slugs must be free; a slug derived from a new title is
        disambiguated with a timestamp suffix instead of failing.
        """
        with self._guard("vacancy.update"):
            vacancy = self.find_by_id(vacancy_id)
            data = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None}
            self._validate(data)

            requested_slug = data.pop("slug", None)
            if not is_blank(requested_slug):
                explicit_slug = generate_slug(requested_slug)
                if not explicit_slug:
                    raise AppError(VacancyErrors.INVALID_SLUG)
                if self._slug_taken(explicit_slug, exclude_id=vacancy.id):
                    raise AppError(VacancyErrors.SLUG_ALREADY_EXISTS)
                data["slug"] = explicit_slug
            elif "job_title" in data:
                title_slug = generate_slug(data["job_title"])
                if not title_slug:
                    raise AppError(VacancyErrors.INVALID_JOB_TITLE)
                if self._slug_taken(title_slug, exclude_id=vacancy.id):
                    title_slug = f"{title_slug}-{_timestamp_suffix()}"
                data["slug"] = title_slug

            for key, value in data.items():
                setattr(vacancy, key, value)
            vacancy = self._commit(vacancy)
            logger.info("Vacancy updated id=%s fields=%s", vacancy.id, sorted(data))
            return vacancy

    def change_status(self, vacancy_id: str, status: str) -> Vacancy:
        with self._guard("vacancy.change_status"):
            if status not in VACANCY_STATUSES:
                raise AppError(VacancyErrors.INVALID_STATUS)
            vacancy = self.find_by_id(vacancy_id)
            previous = vacancy.status
            vacancy.status = status
            vacancy = self._commit(vacancy)
            logger.info("Vacancy status changed id=%s from=%s to=%s", vacancy.id, previous, status)
            return vacancy

    def delete(self, vacancy_id: str, physical_delete: bool = False) -> bool:
        """Physical delete removes the row (and its applications); logical delete deactivates and closes."""
        with self._guard("vacancy.delete"):
            vacancy = self.find_by_id(vacancy_id)
            if physical_delete:
                self.db.delete(vacancy)
            else:
                vacancy.is_active = False
                vacancy.status = "closed"
            self.db.commit()
            logger.info("Vacancy deleted id=%s physical=%s", vacancy_id, physical_delete)
            return True
