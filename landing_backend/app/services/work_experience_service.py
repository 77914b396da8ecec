"""
Work experience service - positions held by a user, with date-range validation
"""
from sqlalchemy.orm import Session

from landing_backend.app.core.config import DEFAULT_LIMIT, DEFAULT_PAGE
from landing_backend.app.core.error_catalog import WorkExperienceErrors
from landing_backend.app.core.exceptions import AppError, handle_service_errors
from landing_backend.app.core.logging_config import get_logger
from landing_backend.app.models.work_experience import WorkExperience
from landing_backend.app.schemas.work_experience import WorkExperienceCreate, WorkExperienceUpdate
from landing_backend.app.services.user_lookup import require_user
from landing_backend.app.services.user_service import UserService
from landing_backend.app.utils.pagination import paginate
from landing_backend.app.utils.validators import is_blank

logger = get_logger("services.work_experience")

_REQUIRED_FIELDS = ("user_id", "role", "company_name", "from_year")


def _check_date_range(from_year, until_year) -> None:
    if from_year is not None and until_year is not None and until_year < from_year:
        raise AppError(WorkExperienceErrors.UNTIL_BEFORE_FROM)


class WorkExperienceService:
    def __init__(self, db: Session, users: UserService | None = None):
        self.db = db
        self.users = users or UserService(db)

    def _guard(self, action: str):
        return handle_service_errors(self.db, WorkExperienceErrors.DATABASE_ERROR, logger, action)

    @staticmethod
    def _validate(data: dict) -> None:
        if "role" in data and is_blank(data["role"]):
            raise AppError(WorkExperienceErrors.INVALID_ROLE)
        if "company_name" in data and is_blank(data["company_name"]):
            raise AppError(WorkExperienceErrors.INVALID_COMPANY_NAME)

    def find_all(self, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT, user_id: str | None = None) -> dict:
        with self._guard("work_experience.find_all"):
            query = self.db.query(WorkExperience)
            if user_id:
                query = query.filter(WorkExperience.user_id == user_id)
            return paginate(query.order_by(WorkExperience.from_year.desc()), page, limit)

    def find_by_id(self, experience_id: str) -> WorkExperience:
        with self._guard("work_experience.find_by_id"):
            experience = self.db.query(WorkExperience).filter(WorkExperience.id == experience_id).first()
            if not experience:
                raise AppError(WorkExperienceErrors.NOT_FOUND)
            return experience

    def find_by_user_id(self, user_id: str) -> list[WorkExperience]:
        with self._guard("work_experience.find_by_user_id"):
            require_user(self.users, user_id, WorkExperienceErrors.USER_NOT_FOUND)
            return (
                self.db.query(WorkExperience)
                .filter(WorkExperience.user_id == user_id)
                .order_by(WorkExperience.from_year.desc())
                .all()
            )

    def create(self, payload: WorkExperienceCreate) -> WorkExperience:
        with self._guard("work_experience.create"):
            data = payload.model_dump(exclude_unset=True)
            self._validate(data)
            _check_date_range(data["from_year"], data.get("until_year"))
            require_user(self.users, data["user_id"], WorkExperienceErrors.USER_NOT_FOUND)

            experience = WorkExperience(**data)
            self.db.add(experience)
            self.db.commit()
            self.db.refresh(experience)
            logger.info("Work experience created id=%s user_id=%s", experience.id, experience.user_id)
            return experience

    def update(self, experience_id: str, payload: WorkExperienceUpdate) -> WorkExperience:
        """Dates are checked on the merged record, so a lone untilYear is compared with the stored fromYear."""
        with self._guard("work_experience.update"):
            experience = self.find_by_id(experience_id)
            data = payload.model_dump(exclude_unset=True)
            data = {k: v for k, v in data.items() if v is not None or k not in _REQUIRED_FIELDS}
            self._validate(data)
            _check_date_range(
                data.get("from_year", experience.from_year),
                data.get("until_year", experience.until_year),
            )
            if "user_id" in data and data["user_id"] != experience.user_id:
                require_user(self.users, data["user_id"], WorkExperienceErrors.USER_NOT_FOUND)

            for key, value in data.items():
                setattr(experience, key, value)
            self.db.commit()
            self.db.refresh(experience)
            return experience

    def delete(self, experience_id: str) -> bool:
        with self._guard("work_experience.delete"):
            experience = self.find_by_id(experience_id)
            self.db.delete(experience)
            self.db.commit()
            return True
