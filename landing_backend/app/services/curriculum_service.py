"""
Curriculum service - one curriculum per user, with an upsert keyed by user id
"""
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from landing_backend.app.core.error_catalog import CurriculumErrors
from landing_backend.app.core.exceptions import AppError, handle_service_errors
from landing_backend.app.core.logging_config import get_logger
from landing_backend.app.models.curriculum import Curriculum
from landing_backend.app.schemas.curriculum import CurriculumCreate, CurriculumUpdate
from landing_backend.app.services.user_lookup import require_user

if TYPE_CHECKING:
    from landing_backend.app.services.user_service import UserService

logger = get_logger("services.curriculum")


class CurriculumService:
    def __init__(self, db: Session, users: "UserService"):
        self.db = db
        self.users = users

    def _guard(self, action: str):
        return handle_service_errors(self.db, CurriculumErrors.DATABASE_ERROR, logger, action)

    def _existing_for_user(self, user_id: str) -> Curriculum | None:
        return self.db.query(Curriculum).filter(Curriculum.user_id == user_id).first()

    def _commit(self, curriculum: Curriculum) -> Curriculum:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise AppError(CurriculumErrors.ALREADY_EXISTS) from exc
        self.db.refresh(curriculum)
        return curriculum

    def find_by_id(self, curriculum_id: str) -> Curriculum:
        with self._guard("curriculum.find_by_id"):
            curriculum = self.db.query(Curriculum).filter(Curriculum.id == curriculum_id).first()
            if not curriculum:
                raise AppError(CurriculumErrors.NOT_FOUND)
            return curriculum

    def find_by_user_id(self, user_id: str, check_user_exists: bool = True) -> Curriculum:
        with self._guard("curriculum.find_by_user_id"):
            if check_user_exists:
                require_user(self.users, user_id, CurriculumErrors.USER_NOT_FOUND)
            curriculum = self._existing_for_user(user_id)
            if not curriculum:
                raise AppError(CurriculumErrors.NOT_FOUND)
            return curriculum

    def create(self, payload: CurriculumCreate, skip_user_check: bool = False) -> Curriculum:
        with self._guard("curriculum.create"):
            data = payload.model_dump(exclude_unset=True)
            if not skip_user_check:
                require_user(self.users, data["user_id"], CurriculumErrors.USER_NOT_FOUND)
            if self._existing_for_user(data["user_id"]):
                raise AppError(CurriculumErrors.ALREADY_EXISTS)

            curriculum = Curriculum(**data)
            self.db.add(curriculum)
            curriculum = self._commit(curriculum)
            logger.info("Curriculum created id=%s user_id=%s", curriculum.id, curriculum.user_id)
            return curriculum

    def update(self, curriculum_id: str, payload: CurriculumUpdate) -> Curriculum:
        with self._guard("curriculum.update"):
            curriculum = self.find_by_id(curriculum_id)
            data = payload.model_dump(exclude_unset=True)
            if data.get("user_id") is None:
                data.pop("user_id", None)
            elif data["user_id"] != curriculum.user_id:
                require_user(self.users, data["user_id"], CurriculumErrors.USER_NOT_FOUND)
                if self._existing_for_user(data["user_id"]):
                    raise AppError(CurriculumErrors.ALREADY_EXISTS)

            for key, value in data.items():
                setattr(curriculum, key, value)
            return self._commit(curriculum)

    def create_or_update(self, payload: CurriculumCreate) -> Curriculum:
        """Upsert by user id."""
        with self._guard("curriculum.create_or_update"):
            require_user(self.users, payload.user_id, CurriculumErrors.USER_NOT_FOUND)
            existing = self._existing_for_user(payload.user_id)
            if not existing:
                return self.create(payload, skip_user_check=True)

            data = payload.model_dump(exclude_unset=True, exclude={"user_id"})
            for key, value in data.items():
                setattr(existing, key, value)
            return self._commit(existing)

    def delete(self, curriculum_id: str) -> bool:
        with self._guard("curriculum.delete"):
            curriculum = self.find_by_id(curriculum_id)
            self.db.delete(curriculum)
            self.db.commit()
            return True
