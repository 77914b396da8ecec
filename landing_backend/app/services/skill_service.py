"""
Skill service - certified skills listed on a user's profile
"""
from sqlalchemy.orm import Session

from landing_backend.app.core.config import DEFAULT_LIMIT, DEFAULT_PAGE
from landing_backend.app.core.error_catalog import SkillErrors
from landing_backend.app.core.exceptions import AppError, handle_service_errors
from landing_backend.app.core.logging_config import get_logger
from landing_backend.app.models.skill import Skill
from landing_backend.app.schemas.skill import SkillCreate, SkillUpdate
from landing_backend.app.services.user_lookup import require_user
from landing_backend.app.services.user_service import UserService
from landing_backend.app.utils.pagination import paginate
from landing_backend.app.utils.validators import is_blank, is_http_url

logger = get_logger("services.skill")


class SkillService:
    def __init__(self, db: Session, users: UserService | None = None):
        self.db = db
        self.users = users or UserService(db)

    def _guard(self, action: str):
        return handle_service_errors(self.db, SkillErrors.DATABASE_ERROR, logger, action)

    @staticmethod
    def _validate(data: dict) -> None:
        if "skill_name" in data and is_blank(data["skill_name"]):
            raise AppError(SkillErrors.INVALID_NAME)
        if data.get("url_certificate") and not is_http_url(data["url_certificate"]):
            raise AppError(SkillErrors.INVALID_URL)

    def find_all(self, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT, user_id: str | None = None) -> dict:
        with self._guard("skill.find_all"):
            query = self.db.query(Skill)
            if user_id:
                query = query.filter(Skill.user_id == user_id)
            return paginate(query.order_by(Skill.created_at.desc()), page, limit)

    def find_by_id(self, skill_id: str) -> Skill:
        with self._guard("skill.find_by_id"):
            skill = self.db.query(Skill).filter(Skill.id == skill_id).first()
            if not skill:
                raise AppError(SkillErrors.NOT_FOUND)
            return skill

    def find_by_user_id(self, user_id: str) -> list[Skill]:
        with self._guard("skill.find_by_user_id"):
            require_user(self.users, user_id, SkillErrors.USER_NOT_FOUND)
            return self.db.query(Skill).filter(Skill.user_id == user_id).order_by(Skill.created_at.asc()).all()

    def create(self, payload: SkillCreate) -> Skill:
        with self._guard("skill.create"):
            data = payload.model_dump(exclude_unset=True)
            self._validate(data)
            require_user(self.users, data["user_id"], SkillErrors.USER_NOT_FOUND)
            skill = Skill(**data)
            self.db.add(skill)
            self.db.commit()
            self.db.refresh(skill)
            logger.info("Skill created id=%s user_id=%s", skill.id, skill.user_id)
            return skill

    def update(self, skill_id: str, payload: SkillUpdate) -> Skill:
        with self._guard("skill.update"):
            skill = self.find_by_id(skill_id)
            data = payload.model_dump(exclude_unset=True)
            if data.get("user_id") is None:
                data.pop("user_id", None)
            if "skill_name" in data and data["skill_name"] is None:
                data.pop("skill_name")
            self._validate(data)
            if "user_id" in data and data["user_id"] != skill.user_id:
                require_user(self.users, data["user_id"], SkillErrors.USER_NOT_FOUND)

            for key, value in data.items():
                setattr(skill, key, value)
            self.db.commit()
            self.db.refresh(skill)
            return skill

    def delete(self, skill_id: str) -> bool:
        with self._guard("skill.delete"):
            skill = self.find_by_id(skill_id)
            self.db.delete(skill)
            self.db.commit()
            return True
