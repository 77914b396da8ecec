"""
User service - profile identity plus the bootstrap of each new user's default records.

Creating a user writes the user row first; the default card configuration and
curriculum are created afterwards, one at a time, and a failure in either is
logged and reported in the UserCreationResult without undoing the user.
"""
import time
from dataclasses import dataclass, field

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from landing_backend.app.core.config import DEFAULT_CARD_CONFIGURATION, DEFAULT_LIMIT, DEFAULT_PAGE
from landing_backend.app.core.error_catalog import UserErrors
from landing_backend.app.core.exceptions import AppError, handle_service_errors
from landing_backend.app.core.logging_config import get_logger
from landing_backend.app.models.user import User
from landing_backend.app.schemas.card_configuration import CardConfigurationCreate
from landing_backend.app.schemas.curriculum import CurriculumCreate
from landing_backend.app.schemas.user import UserCreate, UserUpdate
from landing_backend.app.services.card_configuration_service import CardConfigurationService
from landing_backend.app.services.curriculum_service import CurriculumService
from landing_backend.app.services.external_service_client import ExternalServiceClient
from landing_backend.app.utils.pagination import paginate
from landing_backend.app.utils.slug import generate_slug
from landing_backend.app.utils.validators import is_blank, is_valid_email

logger = get_logger("services.user")

_REQUIRED_FIELDS = ("first_name", "last_name", "email", "slug", "is_active", "show_curriculum")


@dataclass
class UserCreationResult:
    """Outcome of create(): the user always exists; default records may not."""

    user: User
    card_configuration_created: bool = False
    curriculum_created: bool = False
    failures: list[str] = field(default_factory=list)

    @property
    def defaults_created(self) -> bool:
        return self.card_configuration_created and self.curriculum_created


class UserService:
    def __init__(self, db: Session, notifier: ExternalServiceClient | None = None):
        self.db = db
        self.notifier = notifier
        self.card_configurations = CardConfigurationService(db, self)
        self.curricula = CurriculumService(db, self)

    def _guard(self, action: str):
        return handle_service_errors(self.db, UserErrors.DATABASE_ERROR, logger, action)

    @staticmethod
    def _validate(data: dict) -> None:
        for name_field in ("first_name", "last_name"):
            if name_field in data and is_blank(data[name_field]):
                raise AppError(UserErrors.INVALID_NAME)
        if "email" in data and not is_valid_email(data["email"]):
            raise AppError(UserErrors.INVALID_EMAIL)

    def _slug_taken(self, slug: str, exclude_id: str | None = None) -> bool:
        query = self.db.query(User.id).filter(User.slug == slug)
        if exclude_id:
            query = query.filter(User.id != exclude_id)
        return query.first() is not None

    def find_all(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
        is_active: bool | None = None,
        search: str | None = None,
    ) -> dict:
        with self._guard("user.find_all"):
            query = self.db.query(User).options(selectinload(User.card_configuration))
            if is_active is not None:
                query = query.filter(User.is_active == is_active)
            if search:
                query = query.filter(User.email.ilike(f"%{search.strip()}%"))
            query = query.order_by(User.created_at.asc())
            return paginate(query, page, limit)

    def find_by_id(self, user_id: str, load_card_config: bool = True, load_curriculum: bool = True) -> User:
        with self._guard("user.find_by_id"):
            query = self.db.query(User)
            if load_card_config:
                query = query.options(selectinload(User.card_configuration))
            if load_curriculum:
                query = query.options(selectinload(User.curriculum))
            user = query.filter(User.id == user_id).first()
            if not user:
                raise AppError(UserErrors.NOT_FOUND)
            return user

    def find_by_slug(self, slug: str) -> User:
        with self._guard("user.find_by_slug"):
            user = (
                self.db.query(User)
                .options(selectinload(User.card_configuration), selectinload(User.curriculum))
                .filter(User.slug == slug)
                .first()
            )
            if not user:
                raise AppError(UserErrors.SLUG_NOT_FOUND)
            return user

    def find_by_email(self, email: str) -> User | None:
        with self._guard("user.find_by_email"):
            return self.db.query(User).filter(User.email == email).first()

    def create(self, payload: UserCreate) -> UserCreationResult:
        with self._guard("user.create"):
            data = payload.model_dump(exclude_unset=True)
            self._validate(data)
            if self.find_by_email(data["email"]):
                raise AppError(UserErrors.ALREADY_EXISTS)

            slug = generate_slug(data.get("slug") or f"{data['first_name']} {data['last_name']}")
            if self._slug_taken(slug):
                slug = f"{slug}-{str(int(time.time() * 1000))[-4:]}"

            user = User(
                first_name=data["first_name"].strip(),
                last_name=data["last_name"].strip(),
                email=data["email"].strip(),
                role=data.get("role"),
                slug=slug,
                image=data.get("image"),
                is_active=True if data.get("is_active") is None else data["is_active"],
                show_curriculum=bool(data.get("show_curriculum")),
            )
            self.db.add(user)
            try:
                self.db.commit()
            except IntegrityError as exc:
                self.db.rollback()
                raise AppError(UserErrors.ALREADY_EXISTS) from exc
            self.db.refresh(user)
            logger.info("User created id=%s email=%s slug=%s", user.id, user.email, user.slug)

        result = UserCreationResult(user=user)
        self._create_default_records(result)
        self._notify_created(user)
        self.db.refresh(user)
        return result

    def _create_default_records(self, result: UserCreationResult) -> None:
        """Card configuration first, then curriculum; neither re-checks the user it was handed."""
        user_id = result.user.id
        try:
            self.card_configurations.create(
                CardConfigurationCreate(user_id=user_id, **DEFAULT_CARD_CONFIGURATION),
                skip_user_check=True,
            )
            result.card_configuration_created = True
        except Exception as exc:
            result.failures.append("card_configuration")
            logger.warning("Default card configuration not created user_id=%s error=%s", user_id, exc)

        try:
            self.curricula.create(CurriculumCreate(user_id=user_id), skip_user_check=True)
            result.curriculum_created = True
        except Exception as exc:
            result.failures.append("curriculum")
            logger.warning("Default curriculum not created user_id=%s error=%s", user_id, exc)

    def _notify_created(self, user: User) -> None:
        if self.notifier is None:
            return
        try:
            self.notifier.notify_user_created(user.id)
        except AppError as exc:
            logger.warning("External service not notified user_id=%s error=%s", user.id, exc)

    def update(self, user_id: str, payload: UserUpdate) -> User:
        with self._guard("user.update"):
            user = self.find_by_id(user_id)
            data = payload.model_dump(exclude_unset=True)
            data = {k: v for k, v in data.items() if v is not None or k not in _REQUIRED_FIELDS}
            self._validate(data)

            if "email" in data and data["email"] != user.email:
                other = self.find_by_email(data["email"])
                if other and other.id != user.id:
                    raise AppError(UserErrors.ALREADY_EXISTS)
            if "slug" in data:
                data["slug"] = generate_slug(data["slug"])
                if not data["slug"]:
                    data.pop("slug")
                elif self._slug_taken(data["slug"], exclude_id=user.id):
                    raise AppError(UserErrors.ALREADY_EXISTS, message="Ya existe un usuario con ese slug")

            for key, value in data.items():
                setattr(user, key, value)
            try:
                self.db.commit()
            except IntegrityError as exc:
                self.db.rollback()
                raise AppError(UserErrors.ALREADY_EXISTS) from exc
            self.db.refresh(user)
            logger.info("User updated id=%s fields=%s", user.id, sorted(data))
            return user

    def delete(self, user_id: str) -> bool:
        """Logical only."""
        with self._guard("user.delete"):
            user = self.find_by_id(user_id, load_card_config=False, load_curriculum=False)
            user.is_active = False
            self.db.commit()
            logger.info("User deactivated id=%s", user_id)
            return True
