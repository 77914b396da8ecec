"""
Card configuration service - one theme record per user
"""
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from landing_backend.app.core.config import RESET_CARD_CONFIGURATION
from landing_backend.app.core.error_catalog import CardConfigurationErrors
from landing_backend.app.core.exceptions import AppError, handle_service_errors
from landing_backend.app.core.logging_config import get_logger
from landing_backend.app.models.card_configuration import CardConfiguration
from landing_backend.app.schemas.card_configuration import CardConfigurationCreate, CardConfigurationUpdate
from landing_backend.app.services.user_lookup import require_user
from landing_backend.app.utils.validators import is_hex_color

if TYPE_CHECKING:
    from landing_backend.app.services.user_service import UserService

logger = get_logger("services.card_configuration")

COLOR_FIELDS = ("bg_color", "text_above_color", "text_below_color")


class CardConfigurationService:
    def __init__(self, db: Session, users: "UserService"):
        self.db = db
        self.users = users

    def _guard(self, action: str):
        return handle_service_errors(self.db, CardConfigurationErrors.DATABASE_ERROR, logger, action)

    @staticmethod
    def _validate_colors(data: dict) -> None:
        for field in COLOR_FIELDS:
            value = data.get(field)
            if value is not None and not is_hex_color(value):
                raise AppError(CardConfigurationErrors.INVALID_COLOR, details={"field": field, "value": value})

    def find_by_id(self, config_id: str) -> CardConfiguration:
        with self._guard("card_configuration.find_by_id"):
            config = self.db.query(CardConfiguration).filter(CardConfiguration.id == config_id).first()
            if not config:
                raise AppError(CardConfigurationErrors.NOT_FOUND)
            return config

    def find_by_user_id(self, user_id: str, check_user_exists: bool = True) -> CardConfiguration:
        with self._guard("card_configuration.find_by_user_id"):
            if check_user_exists:
                require_user(self.users, user_id, CardConfigurationErrors.USER_NOT_FOUND)
            config = self.db.query(CardConfiguration).filter(CardConfiguration.user_id == user_id).first()
            if not config:
                raise AppError(CardConfigurationErrors.NOT_FOUND)
            return config

    def create(self, payload: CardConfigurationCreate, skip_user_check: bool = False) -> CardConfiguration:
        """skip_user_check is set by the user bootstrap, which has just written the user itself."""
        with self._guard("card_configuration.create"):
            data = payload.model_dump(exclude_unset=True)
            self._validate_colors(data)
            if not skip_user_check:
                require_user(self.users, data["user_id"], CardConfigurationErrors.USER_NOT_FOUND)

            exists = self.db.query(CardConfiguration.id).filter(CardConfiguration.user_id == data["user_id"]).first()
            if exists:
                raise AppError(CardConfigurationErrors.ALREADY_EXISTS)

            config = CardConfiguration(**data)
            self.db.add(config)
            try:
                self.db.commit()
            except IntegrityError as exc:
                self.db.rollback()
                raise AppError(CardConfigurationErrors.ALREADY_EXISTS) from exc
            self.db.refresh(config)
            logger.info("Card configuration created id=%s user_id=%s", config.id, config.user_id)
            return config

    def update(self, config_id: str, payload: CardConfigurationUpdate) -> CardConfiguration:
        with self._guard("card_configuration.update"):
            config = self.find_by_id(config_id)
            data = payload.model_dump(exclude_unset=True)
            self._validate_colors(data)
            for key, value in data.items():
                setattr(config, key, value)
            self.db.commit()
            self.db.refresh(config)
            return config

    def reset(self, config_id: str) -> CardConfiguration:
        """Restore the neutral theme (Arial, normal weights)."""
        with self._guard("card_configuration.reset"):
            config = self.find_by_id(config_id)
            for key, value in RESET_CARD_CONFIGURATION.items():
                setattr(config, key, value)
            self.db.commit()
            self.db.refresh(config)
            logger.info("Card configuration reset id=%s", config.id)
            return config

    def delete(self, config_id: str) -> bool:
        with self._guard("card_configuration.delete"):
            config = self.find_by_id(config_id)
            self.db.delete(config)
            self.db.commit()
            return True
