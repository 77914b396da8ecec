"""
Parent-user existence check shared by the services owning per-user records.
Translates USER_NOT_FOUND into the calling module's own error code.
"""
from typing import TYPE_CHECKING

from landing_backend.app.core.error_catalog import UserErrors
from landing_backend.app.core.exceptions import AppError, ErrorDefinition

if TYPE_CHECKING:
    from landing_backend.app.models.user import User
    from landing_backend.app.services.user_service import UserService


def require_user(users: "UserService", user_id: str, missing: ErrorDefinition) -> "User":
    try:
        # no eager loading: card/curriculum services call this for their own parent check
        return users.find_by_id(user_id, load_card_config=False, load_curriculum=False)
    except AppError as exc:
        if exc.error_code == UserErrors.NOT_FOUND.error_code:
            raise AppError(missing) from exc
        raise
