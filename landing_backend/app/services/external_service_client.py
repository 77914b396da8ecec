"""
HTTP client for the external notification/verification service.
Every call carries an explicit timeout; nothing is retried.
"""
from functools import lru_cache

import httpx

from landing_backend.app.core.config import settings
from landing_backend.app.core.error_catalog import UserErrors
from landing_backend.app.core.exceptions import AppError
from landing_backend.app.core.logging_config import get_logger

logger = get_logger("services.external")

DEFAULT_VERIFICATION = {"isValid": True, "score": 50}


class ExternalServiceClient:
    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else settings.http_request_timeout
        self._headers = {"X-API-Key": api_key} if api_key else {}
        self._client = client or httpx.Client(timeout=self.timeout)

    def notify_user_created(self, user_id: str) -> None:
        """POST the new user id. Raises USER_EXTERNAL_SERVICE_ERROR on any transport/HTTP failure."""
        url = f"{self.base_url}/notifications/user-created"
        try:
            response = self._client.post(url, json={"userId": user_id}, headers=self._headers, timeout=self.timeout)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("User creation notification failed user_id=%s url=%s error=%s", user_id, url, exc)
            raise AppError(UserErrors.EXTERNAL_SERVICE_ERROR) from exc
        logger.info("User creation notification sent user_id=%s", user_id)

    def verify_user_info(self, email: str) -> dict:
        """Ask the service to score an email. Falls back to a neutral verdict on failure."""
        url = f"{self.base_url}/verify-user"
        try:
            response = self._client.get(url, params={"email": email}, headers=self._headers, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("User verification failed email=%s url=%s error=%s", email, url, exc)
            return dict(DEFAULT_VERIFICATION)


@lru_cache
def get_external_service_client() -> ExternalServiceClient | None:
    """Process-wide client for the configured service, or None when EXTERNAL_SERVICE_URL is unset."""
    if not settings.external_service_url:
        return None
    return ExternalServiceClient(
        settings.external_service_url,
        api_key=settings.external_service_api_key,
        timeout=settings.http_request_timeout,
    )
