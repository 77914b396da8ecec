"""
Application configuration settings.
Loads from .env file first (overrides shell env for local dev), then pydantic reads from environment.
Production: set env vars in the platform (Docker, K8s, etc.); .env is optional.

All backend-related configs and constants are centralized here.
"""
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env path: landing_backend/.env (absolute path, works regardless of cwd)
_BASE_DIR = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = (_BASE_DIR / ".env").resolve()

if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE, override=True)


class Settings(BaseSettings):
    """Application settings. Source: env vars (after dotenv load)."""

    # App
    app_name: str = "Landing API"
    app_version: str = "1.0.0"
    port: int = 3000
    api_prefix: str = "api"
    cors_origins: str = "*"

    # Database
    database_url: str = "sqlite:///./landing.db"

    # HTTP / network
    http_request_timeout: int = 5
    external_service_url: str = ""
    external_service_api_key: str = ""

    # AWS S3
    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""
    aws_region: str = "us-east-1"
    aws_bucket_name: str = "landing-files"
    s3_key_prefix: str = "kodeksa"

    # Application CV uploads
    cv_upload_folder: str = "kodeksa/application-resumes"
    cv_max_size_bytes: int = 5 * 1024 * 1024

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


# --- Constants (non-env, business config) ---

DEFAULT_PAGE: int = 1
DEFAULT_LIMIT: int = 10

VACANCY_MODES: tuple[str, ...] = ("Remoto", "Presencial", "Híbrido")
VACANCY_STATUSES: tuple[str, ...] = ("open", "closed", "on_hold")
APPLICATION_STATUSES: tuple[str, ...] = ("pending", "in_review", "accepted", "rejected")

# Theme applied to the card of every newly created user
DEFAULT_CARD_CONFIGURATION: dict = {
    "image_size": 90,
    "bg_color": "#FFFFFF",
    "text_above": "",
    "text_above_color": "#000000",
    "above_font_family": "'Clash Display', sans-serif",
    "above_font_size": "3.5rem",
    "above_font_weight": "700",
    "above_letter_spacing": "0.23em",
    "above_text_transform": "uppercase",
    "above_text_top_offset": "0px",
    "text_below": "",
    "below_font_weight": "700",
    "below_letter_spacing": "0.35em",
    "below_font_family": "'Clash Display', sans-serif",
    "below_font_size": "1.5rem",
    "below_text_transform": "uppercase",
    "text_below_color": "#000000",
}

# Theme restored by PUT /card-configurations/{id}/reset
RESET_CARD_CONFIGURATION: dict = {
    "image_size": 90,
    "bg_color": "#FFFFFF",
    "text_above": "",
    "text_above_color": "#000000",
    "above_font_family": "Arial",
    "above_font_size": "16px",
    "above_font_weight": "normal",
    "above_letter_spacing": "normal",
    "above_text_transform": "none",
    "above_text_top_offset": "0px",
    "text_below": "",
    "below_font_weight": "normal",
    "below_letter_spacing": "normal",
    "below_font_family": "Arial",
    "below_text_transform": "none",
    "text_below_color": "#000000",
}

# Blog author fallbacks
DEFAULT_AUTHOR_NAME: str = "Usuario Desconocido"
DEFAULT_AUTHOR_AVATAR: str = "/images/default-avatar.png"
DEFAULT_AUTHOR_ROLE: str = "Autor"
