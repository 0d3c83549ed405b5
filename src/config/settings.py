from functools import lru_cache
from typing import List, Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.commonUtils.enumUtils import AppEnvironment

BREVO_API_ENDPOINT = "https://api.brevo.com/v3/smtp/email"

# Local dev servers that are always allowed alongside FRONTEND_URL
DEV_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]


class ConfigurationError(Exception):
    """Raised when required settings are absent at startup."""

    def __init__(self, missing: List[str]):
        self.missing = missing
        super().__init__(f"Missing environment variables: {', '.join(missing)}")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    HOST: str = "0.0.0.0"
    PORT: int = 5000
    FRONTEND_URL: Optional[str] = None

    ENVIRONMENT: str = AppEnvironment.PRODUCTION.value
    LOG_LEVEL: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"

    BREVO_API_KEY: Optional[str] = None
    BREVO_SENDER_EMAIL: Optional[str] = None
    BREVO_SENDER_NAME: str = "Autoflowmation AI"
    BREVO_ADMIN_EMAIL: Optional[str] = None
    BREVO_API_ENDPOINT: str = BREVO_API_ENDPOINT

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        return value.strip().upper() if isinstance(value, str) else value

    @property
    def allowed_origins(self) -> List[str]:
        origins = [self.FRONTEND_URL] + DEV_ORIGINS
        return [origin.strip() for origin in origins if origin and origin.strip()]

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == AppEnvironment.DEVELOPMENT.value

    def missing_required(self) -> List[str]:
        missing = []
        if not self.BREVO_API_KEY:
            missing.append("BREVO_API_KEY")
        if not self.BREVO_SENDER_EMAIL:
            missing.append("BREVO_SENDER_EMAIL")
        if not self.BREVO_ADMIN_EMAIL:
            missing.append("BREVO_ADMIN_EMAIL")
        return missing


def check_required_settings(settings: Settings) -> Settings:
    missing = settings.missing_required()
    if missing:
        raise ConfigurationError(missing)
    return settings


@lru_cache
def get_settings() -> Settings:
    """Load settings from the environment once per process"""
    return Settings()
