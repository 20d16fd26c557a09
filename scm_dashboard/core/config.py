# File: scm_dashboard/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    # ---------------------------
    # Meta / Pydantic settings
    # ---------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",  # Ignore unexpected env vars instead of erroring
    )

    # ---------------------------
    # API / Project
    # ---------------------------
    PROJECT_NAME: str = "AI Supply Chain Management"
    API_V1_STR: str = "/api"

    # Where the dashboard client sends its requests
    API_BASE_URL: str = "http://localhost:8000/api"
    # None disables the client timeout
    HTTP_TIMEOUT: Optional[float] = None

    # mock | http
    DATA_SOURCE: str = "mock"

    # ---------------------------
    # Environment / Logging
    # ---------------------------
    ENVIRONMENT: str = "development"  # development | staging | production
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ---------------------------
    # Security / Auth
    # ---------------------------
    SECRET_KEY: str = "change-me-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    REQUIRE_AUTH: bool = False

    # ---------------------------
    # Dashboard thresholds
    # ---------------------------
    LOW_STOCK_THRESHOLD: int = 100
    EXPIRY_WARNING_DAYS: int = 30
    DEFAULT_DELIVERY_DAYS: int = 14

    # ---------------------------
    # Derived / Convenience
    # ---------------------------
    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"


settings = Settings()
