# 📄 File: plantcare_social/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The main configuration center that reads all settings from environment variables
# and hands them to the rest of the app in one organized place.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for all application configuration parameters.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - .env file loading (handled by pydantic-settings)
#
# 🔄 Connected Modules / Calls From:
# - plantcare_social.main (application startup)
# - Database connection and session modules
# - Security manager, external API clients, realtime services

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety. Settings are loaded
    from environment variables with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="Plant Care Social API", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_DESCRIPTION: str = Field(
        default="Posts, chat, follow graph and realtime notifications for plant lovers",
        description="Application description"
    )
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=False, description="Debug mode flag")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="text", description="Log output format (text/json)")
    API_PREFIX: str = Field(default="", description="Prefix mounted in front of every HTTP route")

    # =========================================================================
    # SERVER CONFIGURATION
    # =========================================================================

    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=5000, description="Server port")
    RELOAD: bool = Field(default=False, description="Auto-reload on changes")
    # The channel registry lives in process memory, so one worker serves every socket.
    WORKERS: int = Field(default=1, description="Number of worker processes")

    # =========================================================================
    # DATABASE CONFIGURATION
    # =========================================================================

    DATABASE_URL: Optional[str] = Field(None, description="SQLAlchemy async database URL")
    DB_HOST: str = Field(default="localhost", description="Database host")
    DB_PORT: int = Field(default=5432, description="Database port")
    DB_NAME: str = Field(default="plantcare_social", description="Database name")
    DB_USER: str = Field(default="postgres", description="Database user")
    DB_PASSWORD: str = Field(default="", description="Database password")

    DB_POOL_SIZE: int = Field(default=10, description="Database pool size")
    DB_MAX_OVERFLOW: int = Field(default=20, description="Database pool overflow")
    DB_POOL_TIMEOUT: int = Field(default=30, description="Database pool timeout")
    DB_POOL_RECYCLE: int = Field(default=3600, description="Database pool recycle time")
    DB_AUTO_CREATE: bool = Field(
        default=True,
        description="Create missing tables on startup (use alembic in production)"
    )

    # =========================================================================
    # SECURITY SETTINGS
    # =========================================================================

    JWT_SECRET_KEY: str = Field(..., description="JWT secret key")
    JWT_ALGORITHM: str = Field(default="HS256", description="JWT algorithm")
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(
        default=60 * 24 * 7,
        description="JWT access token expiry"
    )
    BCRYPT_ROUNDS: int = Field(default=12, description="BCrypt hash rounds")

    CORS_ORIGINS: str = Field(default="*", description="CORS allowed origins")
    CORS_ALLOW_CREDENTIALS: bool = Field(default=False, description="CORS allow credentials")

    # =========================================================================
    # AI / LLM APIs
    # =========================================================================

    GROQ_API_KEY: Optional[str] = Field(None, description="Groq API key")
    GROQ_API_URL: str = Field(
        default="https://api.groq.com/openai/v1",
        description="Groq OpenAI-compatible API base URL"
    )
    GROQ_MODEL: str = Field(default="llama-3.3-70b-versatile", description="Groq model")
    AI_CHAT_MAX_TOKENS: int = Field(default=500, description="Max tokens for chat answers")
    AI_RECOMMENDATION_MAX_TOKENS: int = Field(
        default=800,
        description="Max tokens for plant recommendations"
    )
    AI_TEMPERATURE: float = Field(default=0.7, description="Sampling temperature")
    AI_TIMEOUT_SECONDS: int = Field(default=30, description="Bounded wait for AI completions")
    AI_CHAT_RATE_LIMIT: str = Field(
        default="20/minute",
        description="AI chat rate limit in '<limit>/<period>' format"
    )

    # =========================================================================
    # NOTIFICATION SERVICES
    # =========================================================================

    SENDGRID_API_KEY: Optional[str] = Field(None, description="SendGrid API key")
    SENDGRID_API_URL: str = Field(
        default="https://api.sendgrid.com/v3",
        description="SendGrid API base URL"
    )
    SENDGRID_FROM_EMAIL: str = Field(
        default="noreply@plantcare.app",
        description="SendGrid from email"
    )
    SENDGRID_FROM_NAME: str = Field(default="Plant Care App", description="SendGrid from name")
    MAIL_TIMEOUT_SECONDS: int = Field(default=15, description="Mail API request timeout")

    # =========================================================================
    # REALTIME DELIVERY
    # =========================================================================

    REALTIME_QUEUE_SIZE: int = Field(
        default=256,
        description="Outbound events buffered per live connection before dropping"
    )
    NOTIFICATION_PREVIEW_LENGTH: int = Field(
        default=50,
        description="Characters of message/caption quoted in a notification body"
    )
    NOTIFICATION_LIST_LIMIT: int = Field(default=50, description="Notifications returned per listing")

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed_environments = ["development", "staging", "production", "test"]
        if v.lower() not in allowed_environments:
            raise ValueError(f"Environment must be one of {allowed_environments}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"Log level must be one of {allowed_levels}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ("text", "json"):
            raise ValueError("Log format must be 'text' or 'json'")
        return v.lower()

    @field_validator("WORKERS")
    @classmethod
    def validate_workers(cls, v: int) -> int:
        """The live channel registry is per process, so the server runs one worker."""
        if v != 1:
            raise ValueError("WORKERS must be 1: live connections are registered in-process")
        return v

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        """Validate JWT algorithm."""
        allowed_algorithms = ["HS256", "HS384", "HS512"]
        if v not in allowed_algorithms:
            raise ValueError(f"JWT algorithm must be one of {allowed_algorithms}")
        return v

    @field_validator("CORS_ORIGINS")
    @classmethod
    def validate_cors_origins(cls, v: str) -> str:
        """Validate CORS origins format."""
        origins = [origin.strip() for origin in v.split(",")]
        for origin in origins:
            if not origin.startswith(("http://", "https://", "*")):
                raise ValueError(f"Invalid CORS origin format: {origin}")
        return v

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @property
    def database_url(self) -> str:
        """Get the database URL, preferring explicit DATABASE_URL."""
        if self.DATABASE_URL:
            return self.DATABASE_URL

        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT == "development"

    @property
    def ai_configured(self) -> bool:
        return bool(self.GROQ_API_KEY)


# ============================================================================
# SETTINGS FACTORY
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Uses lru_cache to ensure settings are loaded only once
    and reused throughout the application lifecycle.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
