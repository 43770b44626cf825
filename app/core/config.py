# python
# app/core/config.py
"""Configuration settings for the Alle task server.

Uses Pydantic BaseSettings for environment variable management.
"""
from enum import Enum
from urllib.parse import urlsplit

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentEnum(str, Enum):
    development = "development"
    testing = "testing"
    staging = "staging"
    production = "production"


class LogLevelEnum(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormatEnum(str, Enum):
    simple = "simple"
    json = "json"


class Settings(BaseSettings):
    # Pydantic v2 settings configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ===== Application Settings =====
    app_name: str = Field(default="Alle Task API", description="Application name")
    environment: EnvironmentEnum = Field(
        default=EnvironmentEnum.development, description="Environment type"
    )
    debug: bool = Field(default=False, description="Debug mode")
    version: str = Field(default="1.0.0", description="Application version")

    # ===== Database Settings =====
    database_url: str = Field(
        default="sqlite+aiosqlite:///./alle.db", description="Database connection URL"
    )

    # ===== Server Settings =====
    host: str = Field(default="0.0.0.0", description="Host to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")

    # ===== CORS Settings =====
    allowed_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Allowed CORS origins (comma-separated)",
    )

    # ===== Object Storage (MinIO / S3) =====
    minio_endpoint: str = Field(default="localhost:9000", description="MinIO host:port")
    minio_access_key: str | None = Field(default=None, description="MinIO access key")
    minio_secret_key: str | None = Field(default=None, description="MinIO secret key")
    minio_bucket: str = Field(default="alle-attachments", description="Attachment bucket")
    minio_use_ssl: bool = Field(default=False, description="Use HTTPS for MinIO")
    minio_region: str = Field(default="us-east-1", description="MinIO region")

    # ===== Security Settings =====
    # Loaded for the deployment contract; no request handler checks tokens yet.
    jwt_secret: str = Field(
        default="change-this-secret-in-production", description="JWT signing secret"
    )
    jwt_expiration: int = Field(default=86400, description="JWT lifetime in seconds")

    # ===== Application Limits =====
    max_file_size: int = Field(default=52428800, description="Maximum file size in bytes (50MB)")
    presigned_url_expiry: int = Field(
        default=3600, description="Lifetime of attachment download URLs in seconds"
    )

    # ===== Monitoring & Logging =====
    log_level: LogLevelEnum = Field(default=LogLevelEnum.INFO, description="Logging level")
    log_format: LogFormatEnum = Field(default=LogFormatEnum.json, description="Log format")
    slow_field_threshold_ms: int = Field(
        default=100, description="GraphQL resolvers slower than this are logged"
    )

    @property
    def allowed_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    def is_origin_allowed(self, origin: str) -> bool:
        return origin in self.allowed_origins_list

    # ===== Computed Properties =====
    @property
    def is_development(self) -> bool:
        return self.environment == EnvironmentEnum.development

    @property
    def is_production(self) -> bool:
        return self.environment == EnvironmentEnum.production

    @property
    def is_testing(self) -> bool:
        return self.environment == EnvironmentEnum.testing

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def sanitized_database_url(self) -> str:
        """Database URL with credentials masked, safe for logs."""
        parts = urlsplit(self.database_url)
        if "@" not in parts.netloc:
            return self.database_url
        host = parts.netloc.rsplit("@", 1)[1]
        return self.database_url.replace(parts.netloc, f"***:***@{host}", 1)

    @property
    def minio_url(self) -> str:
        scheme = "https" if self.minio_use_ssl else "http"
        return f"{scheme}://{self.minio_endpoint}"

    @property
    def has_file_storage(self) -> bool:
        return bool(self.minio_access_key and self.minio_secret_key and self.minio_bucket)

    @property
    def max_file_size_mb(self) -> int:
        return self.max_file_size // (1024 * 1024)

    # ===== Validation Methods =====
    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        if v and isinstance(v, str):
            lv = v.lower()
            if lv in ["dev", "develop"]:
                return "development"
            if lv in ["prod"]:
                return "production"
            return lv
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("DATABASE_URL cannot be empty")
        # Plain driver names are upgraded to their async drivers
        if v.startswith("sqlite://") or v.startswith("sqlite:./"):
            return v.replace("sqlite:", "sqlite+aiosqlite:", 1).replace(
                "sqlite+aiosqlite:./", "sqlite+aiosqlite:///./", 1
            )
        if v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql+asyncpg://", 1)
        if v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    @field_validator("max_file_size")
    @classmethod
    def validate_file_size(cls, v):
        if v > 100 * 1024 * 1024:
            raise ValueError("Maximum file size cannot exceed 100MB")
        return v


settings = Settings()


class ConfigValidator:
    @staticmethod
    def validate_required_settings(config: Settings | None = None):
        config = config or settings
        errors = []
        if not config.minio_access_key:
            errors.append("MINIO_ACCESS_KEY is required")
        if not config.minio_secret_key:
            errors.append("MINIO_SECRET_KEY is required")
        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")

    @staticmethod
    def get_feature_status() -> dict:
        return {
            "file_storage": settings.has_file_storage,
            "storage_url": settings.minio_url,
            "environment": settings.environment,
        }


def get_config_summary() -> dict:
    return {
        "app_name": settings.app_name,
        "version": settings.version,
        "environment": settings.environment,
        "debug": settings.debug,
        "features": ConfigValidator.get_feature_status(),
        "database_url": settings.sanitized_database_url,
        "max_file_size_mb": settings.max_file_size_mb,
    }


__all__ = [
    "settings",
    "Settings",
    "ConfigValidator",
    "get_config_summary",
    "EnvironmentEnum",
    "LogLevelEnum",
    "LogFormatEnum",
]
