# =============================================
# certifica/config/settings.py
# =============================================
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from typing import List, Optional
from functools import lru_cache

class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =============================================
    # APP CONFIGURATION
    # =============================================
    APP_NAME: str = Field(default="CertificaFacil API", description="Application name")
    VERSION: str = Field(default="1.0.0", description="Application version")
    DEBUG: bool = Field(default=False, description="Debug mode")

    # =============================================
    # DATABASE CONFIGURATION
    # =============================================
    DATABASE_URL: str = Field(..., description="Async database URL")
    DATABASE_URL_SYNC: Optional[str] = Field(default=None, description="Sync database URL for migrations")
    AUTO_CREATE_TABLES: bool = Field(default=False, description="Create tables on startup instead of relying on Alembic")

    @field_validator('DATABASE_URL')
    @classmethod
    def validate_database_url(cls, v):
        if not v.startswith(('postgresql+asyncpg://', 'postgresql://', 'sqlite+aiosqlite://')):
            raise ValueError('DATABASE_URL must be a PostgreSQL (asyncpg) or SQLite (aiosqlite) URL')
        return v

    # =============================================
    # SECURITY CONFIGURATION
    # =============================================
    SECRET_KEY: str = Field(..., description="Secret key for JWT tokens")
    ALGORITHM: str = Field(default="HS256", description="JWT algorithm")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=480, description="Access token expiration in minutes")

    DEFAULT_ADMIN_USERNAME: str = Field(default="admin", description="Username seeded when no admin exists")
    DEFAULT_ADMIN_PASSWORD: Optional[str] = Field(default=None, description="Password seeded (hashed) when no admin exists")

    @field_validator('SECRET_KEY')
    @classmethod
    def validate_secret_key(cls, v):
        if len(v) < 32:
            raise ValueError('SECRET_KEY must be at least 32 characters long')
        return v

    # =============================================
    # CORS CONFIGURATION
    # =============================================
    ALLOWED_HOSTS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173", "http://localhost:8000"],
        description="Allowed hosts for CORS"
    )

    # =============================================
    # CERTIFICATE CONFIGURATION
    # =============================================
    PUBLIC_VERIFY_BASE_URL: str = Field(
        default="http://localhost:5173/verificar",
        description="Public page that verifies a certificate from its ?verify= parameter"
    )
    QR_CODE_ENDPOINT: str = Field(
        default="https://api.qrserver.com/v1/create-qr-code/",
        description="Third-party QR image generator"
    )
    QR_CODE_SIZE: int = Field(default=150, ge=50, le=1000, description="QR image size in pixels")
    CERTIFICATE_ISSUE_PLACE: str = Field(default="Bauru/SP", description="Place printed next to the issue date")
    VERIFICATION_CODE_MAX_ATTEMPTS: int = Field(
        default=5, ge=1, le=50,
        description="Attempts to draw a verification code not already in use"
    )

    @field_validator('PUBLIC_VERIFY_BASE_URL', 'QR_CODE_ENDPOINT')
    @classmethod
    def validate_http_url(cls, v):
        if not v.startswith(('http://', 'https://')):
            raise ValueError('URL must start with http:// or https://')
        return v

    # =============================================
    # LOGGING CONFIGURATION
    # =============================================
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format"
    )

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'LOG_LEVEL must be one of: {valid_levels}')
        return v.upper()

    # =============================================
    # ENVIRONMENT CONFIGURATION
    # =============================================
    ENVIRONMENT: str = Field(default="development", description="Environment name")

    @field_validator('ENVIRONMENT')
    @classmethod
    def validate_environment(cls, v):
        valid_envs = ['development', 'testing', 'staging', 'production']
        if v not in valid_envs:
            raise ValueError(f'ENVIRONMENT must be one of: {valid_envs}')
        return v

    # =============================================
    # COMPUTED PROPERTIES
    # =============================================

    @property
    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.ENVIRONMENT == "production"

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    def get_database_url(self, async_driver: bool = True) -> str:
        """Get database URL with appropriate driver"""
        if async_driver or not self.DATABASE_URL_SYNC:
            return self.DATABASE_URL
        return self.DATABASE_URL_SYNC

# =============================================
# SETTINGS INSTANCE
# =============================================
@lru_cache()
def get_settings() -> Settings:
    """Get settings instance (cached)"""
    return Settings()

# =============================================
# ENVIRONMENT VALIDATION
# =============================================
def validate_environment():
    """Validate environment configuration"""
    current_settings = get_settings()

    errors = []

    if current_settings.is_production:
        if current_settings.DEBUG:
            errors.append("DEBUG must be False in production")

        if any("localhost" in host for host in current_settings.ALLOWED_HOSTS):
            errors.append("ALLOWED_HOSTS should not include localhost in production")

        if len(current_settings.SECRET_KEY) < 64:
            errors.append("SECRET_KEY should be at least 64 characters in production")

        if current_settings.is_sqlite:
            errors.append("SQLite is not supported in production")

    if errors:
        raise ValueError("Environment validation failed:\n" + "\n".join(f"- {error}" for error in errors))

    return True
