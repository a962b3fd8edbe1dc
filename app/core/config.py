"""Application configuration"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # API Configuration
    PROJECT_NAME: str = "SiteMarket"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Marketplace for buying and selling websites"

    # Security
    SECRET_KEY: str = Field(...)
    ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "session"
    SESSION_DURATION_DAYS: int = 7
    PASSWORD_RESET_EXPIRE_MINUTES: int = 60
    BCRYPT_ROUNDS: int = 12

    # Database
    DATABASE_URL: str = Field(default="sqlite:///./sitemarket.db")

    # Redis
    REDIS_URL: str = Field(default="redis://localhost:6379")

    # Rate Limiting (inquiries)
    RATE_LIMIT_BACKEND: str = Field(default="memory")  # memory | redis
    INQUIRY_RATE_LIMIT: int = 3
    INQUIRY_RATE_WINDOW_SECONDS: int = 60 * 60

    # Email SMTP Configuration (email is disabled when SMTP_HOST is unset)
    SMTP_HOST: Optional[str] = None
    SMTP_PORT: int = 587
    SMTP_USERNAME: Optional[str] = None
    SMTP_PASSWORD: Optional[str] = None
    SMTP_USE_TLS: bool = True
    FROM_EMAIL: str = "noreply@example.com"
    FROM_NAME: str = "SiteMarket"

    # MinIO File Storage (uploads are disabled until credentials are set)
    MINIO_ENDPOINT: str = "localhost:9000"
    MINIO_ACCESS_KEY: Optional[str] = None
    MINIO_SECRET_KEY: Optional[str] = None
    MINIO_BUCKET_NAME: Optional[str] = None
    MINIO_SECURE: bool = False

    # CORS
    ALLOWED_HOSTS: list[str] = Field(default=["http://localhost:3000"])

    # Application URLs
    FRONTEND_URL: str = "http://localhost:3000"

    # File Processing
    MAX_UPLOAD_SIZE: int = 5 * 1024 * 1024  # 5MB
    ALLOWED_IMAGE_TYPES: list[str] = Field(
        default=["image/jpeg", "image/png", "image/webp", "image/gif"]
    )
    MAX_LISTING_IMAGES: int = 6

    # Listing generator
    FETCH_TIMEOUT_SECONDS: float = 8.0
    FETCH_MAX_BYTES: int = 100_000
    FETCH_USER_AGENT: str = "Mozilla/5.0 (compatible; ListingBot/1.0)"

    # Development
    DEBUG: bool = False
    TESTING: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    @property
    def storage_enabled(self) -> bool:
        return bool(self.MINIO_ACCESS_KEY and self.MINIO_SECRET_KEY and self.MINIO_BUCKET_NAME)

    @property
    def secure_cookies(self) -> bool:
        return self.ENVIRONMENT == "production"


settings = Settings()
