from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = ConfigDict(env_file=".env", case_sensitive=True)

    DATABASE_URL: str
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Connection pool sizing (ignored for SQLite URLs)
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    # Photo uploads are written below this directory
    UPLOAD_DIR: str = "public/uploads"
    # Public path photos are served under; stored in ``file_path``
    UPLOAD_URL_PREFIX: str = "/uploads"
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024  # 10 MB

    # slowapi limit string applied to create endpoints
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_CREATE: str = "30/minute"

    # CORS configuration, comma-separated origins
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"


settings = Settings()
