from pydantic_settings import BaseSettings
from typing import List
import os


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "VipClinic API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    TESTING: bool = os.getenv("TESTING", "0").lower() in ("1", "true", "t", "yes", "y")
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Database
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "postgresql://localhost:5432/vipclinic"
    )
    TEST_DATABASE_URL: str = os.getenv(
        "TEST_DATABASE_URL",
        "sqlite:///./test.db"
    )
    # libpq sslmode; "require" encrypts without verifying the server certificate
    DATABASE_SSL_MODE: str = "require"

    # Connection pool
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 0
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 1800

    # CORS
    ALLOWED_ORIGINS: List[str] = ["*"]

    @property
    def get_database_url(self) -> str:
        """Return the database URL in effect, normalising the postgres:// scheme."""
        url = self.TEST_DATABASE_URL if self.TESTING else self.DATABASE_URL
        if url.startswith("postgres://"):
            url = "postgresql://" + url[len("postgres://"):]
        return url

    class Config:
        env_file = ".env"
        case_sensitive = True


# Create settings instance
settings = Settings()
