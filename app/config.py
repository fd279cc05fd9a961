from pydantic_settings import BaseSettings
from fastapi import Request
from typing import List, Optional
from urllib.parse import quote_plus


class Settings(BaseSettings):
    """Application settings loaded from environment variables with development defaults"""

    # Server
    PORT: int = 8080
    ENV: str = "development"
    LOG_LEVEL: Optional[str] = None
    API_VERSION: str = "1.0.7"

    # JWT Configuration
    JWT_SECRET: str = "default-secret-key"
    JWT_ALGORITHM: str = "HS256"
    JWT_ISSUER: str = "api-iras"
    ACCESS_TOKEN_EXPIRE_HOURS: int = 24

    # Database - DATABASE_URL wins over the DB_* parts when set
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "password"
    DB_NAME: str = "api_iras"
    DB_SSLMODE: str = "disable"
    DATABASE_URL: Optional[str] = None

    # IRAS sandbox credentials, only used to fill missing headers in development
    IBM_CLIENT_ID: str = "demo-ibm-client-id"
    IBM_CLIENT_SECRET: str = "demo-ibm-client-secret"
    DEMO_ACCESS_TOKEN: str = "demo_access_token_123456"

    # CORS
    ALLOWED_ORIGINS: str = "*"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def is_development(self) -> bool:
        return self.ENV.lower() == "development"

    @property
    def database_url(self) -> str:
        """Connection URL built from DB_* unless DATABASE_URL is given"""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASSWORD)}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}?sslmode={self.DB_SSLMODE}"
        )

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]

    @property
    def log_level(self) -> str:
        if self.LOG_LEVEL:
            return self.LOG_LEVEL.upper()
        return "INFO" if self.is_development else "WARNING"


def get_settings(request: Request) -> Settings:
    """Dependency returning the settings instance the app was built with"""
    return request.app.state.settings
