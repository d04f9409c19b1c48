# app/config/settings.py
# Runtime configuration for the API, read from the environment

import os
from typing import List
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings"""

    # Database
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./task_management.db")
    DATABASE_SSLMODE = os.getenv("DATABASE_SSLMODE")  # e.g. "require" on Render

    # JWT
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-me")
    ALGORITHM = os.getenv("ALGORITHM", "HS256")
    JWT_ISSUER = os.getenv("JWT_ISSUER", "TaskManagement.API")
    JWT_AUDIENCE = os.getenv("JWT_AUDIENCE", "TaskManagement.Client")
    ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24))

    # HTTP
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8000"))
    RELOAD = os.getenv("RELOAD", "true").lower() == "true"

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    @classmethod
    def get_cors_origins(cls) -> List[str]:
        """Split the comma separated CORS_ORIGINS value"""
        return [origin.strip() for origin in cls.CORS_ORIGINS.split(",") if origin.strip()]

    @classmethod
    def is_sqlite(cls) -> bool:
        return cls.DATABASE_URL.startswith("sqlite")


settings = Settings()
