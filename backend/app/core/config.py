# backend/app/core/config.py
"""
Este archivo contiene la configuración de la aplicación.
"""

from pydantic_settings import BaseSettings
from typing import List, Optional
from pathlib import Path
import os

# Apunta al directorio 'backend/'
BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    """
    Configuración de la aplicación usando Pydantic BaseSettings.
    Variables sensibles desde .env, defaults seguros para el resto.
    """
    # Configuración general del proyecto
    BASE_DIR: Path = BASE_DIR
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Category Tree API"
    PROJECT_VERSION: str = "0.1.0"

    # Configuración de la base de datos
    POSTGRES_SERVER: str = os.getenv("POSTGRES_SERVER", "postgres")
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "user")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "password")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "category_tree_db")
    POSTGRES_PORT: str = os.getenv("POSTGRES_PORT", "5432")

    # Permite apuntar a otro motor asíncrono (p. ej. sqlite+aiosqlite en tests)
    DATABASE_URL_OVERRIDE: Optional[str] = None
    CREATE_TABLES_ON_STARTUP: bool = True

    @property
    def DATABASE_URL(self) -> str:
        """URL de conexión a la base de datos asíncrona."""
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # CORS - el frontend de administración se sirve desde otro origen
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    # Logging - Defaults seguros
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_FILE_PATH: Optional[str] = None

    # App Info - Del .env con defaults
    APP_ENVIRONMENT: str = "development"

    # Server - Del .env con defaults
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    @property
    def is_development(self) -> bool:
        """En desarrollo los errores 500 exponen el mensaje original."""
        return self.APP_ENVIRONMENT.lower() == "development"

    class Config:
        env_file = ".env"
        case_sensitive = False

# Instancia global de la configuración
settings = Settings()
