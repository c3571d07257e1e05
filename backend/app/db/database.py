# backend/app/db/database.py

"""
Configuración principal de la base de datos para la aplicación.

Este módulo establece la conexión con la base de datos usando SQLAlchemy
asíncrono y define los componentes básicos que serán utilizados por toda
la aplicación:
- Motor de base de datos (engine)
- Fábrica de sesiones (AsyncSessionLocal)
- Clase base para modelos (Base)
- Creación del esquema (init_models)
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import declarative_base
from app.core.config import settings # Importamos nuestra configuración


def build_engine(database_url: str) -> AsyncEngine:
    """Crea un motor asíncrono para la URL indicada."""
    return create_async_engine(database_url, pool_pre_ping=True)


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    """
    Crea un sessionmaker asíncrono ligado al motor.

    expire_on_commit=False es importante para que los objetos sigan siendo
    utilizables después de que la transacción se haya confirmado.
    """
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


# Motor y fábrica de sesiones de la aplicación
engine = build_engine(settings.DATABASE_URL)
AsyncSessionLocal = build_session_factory(engine)

# Clase base declarativa para todos los modelos ORM
Base = declarative_base()


async def init_models(bind: AsyncEngine) -> None:
    """
    Crea las tablas que aún no existen.

    Importa los modelos para que queden registrados en ``Base.metadata``
    antes de ejecutar ``create_all``.
    """
    from app.db.models import category_model  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

