"""Fixtures de pytest compartidas por todos los tests."""

import os

# La aplicación lee su configuración al importarse
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")
os.environ.setdefault("APP_ENVIRONMENT", "development")

import httpx
import pytest

from app.api import deps
from app.crud.category_repository import SQLAlchemyCategoryRepository
from app.db.database import build_engine, build_session_factory, init_models
from app.main import app
from app.services.category_service import CategoryService


@pytest.fixture
async def db_engine(tmp_path):
    """Crea una base de datos SQLite en fichero con el esquema aplicado.

    Yields:
        AsyncEngine: Motor ligado a una base de datos nueva en cada test.
    """
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'categories.db'}")
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return build_session_factory(db_engine)


@pytest.fixture
def repository(session_factory):
    return SQLAlchemyCategoryRepository(session_factory)


@pytest.fixture
def category_service(repository):
    """CategoryService sobre la base de datos de test."""
    return CategoryService(repository)


@pytest.fixture
async def client(category_service):
    """Cliente HTTP contra la app FastAPI con el servicio de test inyectado.

    Yields:
        httpx.AsyncClient: Cliente con URL base http://test.
    """
    app.dependency_overrides[deps.get_category_service] = lambda: category_service
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()
