# backend/app/main.py
"""
Punto de entrada principal de la aplicación FastAPI.

Este módulo configura y inicializa la aplicación FastAPI completa,
incluyendo la configuración de rutas, middleware, manejo de errores,
documentación automática y eventos del ciclo de vida de la aplicación.

Características principales:
- Configuración centralizada de la aplicación
- Servicio de categorías construido una vez e inyectado en los endpoints
- Registro de routers de la API con prefijos
- Log de acceso por petición
- Eventos del ciclo de vida de la aplicación (startup/shutdown)
"""

import logging
import time
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings  # Configuración centralizada de la aplicación
from app.core.logging_config import setup_logging
from app.api.api_router import api_router  # Router principal de la API
from app.api.errors import register_exception_handlers, unhandled_error_handler
from app.crud.category_repository import SQLAlchemyCategoryRepository
from app.db.database import AsyncSessionLocal, engine, init_models
from app.services.category_service import CategoryService

setup_logging(settings)
logger = logging.getLogger(__name__)

# ========================================
# CONFIGURACIÓN DE LA APLICACIÓN FASTAPI
# ========================================

app = FastAPI(
    title=settings.PROJECT_NAME,  # Nombre del proyecto desde configuración
    openapi_url=f"{settings.API_PREFIX}/openapi.json",  # URL del schema OpenAPI personalizada
    version=settings.PROJECT_VERSION,  # Versión del proyecto desde configuración
    description="API para la gestión del árbol de categorías del catálogo"
)

# Servicio único para toda la aplicación
app.state.category_service = CategoryService(SQLAlchemyCategoryRepository(AsyncSessionLocal))

# ========================================
# MIDDLEWARE
# ========================================

# Se registra antes que CORS para que CORS quede por fuera y también
# añada sus cabeceras a las respuestas 500.
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Registra método, ruta, código de estado y duración de cada petición."""
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as exc:
        response = await unhandled_error_handler(request, exc)
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(f"{request.method} {request.url.path} {response.status_code} {duration_ms:.1f} ms")
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


register_exception_handlers(app)

# ========================================
# REGISTRO DE ROUTERS DE LA API
# ========================================

# El prefijo se obtiene de settings (típicamente "/api")
app.include_router(api_router, prefix=settings.API_PREFIX)


# ========================================
# ENDPOINTS RAÍZ Y VERIFICACIÓN DE ESTADO
# ========================================

@app.get("/", tags=["Root"])
async def read_root():
    """
    Endpoint raíz con mensaje de bienvenida.

    Example:
        GET /
        Response: {"message": "Bienvenido a Category Tree API v0.1.0"}
    """
    return {"message": f"Bienvenido a {settings.PROJECT_NAME} v{settings.PROJECT_VERSION}"}


@app.get("/health", tags=["Root"])
async def health_check():
    """Liveness probe: confirma que el proceso atiende peticiones."""
    return {
        "status": "ok",
        "message": "Server is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

# ========================================
# EVENTOS DEL CICLO DE VIDA DE LA APLICACIÓN
# ========================================

@app.on_event("startup")
async def startup_event():
    """
    Evento ejecutado al iniciar la aplicación.

    Crea las tablas si CREATE_TABLES_ON_STARTUP está activo. Un fallo
    aquí detiene el arranque.
    """
    if settings.CREATE_TABLES_ON_STARTUP:
        await init_models(engine)
        logger.info("✅ Tablas de categorías verificadas")
    logger.info(f"🚀 {settings.PROJECT_NAME} v{settings.PROJECT_VERSION} iniciada ({settings.APP_ENVIRONMENT})")


@app.on_event("shutdown")
async def shutdown_event():
    """Cierra el pool de conexiones de la base de datos."""
    await engine.dispose()
    logger.info("👋 Conexiones a la base de datos cerradas")


if __name__ == "__main__":
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
