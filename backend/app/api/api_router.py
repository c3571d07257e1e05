# backend/app/api/api_router.py
"""
Este archivo contiene el router principal de la API.

Se encarga de registrar y configurar los routers de cada dominio.
"""

from fastapi import APIRouter

# Importación de routers especializados por dominio de negocio
from app.api.endpoints import categories

# ========================================
# CONFIGURACIÓN DEL ROUTER PRINCIPAL
# ========================================

# Contenedor de todos los sub-routers; se monta con settings.API_PREFIX
api_router = APIRouter()

# ========================================
# REGISTRO DE ROUTERS POR DOMINIO DE NEGOCIO
# ========================================

# ROUTER DE CATEGORÍAS
# Maneja las operaciones CRUD y el árbol de categorías
api_router.include_router(
    categories.router,              # Router con endpoints de categorías
    prefix="/categories",           # Prefijo: /api/categories
    tags=["Categories"]             # Tag para documentación OpenAPI/Swagger
)
