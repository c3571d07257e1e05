"""
Endpoints REST para la gestión del árbol de categorías.
"""

from fastapi import APIRouter, Depends, Query, status
from typing import Optional
import logging

from app.api import deps
from app.core.exceptions import CategoryError
from app.schemas import category_schema
from app.services.category_service import CategoryService

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=category_schema.CategoryTreeResponse)
async def read_categories(
    service: CategoryService = Depends(deps.get_category_service),
    is_active: Optional[bool] = Query(default=None, alias="isActive"),
) -> category_schema.CategoryTreeResponse:
    """Obtiene todas las categorías en forma de árbol. Por defecto solo las activas."""
    tree = await service.get_all_categories_tree(is_active=is_active)
    return category_schema.CategoryTreeResponse(count=len(tree), data=tree)


@router.get("/{category_id}", response_model=category_schema.CategoryDetailResponse)
async def read_category(
    *,
    service: CategoryService = Depends(deps.get_category_service),
    category_id: str,
) -> category_schema.CategoryDetailResponse:
    """Obtiene los detalles de una categoría específica por su ID."""
    category = await service.get_category_by_id(category_id)
    if not category:
        raise CategoryError.not_found()
    return category_schema.CategoryDetailResponse(data=category_schema.CategoryResponse.model_validate(category))


@router.post("", response_model=category_schema.CategoryDetailResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    *,
    service: CategoryService = Depends(deps.get_category_service),
    category_in: category_schema.CategoryCreate,
) -> category_schema.CategoryDetailResponse:
    """Crea una nueva categoría, raíz o bajo ``parentPath``."""
    if not category_in.name:
        raise CategoryError.validation("Category name is required")

    logger.info(f"🆕 CATEGORÍA: Creando '{category_in.name}' bajo '{category_in.parent_path or '(raíz)'}'")
    category = await service.create_category(category_in)
    return category_schema.CategoryDetailResponse(data=category_schema.CategoryResponse.model_validate(category))


@router.put("/{category_id}", response_model=category_schema.CategoryDetailResponse)
async def update_category(
    *,
    service: CategoryService = Depends(deps.get_category_service),
    category_id: str,
    category_in: category_schema.CategoryUpdate,
) -> category_schema.CategoryDetailResponse:
    """Actualiza nombre, descripción, icono, color o estado de una categoría."""
    category = await service.update_category(category_id, category_in)
    return category_schema.CategoryDetailResponse(data=category_schema.CategoryResponse.model_validate(category))


@router.delete("/{category_id}", response_model=category_schema.CategoryDeleteResponse)
async def delete_category(
    *,
    service: CategoryService = Depends(deps.get_category_service),
    category_id: str,
) -> category_schema.CategoryDeleteResponse:
    """Elimina una categoría y todas sus subcategorías."""
    return await service.delete_category(category_id)
