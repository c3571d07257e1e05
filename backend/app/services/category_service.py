# backend/app/services/category_service.py
"""
Servicio para operaciones de negocio relacionadas con categorías.

Este servicio gestiona la jerarquía de categorías representada como rutas
materializadas: cálculo de path/level al crear, ensamblado del árbol,
actualización parcial y borrado en cascada de subárboles.

Los fallos se señalan con CategoryError; la traducción a códigos HTTP
es responsabilidad de la capa API.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import CategoryError
from app.crud.category_repository import CategoryRepository
from app.db.models.category_model import Category
from app.schemas import category_schema
from app.services.category_tree import build_category_tree, generate_path_label, join_path

logger = logging.getLogger(__name__)


class CategoryService:
    """
    Servicio para operaciones de negocio relacionadas con categorías.

    Recibe el repositorio en el constructor; la aplicación crea una única
    instancia al arrancar y la inyecta en los endpoints.

    Características:
    - Rutas derivadas del nombre, inmutables tras la creación
    - Árbol reconstruido en cada consulta a partir de los registros actuales
    - Borrado en cascada por prefijo de ruta
    """

    def __init__(self, repository: CategoryRepository):
        self.repository = repository

    # ========================================
    # OPERACIONES DE CONSULTA
    # ========================================

    async def get_all_categories_tree(self, is_active: Optional[bool] = None) -> List[category_schema.CategoryNode]:
        """
        Obtiene todas las categorías como árbol.

        Args:
            is_active: Filtro por estado. Si no se indica, solo se
                devuelven las categorías activas.

        Returns:
            Lista de categorías raíz con sus hijas anidadas, ordenadas por path
        """
        if is_active is None:
            is_active = True

        try:
            categories = await self.repository.list_sorted_by_path(is_active=is_active)
        except SQLAlchemyError as e:
            logger.exception("❌ ERROR: No se pudieron leer las categorías")
            raise CategoryError.persistence("Failed to fetch categories", detail=str(e)) from e

        tree = build_category_tree(categories)
        if tree.orphans:
            logger.warning(
                f"⚠️ CATEGORÍAS: {len(tree.orphans)} categorías sin padre omitidas del árbol: "
                f"{', '.join(orphan.path for orphan in tree.orphans)}"
            )
        return tree.roots

    async def get_category_by_id(self, category_id: str) -> Optional[Category]:
        """
        Obtiene una categoría por su ID.

        Returns:
            Objeto Category si existe, None si no se encuentra
        """
        try:
            return await self.repository.get_by_id(category_id)
        except SQLAlchemyError as e:
            logger.exception(f"❌ ERROR: No se pudo leer la categoría '{category_id}'")
            raise CategoryError.persistence("Failed to fetch category", detail=str(e)) from e

    # ========================================
    # OPERACIONES DE ESCRITURA CON LÓGICA DE NEGOCIO
    # ========================================

    async def create_category(self, category_in: category_schema.CategoryCreate) -> Category:
        """
        Crea una nueva categoría, raíz o hija.

        La ruta es la etiqueta derivada del nombre, añadida a la ruta del
        padre si se indica ``parent_path``. El nivel es el del padre + 1.

        Raises:
            CategoryError(VALIDATION): nombre ausente o sin letras/dígitos
            CategoryError(PARENT_NOT_FOUND): parent_path no existe
        """
        if not category_in.name:
            raise CategoryError.validation("Category name is required")

        label = generate_path_label(category_in.name)
        if not label:
            raise CategoryError.validation("Category name must contain at least one letter or digit")

        try:
            if category_in.parent_path:
                parent = await self.repository.get_by_path(category_in.parent_path)
                if not parent:
                    logger.info(f"🔍 CATEGORÍA: Padre '{category_in.parent_path}' no encontrado")
                    raise CategoryError.parent_not_found()
                path = join_path(parent.path, label)
                level = parent.level + 1
            else:
                path = label
                level = 1

            category = await self.repository.add(
                name=category_in.name,
                path=path,
                level=level,
                description=category_in.description,
                icon=category_in.icon,
                color=category_in.color,
            )
        except SQLAlchemyError as e:
            logger.exception(f"❌ ERROR: No se pudo crear la categoría '{category_in.name}'")
            raise CategoryError.persistence("Failed to create category", detail=str(e)) from e

        logger.info(f"✅ CATEGORÍA: Creada '{category.path}' (nivel {category.level})")
        return category

    async def update_category(self, category_id: str, category_in: category_schema.CategoryUpdate) -> Category:
        """
        Actualiza los campos indicados de una categoría.

        ``path`` y ``level`` no se recalculan aunque cambie el nombre.

        Raises:
            CategoryError(VALIDATION): no hay campos que actualizar
            CategoryError(NOT_FOUND): el id no existe
        """
        changes = category_in.changes()
        if not changes:
            raise CategoryError.validation("No update data provided")

        try:
            category = await self.repository.update(category_id, changes)
        except SQLAlchemyError as e:
            logger.exception(f"❌ ERROR: No se pudo actualizar la categoría '{category_id}'")
            raise CategoryError.persistence("Failed to update category", detail=str(e)) from e

        if not category:
            raise CategoryError.not_found()

        logger.info(f"🔄 CATEGORÍA: Actualizada '{category.path}' ({', '.join(sorted(changes))})")
        return category

    async def delete_category(self, category_id: str) -> category_schema.CategoryDeleteResponse:
        """
        Elimina una categoría y todo su subárbol.

        Returns:
            Número de categorías eliminadas y un mensaje resumen

        Raises:
            CategoryError(NOT_FOUND): el id no existe
        """
        try:
            category = await self.repository.get_by_id(category_id)
            if not category:
                raise CategoryError.not_found()
            deleted_count = await self.repository.delete_subtree(category.path)
        except SQLAlchemyError as e:
            logger.exception(f"❌ ERROR: No se pudo eliminar la categoría '{category_id}'")
            raise CategoryError.persistence("Failed to delete category", detail=str(e)) from e

        logger.info(f"🗑️ CATEGORÍA: Eliminada '{category.path}' y {deleted_count - 1} subcategorías")
        return category_schema.CategoryDeleteResponse(
            deleted_count=deleted_count,
            message=f"Category and {deleted_count - 1} subcategories deleted successfully",
        )
