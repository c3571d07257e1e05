# backend/app/crud/category_repository.py

"""
Repositorio de categorías.

``CategoryRepository`` es la interfaz que consume CategoryService. La
implementación SQLAlchemy se construye una vez al arrancar la aplicación
con una fábrica de sesiones y abre una sesión propia por operación,
delegando en las funciones de category_crud.
"""

import abc
from typing import List, Optional

from sqlalchemy.ext.asyncio import async_sessionmaker

from app.crud import category_crud
from app.db.models.category_model import Category


class CategoryRepository(abc.ABC):
    """Operaciones de persistencia que necesita el servicio de categorías."""

    @abc.abstractmethod
    async def get_by_id(self, category_id: str) -> Optional[Category]:
        ...

    @abc.abstractmethod
    async def get_by_path(self, path: str) -> Optional[Category]:
        ...

    @abc.abstractmethod
    async def list_sorted_by_path(self, is_active: Optional[bool] = None) -> List[Category]:
        ...

    @abc.abstractmethod
    async def add(self, **fields) -> Category:
        ...

    @abc.abstractmethod
    async def update(self, category_id: str, changes: dict) -> Optional[Category]:
        ...

    @abc.abstractmethod
    async def delete_subtree(self, path: str) -> int:
        ...


class SQLAlchemyCategoryRepository(CategoryRepository):
    """Repositorio sobre SQLAlchemy asíncrono."""

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory

    async def get_by_id(self, category_id: str) -> Optional[Category]:
        async with self._session_factory() as db:
            return await category_crud.get_category(db, category_id=category_id)

    async def get_by_path(self, path: str) -> Optional[Category]:
        async with self._session_factory() as db:
            return await category_crud.get_category_by_path(db, path=path)

    async def list_sorted_by_path(self, is_active: Optional[bool] = None) -> List[Category]:
        async with self._session_factory() as db:
            return await category_crud.get_categories_by_path(db, is_active=is_active)

    async def add(self, **fields) -> Category:
        async with self._session_factory() as db:
            return await category_crud.create_category(db, **fields)

    async def update(self, category_id: str, changes: dict) -> Optional[Category]:
        async with self._session_factory() as db:
            return await category_crud.update_category(db, category_id=category_id, changes=changes)

    async def delete_subtree(self, path: str) -> int:
        async with self._session_factory() as db:
            return await category_crud.delete_category_subtree(db, path=path)
