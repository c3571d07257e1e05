# backend/app/crud/category_crud.py

"""
Operaciones CRUD para el modelo Category.

Este módulo implementa las operaciones de Create, Read, Update, Delete para
categorías sobre una ``AsyncSession``. No contiene reglas de negocio: el
cálculo de rutas y la validación viven en la capa de servicios.

Funcionalidades principales:
- Consultas por ID y por ruta materializada
- Listado completo ordenado por ruta (base para construir el árbol)
- Actualización parcial de campos
- Borrado en cascada de un subárbol por prefijo de ruta
"""

from typing import List, Optional
from sqlalchemy import select, delete, or_
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.category_model import Category
from app.services.category_tree import PATH_SEPARATOR

# ========================================
# OPERACIONES DE LECTURA (READ)
# ========================================

async def get_category(db: AsyncSession, category_id: str) -> Optional[Category]:
    """
    Obtiene una categoría por su ID.

    Args:
        db: Sesión de SQLAlchemy
        category_id: ID único de la categoría

    Returns:
        Objeto Category si existe, None si no se encuentra
    """
    result = await db.execute(select(Category).filter(Category.id == category_id))
    return result.scalars().first()


async def get_category_by_path(db: AsyncSession, path: str) -> Optional[Category]:
    """
    Obtiene una categoría por su ruta materializada.

    Si hubiera rutas duplicadas devuelve la primera creada.
    """
    query = select(Category).filter(Category.path == path).order_by(Category.created_at)
    result = await db.execute(query)
    return result.scalars().first()


def categories_by_path_query(is_active: Optional[bool] = None, dialect_name: str = ""):
    """
    Consulta de todas las categorías ordenadas por ``path`` byte a byte.

    En PostgreSQL se fuerza la collation "C": con una collation de locale
    (p. ej. en_US.utf8) "_" y los dígitos no siguen el orden de bytes.
    SQLite ya compara byte a byte y no conoce la collation "C".
    """
    path_order = Category.path
    if dialect_name == "postgresql":
        path_order = Category.path.collate("C")

    query = select(Category)
    if is_active is not None:
        query = query.filter(Category.is_active == is_active)
    return query.order_by(path_order, Category.created_at)


async def get_categories_by_path(db: AsyncSession, is_active: Optional[bool] = None) -> List[Category]:
    """
    Obtiene todas las categorías ordenadas por ``path`` ascendente.

    El orden garantiza que la ruta de un padre precede a la de sus
    descendientes, que es lo que espera build_category_tree.

    Args:
        db: Sesión de SQLAlchemy
        is_active: Filtra por estado si se indica; None devuelve todas
    """
    query = categories_by_path_query(is_active=is_active, dialect_name=db.bind.dialect.name)
    result = await db.execute(query)
    return list(result.scalars().all())


# ========================================
# OPERACIONES DE ESCRITURA (CREATE, UPDATE, DELETE)
# ========================================

async def create_category(db: AsyncSession, **fields) -> Category:
    """
    Crea una nueva categoría con los campos ya calculados (path, level...).

    Returns:
        Objeto Category recién creado y persistido
    """
    db_category = Category(**fields)
    db.add(db_category)
    await db.commit()  # Persiste en la base de datos
    await db.refresh(db_category)  # Recarga el objeto con datos actualizados de la BD
    return db_category


async def update_category(db: AsyncSession, category_id: str, changes: dict) -> Optional[Category]:
    """
    Actualiza solo los campos indicados en ``changes``.

    Returns:
        Objeto Category actualizado, o None si no existe
    """
    db_category = await get_category(db, category_id=category_id)
    if not db_category:
        return None

    for key, value in changes.items():
        setattr(db_category, key, value)

    db.add(db_category)  # Marca el objeto como modificado
    await db.commit()  # Persiste los cambios
    await db.refresh(db_category)  # Recarga datos actualizados
    return db_category


async def delete_category_subtree(db: AsyncSession, path: str) -> int:
    """
    Elimina la categoría con ``path`` y todas sus descendientes.

    Una descendiente es cualquier categoría cuya ruta empieza por
    ``path + "."``. Los comodines de LIKE ("_" aparece en las etiquetas)
    se escapan con autoescape.

    Returns:
        Número de filas eliminadas
    """
    statement = (
        delete(Category)
        .where(
            or_(
                Category.path == path,
                Category.path.startswith(f"{path}{PATH_SEPARATOR}", autoescape=True),
            )
        )
        .execution_options(synchronize_session=False)
    )
    result = await db.execute(statement)
    await db.commit()
    return result.rowcount
