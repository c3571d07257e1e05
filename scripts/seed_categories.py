# scripts/seed_categories.py

"""
Script de carga inicial del árbol de categorías.

Propósito:
Crea la jerarquía de ejemplo del catálogo de moda (Women / Men con sus
subcategorías) usando CategoryService, de modo que las rutas y niveles se
calculan exactamente igual que al crearlas desde la API.

Flujo de Operaciones:
1.  Crea las tablas si no existen.
2.  Borra las categorías existentes (salvo con --keep-existing).
3.  Recorre SEED_TREE en profundidad creando cada categoría bajo su padre.

Requisitos Previos:
-   Un archivo `.env` configurado (o DATABASE_URL_OVERRIDE).
"""
import argparse
import asyncio
import logging
import os
import sys

from sqlalchemy import delete

# Añadir el directorio del backend al PYTHONPATH
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "backend"))
sys.path.insert(0, project_root)

from app.core.config import settings
from app.core.logging_config import setup_logging
from app.crud.category_repository import SQLAlchemyCategoryRepository
from app.db.database import build_engine, build_session_factory, init_models
from app.db.models.category_model import Category
from app.schemas.category_schema import CategoryCreate
from app.services.category_service import CategoryService

logger = logging.getLogger("seed_categories")

# (nombre, descripción, hijas)
SEED_TREE = [
    ("Women", "", [
        ("Clothing", "Women's clothing items", [
            ("Dresses", "Women's dresses collection", [
                ("Casual Dresses", "Casual dresses for everyday wear", []),
                ("Party Dresses", "Elegant dresses for special occasions", []),
            ]),
        ]),
        ("T-Shirts", "Women's t-shirts collection", [
            ("Printed T-shirts", "T-shirts with printed designs", []),
            ("Casual T-Shirts", "Comfortable t-shirts for everyday wear", []),
            ("Plain T-Shirts", "Simple, solid-colored t-shirts", []),
        ]),
    ]),
    ("Men", "", [
        ("Footwear", "Men's footwear collection", [
            ("Branded", "Premium branded footwear", []),
            ("Non Branded", "Affordable non-branded footwear", []),
        ]),
        ("T-Shirts", "Men's t-shirts collection", [
            ("Printed T-shirts", "T-shirts with printed designs", []),
            ("Casual T-Shirts", "Comfortable t-shirts for everyday wear", []),
            ("Plain T-Shirts", "Simple, solid-colored t-shirts", []),
        ]),
        ("Shirts", "Men's shirts collection", [
            ("Party Shirts", "Stylish shirts for parties and events", []),
            ("Casual Shirts", "Comfortable shirts for everyday wear", []),
            ("Plain Shirts", "Simple, solid-colored shirts", []),
        ]),
    ]),
]


async def seed_tree(service: CategoryService, nodes, parent_path=None) -> int:
    """Crea ``nodes`` y su descendencia bajo ``parent_path``. Devuelve cuántas creó."""
    created = 0
    for name, description, children in nodes:
        category = await service.create_category(
            CategoryCreate(name=name, parent_path=parent_path, description=description)
        )
        created += 1
        created += await seed_tree(service, children, parent_path=category.path)
    return created


async def main(keep_existing: bool) -> None:
    engine = build_engine(settings.DATABASE_URL)
    session_factory = build_session_factory(engine)
    try:
        await init_models(engine)

        if not keep_existing:
            async with session_factory() as db:
                result = await db.execute(delete(Category))
                await db.commit()
            logger.info(f"🧹 Eliminadas {result.rowcount} categorías existentes")

        service = CategoryService(SQLAlchemyCategoryRepository(session_factory))
        created = await seed_tree(service, SEED_TREE)
        logger.info(f"✅ Carga completada: {created} categorías creadas")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Carga el árbol de categorías de ejemplo.")
    parser.add_argument(
        "--keep-existing",
        action="store_true",
        help="No borrar las categorías existentes antes de cargar",
    )
    args = parser.parse_args()

    setup_logging(settings)
    asyncio.run(main(keep_existing=args.keep_existing))
