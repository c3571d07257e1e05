# backend/app/db/models/category_model.py
"""
Se encarga de definir el modelo de categoría para la aplicación.

La jerarquía se guarda como "materialized path": cada categoría almacena
la ruta completa desde la raíz (p. ej. "women.clothing.dresses") y su
nivel (número de segmentos). Las consultas de subárbol son búsquedas por
prefijo sobre la columna ``path``.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Boolean, DateTime
from app.db.database import Base


def _new_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Category(Base):
    __tablename__ = "categories"

    id = Column(String(32), primary_key=True, default=_new_id)
    name = Column(String(100), nullable=False)
    # Ruta jerárquica, p. ej. "women.clothing.dresses". No es única a nivel de BD.
    path = Column(String(1024), nullable=False, index=True)
    # Nivel en la jerarquía (1 = raíz)
    level = Column(Integer, nullable=False, index=True)
    description = Column(String(500), nullable=False, default="")
    # Metadatos de presentación para la UI
    icon = Column(String(50), nullable=False, default="folder")
    color = Column(String(20), nullable=False, default="#3f51b5")
    # Ocultación lógica
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    def __repr__(self):
        return f"<Category(id={self.id}, path='{self.path}', level={self.level})>"
