# backend/app/core/exceptions.py
"""
Excepciones de dominio para la gestión de categorías.

La capa de servicio nunca lanza HTTPException: señala los fallos con
``CategoryError`` y un ``CategoryErrorKind`` cerrado. La capa HTTP
(app/api/errors.py) traduce cada tipo a un código de estado.
"""

import enum
from typing import Optional


class CategoryErrorKind(str, enum.Enum):
    """Tipos de error que puede producir el dominio de categorías."""
    VALIDATION = "validation"              # Dato requerido ausente o inválido (400)
    PARENT_NOT_FOUND = "parent_not_found"  # parentPath no existe (404)
    NOT_FOUND = "not_found"                # id no existe (404)
    PERSISTENCE = "persistence"            # Fallo inesperado de la base de datos (500)


class CategoryError(Exception):
    """Error de dominio con su tipo y un mensaje apto para el cliente."""

    def __init__(self, kind: CategoryErrorKind, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        # Texto técnico del fallo original, solo se expone en desarrollo
        self.detail = detail

    def __repr__(self):
        return f"<CategoryError(kind={self.kind.value}, message='{self.message}')>"

    @classmethod
    def validation(cls, message: str) -> "CategoryError":
        return cls(CategoryErrorKind.VALIDATION, message)

    @classmethod
    def parent_not_found(cls) -> "CategoryError":
        return cls(CategoryErrorKind.PARENT_NOT_FOUND, "Parent category not found")

    @classmethod
    def not_found(cls) -> "CategoryError":
        return cls(CategoryErrorKind.NOT_FOUND, "Category not found")

    @classmethod
    def persistence(cls, message: str, detail: Optional[str] = None) -> "CategoryError":
        return cls(CategoryErrorKind.PERSISTENCE, message, detail=detail)
