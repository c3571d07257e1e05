# backend/app/schemas/category_schema.py

"""
Esquemas Pydantic para el modelo Category.

Los esquemas definen la estructura de datos que fluye a través de la API:
- Validación automática de tipos de datos
- Serialización/deserialización JSON (camelCase hacia el cliente)
- Documentación automática en OpenAPI/Swagger
- Separación entre modelo de base de datos y API

Patrón de esquemas utilizado:
- CategoryCreate: Para crear nuevas categorías (POST)
- CategoryUpdate: Para actualizar categorías existentes (PUT)
- CategoryResponse: Una categoría tal y como se devuelve al cliente
- CategoryNode: CategoryResponse + subcategorías anidadas (árbol)
- Envoltorios {success, ...} para cada tipo de respuesta correcta
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_ICON = "folder"
DEFAULT_COLOR = "#3f51b5"


class CamelModel(BaseModel):
    """Acepta snake_case y camelCase; serializa en camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ========================================
# ESQUEMAS DE ENTRADA
# ========================================

class CategoryCreate(CamelModel):
    """
    Esquema para crear una nueva categoría.

    ``name`` es opcional a nivel de esquema para que el endpoint pueda
    responder 400 "Category name is required" en lugar del 422 genérico.

    Ejemplo de uso:
    POST /api/categories
    {
        "name": "Casual Dresses",
        "parentPath": "women.clothing.dresses",
        "description": "Casual dresses for everyday wear"
    }
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(default=None, max_length=100)
    parent_path: Optional[str] = None
    description: str = Field(default="", max_length=500)
    icon: str = DEFAULT_ICON
    color: str = DEFAULT_COLOR

    @field_validator("description", "icon", "color", mode="before")
    @classmethod
    def null_means_default(cls, value, info: ValidationInfo):
        """Un null explícito equivale a no enviar el campo."""
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class CategoryUpdate(CamelModel):
    """
    Actualización parcial. Enumera exactamente los atributos mutables:
    ``path`` y ``level`` no se pueden cambiar tras la creación.
    Los campos no enviados (o enviados como null) no se modifican.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    icon: Optional[str] = None
    color: Optional[str] = None
    is_active: Optional[bool] = None

    def changes(self) -> dict:
        """Campos a aplicar, indexados por nombre de columna."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


# ========================================
# ESQUEMAS DE RESPUESTA
# ========================================

class CategoryResponse(CamelModel):
    """Una categoría tal y como se devuelve al cliente."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    path: str
    level: int
    description: str = ""
    icon: str = DEFAULT_ICON
    color: str = DEFAULT_COLOR
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CategoryNode(CategoryResponse):
    """Nodo del árbol: la categoría más sus hijas directas, ordenadas por path."""
    children: List["CategoryNode"] = Field(default_factory=list)


class CategoryTreeResponse(CamelModel):
    success: bool = True
    count: int  # Número de categorías raíz
    data: List[CategoryNode]


class CategoryDetailResponse(CamelModel):
    success: bool = True
    data: CategoryResponse


class CategoryDeleteResponse(CamelModel):
    success: bool = True
    deleted_count: int
    message: str


CategoryNode.model_rebuild()
