# backend/app/services/category_tree.py
"""
Utilidades puras sobre rutas materializadas.

- generate_path_label: convierte un nombre libre en un segmento de ruta.
- parent_path / path_level: aritmética sobre rutas "a.b.c".
- build_category_tree: ensambla el árbol a partir de una lista plana
  ordenada por ``path``.

Nada de este módulo toca la base de datos.
"""

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from app.schemas.category_schema import CategoryNode

PATH_SEPARATOR = "."

_INVALID_LABEL_CHARS = re.compile(r"[^a-z0-9_]")
_REPEATED_UNDERSCORES = re.compile(r"_+")


def generate_path_label(name: str) -> str:
    """
    Genera un segmento de ruta válido a partir de un nombre.

    >>> generate_path_label("Casual Dresses")
    'casual_dresses'
    >>> generate_path_label("  A--B  ")
    'a_b'

    Nunca falla: un nombre sin letras ni dígitos produce "".
    """
    label = _INVALID_LABEL_CHARS.sub("_", name.lower())
    label = _REPEATED_UNDERSCORES.sub("_", label)
    return label.strip("_")


def join_path(parent: Optional[str], label: str) -> str:
    """Ruta de un hijo: ``parent + "." + label`` (o solo ``label`` en la raíz)."""
    if parent:
        return f"{parent}{PATH_SEPARATOR}{label}"
    return label


def parent_path(path: str) -> Optional[str]:
    """Ruta del padre, o None si ``path`` es una raíz."""
    segments = path.split(PATH_SEPARATOR)
    if len(segments) == 1:
        return None
    return PATH_SEPARATOR.join(segments[:-1])


def path_level(path: str) -> int:
    """Número de segmentos de la ruta (1 = raíz)."""
    return len(path.split(PATH_SEPARATOR))


@dataclass
class CategoryTree:
    """Resultado del ensamblado: el bosque y los registros sin padre."""
    roots: List[CategoryNode] = field(default_factory=list)
    orphans: List[CategoryNode] = field(default_factory=list)


def build_category_tree(categories: Iterable) -> CategoryTree:
    """
    Construye el árbol de categorías a partir de una lista plana.

    ``categories`` debe venir ordenada por ``path`` ascendente. Aun así,
    la creación de nodos y el enlazado se hacen en dos pasadas separadas,
    así que el resultado no depende de que un padre aparezca antes que
    sus hijos.

    Args:
        categories: Registros con los atributos de CategoryResponse
            (modelos ORM u objetos equivalentes)

    Returns:
        CategoryTree con ``roots`` en orden de entrada y ``orphans``: los
        registros no raíz cuyo padre no está en la lista (p. ej. un padre
        inactivo al filtrar por activas).
    """
    tree = CategoryTree()

    # Primera pasada: un nodo por registro, indexado por ruta.
    # Con rutas duplicadas, los hijos se cuelgan del primer registro.
    nodes = [CategoryNode.model_validate(category) for category in categories]
    nodes_by_path = {}
    for node in nodes:
        nodes_by_path.setdefault(node.path, node)

    # Segunda pasada: enlazar cada nodo con su padre
    for node in nodes:
        parent = parent_path(node.path)
        if parent is None:
            tree.roots.append(node)
        elif parent in nodes_by_path:
            nodes_by_path[parent].children.append(node)
        else:
            tree.orphans.append(node)

    return tree
