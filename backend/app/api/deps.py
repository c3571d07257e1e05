# backend/app/api/deps.py
"""
Módulo de dependencias para FastAPI.

Este archivo centraliza las dependencias que se inyectan en los endpoints.
El servicio de categorías se construye una sola vez al arrancar la
aplicación (ver app/main.py) y se guarda en ``app.state``; los tests lo
sustituyen con ``app.dependency_overrides[get_category_service]``.
"""

from fastapi import Request

from app.services.category_service import CategoryService


def get_category_service(request: Request) -> CategoryService:
    """
    Dependencia de FastAPI que devuelve el servicio de categorías de la app.
    """
    return request.app.state.category_service

