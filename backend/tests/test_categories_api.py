import logging

import pytest

from app.api import deps
from app.core.config import settings
from app.core.exceptions import CategoryError
from app.main import app

API = "/api/categories"


async def post_category(client, **body):
    response = await client.post(API, json=body)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestListCategories:
    """GET /api/categories"""

    async def test_empty(self, client):
        response = await client.get(API)

        assert response.status_code == 200
        assert response.json() == {"success": True, "count": 0, "data": []}

    async def test_tree(self, client):
        await post_category(client, name="Women")
        await post_category(client, name="Men")
        await post_category(client, name="Clothing", parentPath="women")

        response = await client.get(API)

        body = response.json()
        assert body["success"] is True
        assert body["count"] == 2
        men, women = body["data"]
        assert men["path"] == "men"
        assert men["children"] == []
        assert women["children"][0]["path"] == "women.clothing"
        assert women["children"][0]["level"] == 2
        assert "isActive" in women

    async def test_is_active_filter(self, client):
        await post_category(client, name="Women")
        men = await post_category(client, name="Men")
        await client.put(f"{API}/{men['id']}", json={"isActive": False})

        active = (await client.get(API)).json()
        inactive = (await client.get(API, params={"isActive": "false"})).json()

        assert [node["path"] for node in active["data"]] == ["women"]
        assert [node["path"] for node in inactive["data"]] == ["men"]

    async def test_invalid_is_active_value(self, client):
        response = await client.get(API, params={"isActive": "maybe"})

        assert response.status_code == 400
        assert response.json()["success"] is False


class TestGetCategory:
    """GET /api/categories/{id}"""

    async def test_found(self, client):
        created = await post_category(client, name="Women", description="All women")

        response = await client.get(f"{API}/{created['id']}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Women"
        assert data["description"] == "All women"
        assert data["path"] == "women"
        assert data["createdAt"]
        assert data["updatedAt"]

    async def test_not_found(self, client):
        response = await client.get(f"{API}/missing")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Category not found"}


class TestCreateCategory:
    """POST /api/categories"""

    async def test_created(self, client):
        response = await client.post(API, json={"name": "Women"})

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["data"]["path"] == "women"
        assert body["data"]["level"] == 1
        assert body["data"]["icon"] == "folder"
        assert body["data"]["color"] == "#3f51b5"
        assert body["data"]["isActive"] is True

    async def test_child(self, client):
        await post_category(client, name="Women")

        data = await post_category(client, name="Casual Dresses", parentPath="women", description="Everyday")

        assert data["path"] == "women.casual_dresses"
        assert data["level"] == 2
        assert data["description"] == "Everyday"

    @pytest.mark.parametrize("body", [{}, {"name": ""}, {"name": "   "}, {"parentPath": "women"}])
    async def test_name_required(self, client, body):
        response = await client.post(API, json=body)

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Category name is required"}

    async def test_name_too_long(self, client):
        response = await client.post(API, json={"name": "x" * 101})

        assert response.status_code == 400
        assert response.json()["error"].startswith("name:")

    async def test_description_too_long(self, client):
        response = await client.post(API, json={"name": "Women", "description": "x" * 501})

        assert response.status_code == 400

    async def test_parent_not_found(self, client):
        response = await client.post(API, json={"name": "New Category", "parentPath": "nonexistent"})

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Parent category not found"}


class TestUpdateCategory:
    """PUT /api/categories/{id}"""

    async def test_updated(self, client):
        created = await post_category(client, name="Women")

        response = await client.put(
            f"{API}/{created['id']}", json={"name": "Ladies", "description": "Updated description"}
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Ladies"
        assert data["description"] == "Updated description"
        assert data["path"] == "women"

    async def test_path_and_level_are_ignored(self, client):
        created = await post_category(client, name="Women")

        response = await client.put(f"{API}/{created['id']}", json={"path": "x", "level": 4, "icon": "star"})

        data = response.json()["data"]
        assert data["path"] == "women"
        assert data["level"] == 1
        assert data["icon"] == "star"

    async def test_empty_body(self, client):
        created = await post_category(client, name="Women")

        response = await client.put(f"{API}/{created['id']}", json={})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "No update data provided"}

    async def test_not_found(self, client):
        response = await client.put(f"{API}/999", json={"name": "Updated Category"})

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Category not found"}


class TestDeleteCategory:
    """DELETE /api/categories/{id}"""

    async def test_cascading_delete(self, client):
        women = await post_category(client, name="Women")
        await post_category(client, name="Clothing", parentPath="women")

        response = await client.delete(f"{API}/{women['id']}")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "deletedCount": 2,
            "message": "Category and 1 subcategories deleted successfully",
        }
        assert (await client.get(API)).json()["count"] == 0

    async def test_not_found(self, client):
        response = await client.delete(f"{API}/missing")

        assert response.status_code == 404
        assert response.json()["error"] == "Category not found"


class BrokenService:
    async def get_all_categories_tree(self, is_active=None):
        raise RuntimeError("Database error")


class TestServerErrors:
    """Los fallos inesperados se traducen en 500."""

    async def test_unhandled_exception(self, client):
        app.dependency_overrides[deps.get_category_service] = lambda: BrokenService()

        response = await client.get(API)

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Server error"
        assert body["message"] == "Database error"

class FailingPersistenceService:
    async def get_all_categories_tree(self, is_active=None):
        raise CategoryError.persistence("Failed to fetch categories", detail="connection refused")


class TestPersistenceErrorResponses:
    """Los errores PERSISTENCE se traducen en 500; el detalle solo en desarrollo."""

    async def test_development_shows_detail(self, client, monkeypatch):
        monkeypatch.setattr(settings, "APP_ENVIRONMENT", "development")
        app.dependency_overrides[deps.get_category_service] = lambda: FailingPersistenceService()

        response = await client.get(API)

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "Failed to fetch categories",
            "message": "connection refused",
        }

    async def test_production_hides_detail(self, client, monkeypatch):
        monkeypatch.setattr(settings, "APP_ENVIRONMENT", "production")
        app.dependency_overrides[deps.get_category_service] = lambda: FailingPersistenceService()

        response = await client.get(API)

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Failed to fetch categories"}

    async def test_production_hides_unhandled_error_text(self, client, monkeypatch):
        monkeypatch.setattr(settings, "APP_ENVIRONMENT", "production")
        app.dependency_overrides[deps.get_category_service] = lambda: BrokenService()

        response = await client.get(API)

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Server error"}


class TestUnhandledErrorMiddleware:
    """Los 500 no controlados pasan por el log de acceso y por CORS."""

    async def test_access_logged(self, client, caplog):
        app.dependency_overrides[deps.get_category_service] = lambda: BrokenService()

        with caplog.at_level(logging.INFO, logger="app.main"):
            response = await client.get(API)

        assert response.status_code == 500
        assert f"GET {API} 500" in caplog.text

    async def test_cors_headers_present(self, client):
        app.dependency_overrides[deps.get_category_service] = lambda: BrokenService()

        response = await client.get(API, headers={"Origin": "http://localhost:3000"})

        assert response.status_code == 500
        assert "access-control-allow-origin" in response.headers
        assert response.json()["error"] == "Server error"


class TestCreateWithNullOptionals:
    """null en campos opcionales equivale a usar su valor por defecto."""

    async def test_null_optionals_use_defaults(self, client):
        response = await client.post(
            API, json={"name": "Women", "description": None, "icon": None, "color": None}
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["description"] == ""
        assert data["icon"] == "folder"
        assert data["color"] == "#3f51b5"


class TestMisc:
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["message"] == "Server is running"
        assert body["timestamp"]

    async def test_unknown_endpoint(self, client):
        response = await client.get("/api/nothing-here")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Endpoint not found"}
