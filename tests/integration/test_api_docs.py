import pytest

pytestmark = pytest.mark.integration


class TestApiDocs:
    def test_schema_lists_product_routes(self, client):
        response = client.get("/api/schema/")
        assert response.status_code == 200
        assert b"/api/products" in response.content
        assert b"Toggle product availability" in response.content

    def test_swagger_ui_served(self, client):
        response = client.get("/docs/")
        assert response.status_code == 200
        assert b"swagger" in response.content.lower()
