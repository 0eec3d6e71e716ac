"""
End-to-end tests for the backend proxy endpoints.

Uses FastAPI's TestClient with the sample recipe source, so no network access
is needed. Upstream failures are simulated by patching directory_search.
"""

import os
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from api.main import app
from recipes.connectors.base import UpstreamError

client = TestClient(app)


@pytest.fixture(autouse=True)
def sample_source():
    with patch.dict(os.environ, {"RECIPE_SOURCE": "sample"}):
        yield


class TestSearchEndpoint:
    """Test cases for GET /search."""

    def test_search_returns_results_page(self):
        response = client.get("/search", params={"ingredients": "eggs", "page": 1})

        assert response.status_code == 200
        data = response.json()
        assert list(data) == ["results"]
        assert len(data["results"]) == 10
        first = data["results"][0]
        assert set(first) == {"title", "href", "ingredients", "thumbnail"}

    def test_page_past_the_end_is_empty(self):
        """Test that the end of results is an empty list, not an error."""
        response = client.get("/search", params={"ingredients": "eggs", "page": 3})
        assert response.status_code == 200
        assert response.json() == {"results": []}

    def test_page_defaults_to_one(self):
        paged = client.get("/search", params={"ingredients": "eggs", "page": 1}).json()
        default = client.get("/search", params={"ingredients": "eggs"}).json()
        assert default == paged

    def test_page_must_be_positive(self):
        response = client.get("/search", params={"ingredients": "eggs", "page": 0})
        assert response.status_code == 422

    def test_query_is_sanitized(self):
        """Test that characters outside the query alphabet don't change the results."""
        noisy = client.get("/search", params={"ingredients": " +eggs!!, -onions;", "page": 1}).json()
        clean = client.get("/search", params={"ingredients": "+eggs,-onions", "page": 1}).json()
        assert noisy == clean
        assert all("onions" not in r["ingredients"] for r in clean["results"])

    @patch("api.main.directory_search")
    def test_upstream_failure_returns_502(self, mock_search):
        mock_search.side_effect = UpstreamError("Recipe directory timed out after 10s")

        response = client.get("/search", params={"ingredients": "eggs"})

        assert response.status_code == 502
        assert "Error connecting to the recipe directory" in response.json()["detail"]

    def test_unknown_source_returns_500(self):
        with patch.dict(os.environ, {"RECIPE_SOURCE": "cookbook"}):
            response = client.get("/search", params={"ingredients": "eggs"})
        assert response.status_code == 500
        assert "Unknown recipe source" in response.json()["detail"]


class TestHealthEndpoint:
    """Test cases for GET /health and GET /."""

    def test_health(self):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["recipe_source"] == "sample"
        assert data["uptime_seconds"] >= 0

    def test_root(self):
        data = client.get("/").json()
        assert data["name"] == "Recipe Browser API"
        assert data["docs"] == "/docs"
