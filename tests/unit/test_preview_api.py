"""
Tests for the editor preview API.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from componentizer.adapters.config_store import YamlConfigStore
from componentizer.api.deps import get_config_store, get_template_dirs
from componentizer.api.main import create_app

# --- Test Client Setup ---


@pytest.fixture
def client(config_store: YamlConfigStore, template_dirs: list[Path]) -> TestClient:
    """Test client over the test configuration and template directories."""
    app = create_app()
    app.dependency_overrides[get_config_store] = lambda: config_store
    app.dependency_overrides[get_template_dirs] = lambda: template_dirs

    return TestClient(app)


@pytest.fixture
def single_post() -> dict:
    return {
        "subject_id": 1,
        "post_type": "post",
        "singular": True,
        "component_ids": [2, 3, 1, 5],
    }


# --- Resolve ---


class TestPreviewResolve:
    def test_single_post(self, client: TestClient, single_post: dict) -> None:
        response = client.post("/api/components/preview/resolve", json=single_post)

        assert response.status_code == 200
        data = response.json()
        assert data["components"] == ["hero", "content", "gallery", "footer-links"]
        assert data["suffixes"] == ["single-post", "post", "single", "singular", "index"]
        assert [t["component"] for t in data["templates"]] == ["hero", "content", "footer-links"]
        assert data["templates"][0]["path"].endswith("child/components/hero-single.py")
        assert data["templates"][0]["kind"] == "programmatic"
        assert data["templates"][1]["path"].endswith("parent/views/content.html")
        assert data["templates"][1]["kind"] == "structured"

    def test_listing_uses_visible_components(self, client: TestClient) -> None:
        response = client.post(
            "/api/components/preview/resolve",
            json={"listing": True, "post_type": "post"},
        )

        data = response.json()
        assert data["components"] == ["hero", "content"]
        assert data["suffixes"] == ["archive-post", "post", "archive", "index"]

    def test_editor_posts_page(self, client: TestClient) -> None:
        response = client.post(
            "/api/components/preview/resolve",
            json={"editor": True, "subject_id": 10, "post_type": "page"},
        )
        assert response.json()["suffixes"] == ["home", "singular", "index"]

    def test_custom_page_template(self, client: TestClient) -> None:
        response = client.post(
            "/api/components/preview/resolve",
            json={"subject_id": 3, "post_type": "page", "page": True, "template_slug": "wide.php"},
        )
        assert response.json()["suffixes"] == ["wide", "page", "singular", "index"]

    def test_overrides(self, client: TestClient, single_post: dict) -> None:
        body = {**single_post, "components": ["gallery", "hero"], "suffixes": ["single"]}

        data = client.post("/api/components/preview/resolve", json=body).json()

        assert data["components"] == ["gallery", "hero"]
        assert data["suffixes"] == ["single"]
        assert [t["component"] for t in data["templates"]] == ["hero"]

    def test_extra_suffixes(self, client: TestClient, single_post: dict) -> None:
        body = {**single_post, "extra_suffixes": ["promo"]}

        data = client.post("/api/components/preview/resolve", json=body).json()

        assert data["suffixes"][:2] == ["promo", "single-post"]

    def test_text_ids_match_numeric_config(self, client: TestClient) -> None:
        """Ids saved as text name the same components as numeric config keys."""
        response = client.post(
            "/api/components/preview/resolve",
            json={
                "subject_id": "1",
                "post_type": "post",
                "singular": True,
                "component_ids": ["2", "3", "1", "5"],
            },
        )

        assert response.status_code == 200
        assert response.json()["components"] == ["hero", "content", "gallery", "footer-links"]

    def test_editor_text_subject_matches_posts_page(self, client: TestClient) -> None:
        response = client.post(
            "/api/components/preview/resolve",
            json={"editor": True, "subject_id": "10", "post_type": "page"},
        )
        assert response.json()["suffixes"] == ["home", "singular", "index"]

    def test_invalid_request(self, client: TestClient) -> None:
        response = client.post("/api/components/preview/resolve", json={"components": "hero"})
        assert response.status_code == 422


# --- Build ---


class TestPreviewBuild:
    def test_single_post(self, client: TestClient, single_post: dict) -> None:
        response = client.post("/api/components/preview/build", json=single_post)

        assert response.status_code == 200
        assert response.json()["html"] == (
            '<header class="single">1</header>'
            "<main>content</main>"
            "<footer>footer-links</footer>"
        )

    def test_listing(self, client: TestClient) -> None:
        response = client.post(
            "/api/components/preview/build",
            json={"listing": True, "post_type": "post"},
        )
        assert response.json()["html"] == (
            "<header>hero</header><ul>archive-post,post,archive,index</ul>"
        )

    def test_nothing_to_render(self, client: TestClient) -> None:
        response = client.post(
            "/api/components/preview/build",
            json={"subject_id": 1, "singular": True, "components": ["gallery"]},
        )

        assert response.status_code == 200
        assert response.json() == {"html": "", "templates": []}

    def test_component_outside_template_dirs_renders_nothing(self, client: TestClient) -> None:
        response = client.post(
            "/api/components/preview/build",
            json={"singular": True, "components": ["../../../etc/passwd", "content"]},
        )

        assert response.status_code == 200
        assert response.json()["html"] == "<main>content</main>"

    def test_suffix_outside_template_dirs_falls_back(self, client: TestClient) -> None:
        response = client.post(
            "/api/components/preview/build",
            json={"singular": True, "components": ["hero"], "suffixes": ["/../../../x"]},
        )

        assert response.status_code == 200
        assert response.json()["html"] == "<header>hero</header>"
