"""
크리에이티브 엔진 API 통합 테스트.
"""

import pytest
from httpx import AsyncClient, ASGITransport
from blueprint_engine.main import app


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def test_defaults(client: AsyncClient):
    response = await client.get("/api/v1/creative/defaults")

    assert response.status_code == 200
    data = response.json()
    assert data["brandName"] == "Omar Atlas"
    assert data["mood"] == "minimal, cinematic, confident"


async def test_blueprint_prompt_keys(client: AsyncClient):
    """prompts는 정확히 5개의 키를 가져야 한다."""
    response = await client.post("/api/v1/creative/blueprint", json={"brandName": "Atlas"})

    assert response.status_code == 200
    data = response.json()
    assert set(data["prompts"]) == {"hero", "background", "branding", "ux", "threeD"}
    assert "figmaSystem" in data
    assert "styleGuide" in data


async def test_palette_literal_values(client: AsyncClient):
    response = await client.post("/api/v1/creative/blueprint", json={"palette": ["#FFFFFF", "#000000"]})

    assert response.status_code == 200
    palette = response.json()["styleGuide"]["palette"]
    assert [token["value"] for token in palette] == ["#FFFFFF", "#000000"]


async def test_blueprint_from_default_form(client: AsyncClient):
    defaults = (await client.get("/api/v1/creative/defaults")).json()
    response = await client.post("/api/v1/creative/blueprint/form", json=defaults)

    assert response.status_code == 200
    data = response.json()
    assert len(data["styleGuide"]["palette"]) == 5
    assert data["content"]["ctas"][0] == "Start with Omar Atlas"


async def test_export_markdown(client: AsyncClient):
    response = await client.post(
        "/api/v1/creative/blueprint/export?format=markdown&title=Omar%20Atlas",
        json={"brandName": "Omar Atlas"},
    )

    assert response.status_code == 200
    assert response.text.startswith("# Omar Atlas")
    assert "### 3D Concept" in response.text


async def test_export_invalid_format(client: AsyncClient):
    response = await client.post("/api/v1/creative/blueprint/export?format=docx", json={})

    assert response.status_code == 400
    assert response.json()["error_code"] == "ERR_EXPORT_002"
