"""
프로젝트 엔진 API 통합 테스트.
기본 폼 조회, 블루프린트 생성, 내보내기를 확인합니다.
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
    """기본 폼은 Reset 상태의 원시 텍스트를 반환해야 한다."""
    response = await client.get("/api/v1/project/defaults")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Command Atlas Transformation"
    assert "\n" in data["goals"]


async def test_blueprint_from_structured_input(client: AsyncClient):
    response = await client.post("/api/v1/project/blueprint", json={
        "name": "Margin Reset",
        "goals": ["Cut costs", "Grow revenue"],
        "kpis": ["Margin %"],
        "team": ["PM", "Engineer"],
    })

    assert response.status_code == 200
    data = response.json()
    assert data["architecture"]["objectives"] == ["Cut costs", "Grow revenue"]
    assert len(data["executionPath"]) == 4
    assert "workItems" in data["architecture"]["wbs"][0]
    assert "northStar" in data["summary"]


async def test_blueprint_from_empty_input(client: AsyncClient):
    """빈 입력도 완전한 블루프린트를 반환해야 한다."""
    response = await client.post("/api/v1/project/blueprint", json={})

    assert response.status_code == 200
    data = response.json()
    assert data["architecture"]["objectives"]
    assert len(data["recommendations"]) == 5


async def test_blueprint_from_form(client: AsyncClient):
    response = await client.post("/api/v1/project/blueprint/form", json={
        "goals": "A, B\nC",
    })

    assert response.status_code == 200
    assert response.json()["architecture"]["objectives"] == ["A", "B", "C"]


async def test_form_field_too_long(client: AsyncClient):
    """설정 한도를 넘는 필드는 400과 ERR_INPUT_001을 반환해야 한다."""
    response = await client.post("/api/v1/project/blueprint/form", json={
        "vision": "x" * 5000,
    })

    assert response.status_code == 400
    data = response.json()
    assert data["error_code"] == "ERR_INPUT_001"
    assert "timestamp" in data


async def test_invalid_body_type(client: AsyncClient):
    """목록 필드에 숫자를 보내면 FastAPI 기본 422를 반환해야 한다."""
    response = await client.post("/api/v1/project/blueprint", json={"goals": 5})

    assert response.status_code == 422


async def test_export_markdown(client: AsyncClient):
    response = await client.post("/api/v1/project/blueprint/export?format=markdown", json={})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/markdown")
    assert 'filename="project-blueprint.md"' in response.headers["content-disposition"]
    assert response.text.startswith("# Project Blueprint")


async def test_export_json(client: AsyncClient):
    response = await client.post("/api/v1/project/blueprint/export?format=json", json={"name": "Atlas"})

    assert response.status_code == 200
    assert "executionPath" in response.json()


async def test_export_pptx(client: AsyncClient):
    response = await client.post("/api/v1/project/blueprint/export?format=pptx", json={})

    assert response.status_code == 200
    assert response.content[:2] == b"PK"
    assert 'filename="project-blueprint.pptx"' in response.headers["content-disposition"]


async def test_export_invalid_format(client: AsyncClient):
    """지원하지 않는 형식(xml)으로 내보내기 하면 400을 반환해야 한다."""
    response = await client.post("/api/v1/project/blueprint/export?format=xml", json={})

    assert response.status_code == 400
    data = response.json()
    assert data["error_code"] == "ERR_EXPORT_002"
    assert data["details"]["format"] == "xml"
