from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from bionic.api.app import create_app
from bionic.config.settings import Settings, get_settings
from tests.helpers.fake_gateway import FakeGateway


@pytest.fixture()
def fake_gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture()
def settings() -> Settings:
    return Settings(openai_api_key=None, concierge_max_tool_rounds=3, image_max_mb=1.0)


@pytest.fixture()
def client(monkeypatch: pytest.MonkeyPatch, settings: Settings, fake_gateway: FakeGateway):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    get_settings.cache_clear()
    app = create_app(settings=settings, gateway=fake_gateway)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def workspace_id(client: TestClient) -> str:
    response = client.post("/workspaces")
    assert response.status_code == 201
    return response.json()["workspace_id"]
