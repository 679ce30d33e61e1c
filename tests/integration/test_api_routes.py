from __future__ import annotations

import pytest

from bionic.ai.contracts.concierge import ConciergeReply, ToolCall
from bionic.ai.errors import TRANSPORT_FAILURE, GenerationError
from bionic.api.app import create_app
from bionic.application.concierge import ERROR_MESSAGE
from bionic.config.settings import Settings
from tests.helpers.fake_gateway import marketing_content, room_analysis, top_three_rankings


def test_health_endpoint(client):
    response = client.get("/health")
    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["service"] == "bionic"
    assert "x-correlation-id" in response.headers


def test_correlation_id_is_propagated(client):
    response = client.get("/health", headers={"x-correlation-id": "cid-123"})
    assert response.headers["x-correlation-id"] == "cid-123"


def test_create_app_requires_api_key_without_injected_gateway(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    with pytest.raises(ValueError, match="OPENAI_API_KEY"):
        create_app(settings=Settings(openai_api_key=None))


def test_tabs_and_navigation(client, workspace_id):
    tabs = client.get("/tabs").json()
    assert [tab["id"] for tab in tabs] == ["concierge", "multiplier", "hunter"]
    assert tabs[0]["label"] == "AI Concierge"

    response = client.put(f"/workspaces/{workspace_id}/tab", json={"tab": "hunter"})
    assert response.status_code == 200
    assert response.json()["active_tab"] == "hunter"
    assert client.get(f"/workspaces/{workspace_id}").json()["active_tab"] == "hunter"

    invalid = client.put(f"/workspaces/{workspace_id}/tab", json={"tab": "admin"})
    assert invalid.status_code == 422


def test_unknown_workspace_is_404(client):
    assert client.get("/workspaces/nope/concierge").status_code == 404
    assert client.delete("/workspaces/nope").status_code == 404


def test_delete_workspace(client, workspace_id):
    assert client.delete(f"/workspaces/{workspace_id}").status_code == 204
    assert client.get(f"/workspaces/{workspace_id}").status_code == 404


def test_concierge_qualifies_lead(client, fake_gateway, workspace_id):
    fake_gateway.converse_replies.extend(
        [
            ConciergeReply(
                tool_calls=[
                    ToolCall(
                        id="call_1",
                        name="qualifyLead",
                        arguments={"name": "Jane Doe", "budget": "$3M"},
                    )
                ]
            ),
            ConciergeReply(text="Welcome aboard, Jane."),
        ]
    )

    response = client.post(
        f"/workspaces/{workspace_id}/concierge/messages",
        json={"text": "I'm Jane Doe, budget $3M"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["result"]["status"] == "SUCCEEDED"
    assert body["qualified_lead"] == {"name": "Jane Doe", "budget": "$3M"}
    assert [m["role"] for m in body["messages"]] == ["assistant", "user", "assistant"]
    assert body["messages"][-1]["content"] == "Welcome aboard, Jane."
    assert body["state"] == "IDLE"


def test_concierge_failure_shows_apology(client, fake_gateway, workspace_id):
    fake_gateway.converse_replies.append(GenerationError("concierge", TRANSPORT_FAILURE))

    response = client.post(
        f"/workspaces/{workspace_id}/concierge/messages", json={"text": "Hello"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["result"]["status"] == "FAILED"
    assert body["messages"][-2]["content"] == "Hello"
    assert body["messages"][-1]["content"] == ERROR_MESSAGE


def test_concierge_blank_input_is_rejected_without_call(client, fake_gateway, workspace_id):
    response = client.post(f"/workspaces/{workspace_id}/concierge/messages", json={"text": "  "})

    assert response.status_code == 422
    assert response.json()["detail"] == "blank_input"
    assert fake_gateway.converse_calls == []


def test_marketing_copy_and_clipboard(client, fake_gateway, workspace_id):
    fake_gateway.marketing_replies.append(marketing_content())

    response = client.post(
        f"/workspaces/{workspace_id}/multiplier/copy", json={"notes": "5 bed, pool"}
    )

    assert response.status_code == 200
    content = response.json()["content"]
    assert content["flyerPoints"] == ["Infinity pool", "Chef's kitchen", "Private gated drive"]

    base = f"/workspaces/{workspace_id}/multiplier/clipboard"
    assert client.get(f"{base}/listing").text == "A rare Bel Air estate with canyon views."
    assert client.get(f"{base}/social").text == "Canyon views for days. #BelAir #LuxuryLiving"
    assert client.get(f"{base}/flyer").text == (
        "• Infinity pool\n• Chef's kitchen\n• Private gated drive"
    )
    assert client.get(f"{base}/flyer_point", params={"index": 2}).text == "Private gated drive"
    assert client.get(f"{base}/flyer_point").status_code == 422


def test_clipboard_without_content_is_404(client, workspace_id):
    response = client.get(f"/workspaces/{workspace_id}/multiplier/clipboard/listing")
    assert response.status_code == 404


def test_marketing_failure_is_visible_and_keeps_prior_content(
    client, fake_gateway, workspace_id
):
    fake_gateway.marketing_replies.extend(
        [marketing_content(), GenerationError("marketing_copy", TRANSPORT_FAILURE)]
    )
    url = f"/workspaces/{workspace_id}/multiplier/copy"
    client.post(url, json={"notes": "first"})

    response = client.post(url, json={"notes": "second"})

    assert response.status_code == 502
    assert response.json()["detail"]["error"] == "generation_failed"
    view = client.get(f"/workspaces/{workspace_id}/multiplier").json()
    assert view["copy_error"] == "generation_failed"
    assert view["content"]["professionalListing"] == "A rare Bel Air estate with canyon views."


def test_marketing_blank_notes(client, fake_gateway, workspace_id):
    response = client.post(f"/workspaces/{workspace_id}/multiplier/copy", json={"notes": ""})

    assert response.status_code == 422
    assert fake_gateway.marketing_calls == []


def test_room_image_upload_and_analysis(client, fake_gateway, workspace_id):
    fake_gateway.image_replies.append(room_analysis())
    base = f"/workspaces/{workspace_id}/multiplier/image"

    uploaded = client.put(base, content=b"\xff\xd8jpeg", headers={"content-type": "image/jpeg"})
    assert uploaded.status_code == 200
    assert uploaded.json()["image"]["mime_type"] == "image/jpeg"

    analyzed = client.post(f"{base}/analysis")
    assert analyzed.status_code == 200
    assert analyzed.json()["analysis"]["architecturalStyle"] == "Mid-Century Modern"
    assert fake_gateway.image_calls == [(b"\xff\xd8jpeg", "image/jpeg")]

    # Nova imagem limpa a análise antes de qualquer nova chamada.
    replaced = client.put(base, content=b"\x89PNG", headers={"content-type": "image/png"})
    assert replaced.json()["analysis"] is None

    cleared = client.delete(base)
    assert cleared.json()["image"] is None


def test_room_image_validation(client, workspace_id):
    base = f"/workspaces/{workspace_id}/multiplier/image"

    assert client.post(f"{base}/analysis").status_code == 422
    bad_type = client.put(base, content=b"abc", headers={"content-type": "text/plain"})
    assert bad_type.status_code == 422
    too_large = client.put(
        base, content=b"x" * (1024 * 1024 + 1), headers={"content-type": "image/png"}
    )
    assert too_large.status_code == 413


def test_hunter_analysis(client, fake_gateway, workspace_id):
    fake_gateway.ranking_replies.append(top_three_rankings())
    base = f"/workspaces/{workspace_id}/hunter"

    before = client.get(base).json()
    assert before["has_analyzed"] is False
    assert len(before["leads"]) == 10

    response = client.post(f"{base}/analysis")

    assert response.status_code == 200
    body = response.json()
    assert [lead["id"] for lead in body["high_propensity"]] == ["6", "10", "4"]
    assert [lead["propensityScore"] for lead in body["high_propensity"]] == [92, 78, 71]
    stable = [lead for lead in body["leads"] if lead["propensityCategory"] == "Stable"]
    assert len(stable) == 7
    assert all(lead["propensityScore"] is None for lead in stable)

    sorted_view = client.get(base, params={"sort_by": "propensityScore", "descending": True})
    assert [lead["id"] for lead in sorted_view.json()["leads"][:3]] == ["6", "10", "4"]


def test_hunter_failure_is_visible(client, fake_gateway, workspace_id):
    fake_gateway.ranking_replies.append(GenerationError("propensity", TRANSPORT_FAILURE))
    base = f"/workspaces/{workspace_id}/hunter"

    response = client.post(f"{base}/analysis")

    assert response.status_code == 502
    view = client.get(base).json()
    assert view["error"] == "generation_failed"
    assert view["has_analyzed"] is False
