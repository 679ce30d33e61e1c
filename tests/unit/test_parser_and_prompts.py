from __future__ import annotations

import json

import pytest

from bionic.ai import parser, prompts
from bionic.ai.errors import ResponseParseError


def _marketing_json(points: list[str]) -> str:
    return json.dumps(
        {
            "professionalListing": "Listing",
            "instagramCaption": "Caption #luxury",
            "flyerPoints": points,
        }
    )


def test_parse_marketing_content_accepts_code_fence():
    raw = "```json\n" + _marketing_json(["a", "b", "c"]) + "\n```"
    content = parser.parse_marketing_content(raw)

    assert content.professional_listing == "Listing"
    assert content.flyer_points == ["a", "b", "c"]


@pytest.mark.parametrize("points", [["a", "b"], ["a", "b", "c", "d"]])
def test_parse_marketing_content_rejects_wrong_point_count(points):
    with pytest.raises(ResponseParseError):
        parser.parse_marketing_content(_marketing_json(points))


@pytest.mark.parametrize("raw", [None, "", "not json", '{"professionalListing": "x"}'])
def test_parse_marketing_content_never_returns_partial(raw):
    with pytest.raises(ResponseParseError):
        parser.parse_marketing_content(raw)


def test_parse_room_analysis():
    raw = json.dumps(
        {"architecturalStyle": "Contemporary", "topSellingFeatures": ["x", "y", "z"]}
    )
    analysis = parser.parse_room_analysis(raw)
    assert analysis.architectural_style == "Contemporary"
    assert len(analysis.top_selling_features) == 3


def test_parse_propensity_ranking_envelope_and_root_array():
    item = {"id": 6, "score": 92.0, "category": "Hot", "reasoning": "r"}
    from_envelope = parser.parse_propensity_ranking(json.dumps({"leads": [item]}))
    from_array = parser.parse_propensity_ranking(json.dumps([item]))

    assert from_envelope == from_array
    assert from_envelope[0].id == "6"
    assert from_envelope[0].score == 92


@pytest.mark.parametrize(
    "items",
    [
        [{"id": "1", "score": 150, "category": "Hot", "reasoning": "r"}],
        [{"id": "1", "score": 80, "category": "Stable", "reasoning": "r"}],
        [{"id": str(i), "score": 80, "category": "Warm", "reasoning": "r"} for i in range(4)],
    ],
)
def test_parse_propensity_ranking_rejects_contract_violations(items):
    with pytest.raises(ResponseParseError):
        parser.parse_propensity_ranking(json.dumps({"leads": items}))


def test_parse_tool_arguments():
    assert parser.parse_tool_arguments('{"name": "Jane Doe", "budget": "$3M"}') == {
        "name": "Jane Doe",
        "budget": "$3M",
    }
    assert parser.parse_tool_arguments("") == {}
    with pytest.raises(ResponseParseError):
        parser.parse_tool_arguments("[1, 2]")


def test_concierge_tool_declares_required_name_and_budget():
    (tool,) = prompts.get_concierge_tools()
    function = tool["function"]

    assert function["name"] == "qualifyLead"
    assert function["parameters"]["required"] == ["name", "budget"]


def test_propensity_prompt_embeds_serialized_leads():
    leads = [{"id": "1", "yearsOwned": 9, "equity": "$3.1M", "value": "$5.8M", "address": "A"}]
    prompt = prompts.format_propensity_input(leads)

    assert json.dumps(leads) in prompt
    assert "7-10 years" in prompt
    assert "'Hot' for score > 85" in prompt


def test_response_formats_are_strict_objects():
    for response_format in (
        prompts.get_marketing_response_format(),
        prompts.get_room_analysis_response_format(),
        prompts.get_propensity_response_format(),
    ):
        schema = response_format["json_schema"]
        assert response_format["type"] == "json_schema"
        assert schema["strict"] is True
        assert schema["schema"]["type"] == "object"
