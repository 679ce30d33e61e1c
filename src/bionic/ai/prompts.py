"""Prompts, tools e schemas de resposta para as chamadas ao modelo.

Responsabilidades:
- Definir system instruction do concierge e a tool qualifyLead
- Formatar inputs de marketing, análise de foto e propensão
- Declarar os JSON schemas de saída estruturada
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

QUALIFY_LEAD_TOOL_NAME = "qualifyLead"

CONCIERGE_SYSTEM_INSTRUCTION = (
    "You are the 'Bionic Brokerage AI Concierge', a luxury real estate assistant "
    "for an elite $100M firm. You are professional, sophisticated, and goal-oriented. "
    "Your primary objective is to assist brokers and qualify leads. If a user shares "
    "their name and budget, use the 'qualifyLead' tool immediately to register them "
    "in the system. Be concise and high-end in your tone."
)

ROOM_ANALYSIS_INSTRUCTION = (
    "Analyze this luxury room photo. Identify the 'Architectural Style' "
    "(e.g., Mid-Century Modern, Contemporary, Spanish Colonial) and the "
    "'Top 3 Selling Features' that would appeal to high-net-worth buyers. "
    "Return the result in a clean JSON format."
)


def get_concierge_tools() -> list[dict[str, Any]]:
    """Retorna as tools declaradas para o concierge (apenas qualifyLead)."""
    return [
        {
            "type": "function",
            "function": {
                "name": QUALIFY_LEAD_TOOL_NAME,
                "description": (
                    "Update the lead status to qualified when a user provides "
                    "their name and budget."
                ),
                "parameters": {
                    "type": "object",
                    "properties": {
                        "name": {
                            "type": "string",
                            "description": "The full name of the potential client.",
                        },
                        "budget": {
                            "type": "string",
                            "description": (
                                "The property budget or price range mentioned by the "
                                'client (e.g., "$2M", "around 5 million").'
                            ),
                        },
                    },
                    "required": ["name", "budget"],
                    "additionalProperties": False,
                },
            },
        }
    ]


def format_marketing_input(notes: str) -> str:
    """Formata as notas cruas do corretor para geração do kit de marketing."""
    return (
        "Transform these raw real estate notes into a professional marketing suite: "
        f"{notes.strip()}"
    )


def format_propensity_input(leads: Sequence[dict[str, Any]]) -> str:
    """Embute a lista serializada de leads no prompt de propensão."""
    leads_json = json.dumps(list(leads), ensure_ascii=False)
    return f"""Analyze these {len(leads)} homeowners and identify which 3 are most likely \
to sell in the next 6 months.
Consider factors like years owned (7-10 years is a common move cycle), equity, and value trends.

Leads Data: {leads_json}

Return a JSON object whose 'leads' array holds the TOP 3 ONLY.
Each object must include: 'id', 'score' (1-100), 'category' ('Hot' for score > 85, \
'Warm' for 70-85), and 'reasoning'."""


def _json_schema_format(name: str, schema: dict[str, Any]) -> dict[str, Any]:
    return {
        "type": "json_schema",
        "json_schema": {"name": name, "strict": True, "schema": schema},
    }


def get_marketing_response_format() -> dict[str, Any]:
    """Schema: professionalListing, instagramCaption, flyerPoints (3)."""
    return _json_schema_format(
        "marketing_content",
        {
            "type": "object",
            "properties": {
                "professionalListing": {
                    "type": "string",
                    "description": "A high-end, professional real estate listing description",
                },
                "instagramCaption": {
                    "type": "string",
                    "description": "A snappy, engaging Instagram caption with hashtags",
                },
                "flyerPoints": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Exactly 3 punchy bullet points for a marketing flyer",
                },
            },
            "required": ["professionalListing", "instagramCaption", "flyerPoints"],
            "additionalProperties": False,
        },
    )


def get_room_analysis_response_format() -> dict[str, Any]:
    """Schema: architecturalStyle, topSellingFeatures (3)."""
    return _json_schema_format(
        "room_analysis",
        {
            "type": "object",
            "properties": {
                "architecturalStyle": {"type": "string"},
                "topSellingFeatures": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Exactly 3 features",
                },
            },
            "required": ["architecturalStyle", "topSellingFeatures"],
            "additionalProperties": False,
        },
    )


def get_propensity_response_format() -> dict[str, Any]:
    """Schema: {leads: [{id, score, category Hot|Warm, reasoning}]}."""
    return _json_schema_format(
        "propensity_ranking",
        {
            "type": "object",
            "properties": {
                "leads": {
                    "type": "array",
                    "description": "The top 3 leads only",
                    "items": {
                        "type": "object",
                        "properties": {
                            "id": {"type": "string"},
                            "score": {"type": "number"},
                            "category": {"type": "string", "enum": ["Hot", "Warm"]},
                            "reasoning": {"type": "string"},
                        },
                        "required": ["id", "score", "category", "reasoning"],
                        "additionalProperties": False,
                    },
                }
            },
            "required": ["leads"],
            "additionalProperties": False,
        },
    )
