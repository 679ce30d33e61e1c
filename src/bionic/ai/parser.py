"""Parsing das respostas estruturadas do modelo.

Contrato: ou o resultado completo e válido, ou ResponseParseError.
Nunca retornar resultado parcialmente preenchido.
"""

from __future__ import annotations

import json
import re
from typing import Any

from pydantic import ValidationError

from bionic.ai.contracts.propensity import PropensityRanking, PropensityRankingResult
from bionic.ai.errors import ResponseParseError
from bionic.domain.models import MarketingContent, RoomAnalysis

_CODE_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


def _strip_code_fence(raw: str) -> str:
    text = raw.strip()
    match = _CODE_FENCE_RE.match(text)
    return match.group(1) if match else text


def load_json_payload(raw: str | None) -> Any:
    """Decodifica o texto da resposta como JSON (aceita cerca ```json)."""
    if raw is None or not raw.strip():
        raise ResponseParseError("empty response body")
    try:
        return json.loads(_strip_code_fence(raw))
    except json.JSONDecodeError as exc:
        raise ResponseParseError(f"invalid json: {exc.msg}") from exc


def parse_marketing_content(raw: str | None) -> MarketingContent:
    """Valida o kit de marketing (flyerPoints com exatamente 3 itens)."""
    payload = load_json_payload(raw)
    try:
        return MarketingContent.model_validate(payload)
    except ValidationError as exc:
        raise ResponseParseError(
            f"marketing content schema violation: {exc.error_count()} errors"
        ) from exc


def parse_room_analysis(raw: str | None) -> RoomAnalysis:
    """Valida a análise de ambiente (topSellingFeatures com exatamente 3 itens)."""
    payload = load_json_payload(raw)
    try:
        return RoomAnalysis.model_validate(payload)
    except ValidationError as exc:
        raise ResponseParseError(
            f"room analysis schema violation: {exc.error_count()} errors"
        ) from exc


def parse_propensity_ranking(raw: str | None) -> list[PropensityRanking]:
    """Valida o top 3 de propensão.

    Aceita o envelope {"leads": [...]} ou um array na raiz.
    """
    payload = load_json_payload(raw)
    if isinstance(payload, list):
        payload = {"leads": payload}
    try:
        return PropensityRankingResult.model_validate(payload).leads
    except ValidationError as exc:
        raise ResponseParseError(
            f"propensity schema violation: {exc.error_count()} errors"
        ) from exc


def parse_tool_arguments(raw: str | None) -> dict[str, Any]:
    """Decodifica os argumentos JSON de uma tool call."""
    if raw is None or not raw.strip():
        return {}
    payload = load_json_payload(raw)
    if not isinstance(payload, dict):
        raise ResponseParseError("tool arguments must be a json object")
    return payload
