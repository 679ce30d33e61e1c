"""Contrato Pydantic para o ranking de propensão de venda."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

MAX_RANKED_LEADS = 3


class PropensityRanking(BaseModel):
    """Um lead do top 3 retornado pelo modelo."""

    id: str
    """Chave de join com PropertyLead.id."""

    score: int = Field(..., ge=1, le=100)
    """Probabilidade (1-100) de venda em 6 meses."""

    category: Literal["Hot", "Warm"]
    """Hot para score > 85, Warm para 70-85 (convenção do prompt)."""

    reasoning: str
    """Justificativa curta do modelo."""

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        # Alguns modelos devolvem o id como número.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("score", mode="before")
    @classmethod
    def _round_score(cls, value: object) -> object:
        # O schema declara "number"; scores fracionários são arredondados.
        if isinstance(value, float):
            return round(value)
        return value


class PropensityRankingResult(BaseModel):
    """Envelope da resposta (o provedor exige objeto na raiz do schema)."""

    leads: list[PropensityRanking] = Field(default_factory=list, max_length=MAX_RANKED_LEADS)
