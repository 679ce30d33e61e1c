"""Modelos de domínio (Pydantic) compartilhados pelos três fluxos.

Nomes em snake_case no Python; aliases camelCase no JSON trocado com o
modelo e com a camada de visualização.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from bionic.domain.enums import PropensityCategory, Role


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Message(_CamelModel):
    """Entrada do transcript do concierge (append-only)."""

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class QualifiedLead(_CamelModel):
    """Lead qualificado pela tool qualifyLead (sinal lateral, não persistido)."""

    model_config = ConfigDict(frozen=True)

    name: str
    budget: str


class MarketingContent(_CamelModel):
    """Kit de marketing gerado a partir das notas do corretor."""

    professional_listing: str = Field(..., alias="professionalListing")
    """Descrição de anúncio profissional e sofisticada."""

    instagram_caption: str = Field(..., alias="instagramCaption")
    """Legenda curta para Instagram, com hashtags."""

    flyer_points: list[str] = Field(..., alias="flyerPoints", min_length=3, max_length=3)
    """Exatamente 3 bullets para flyer."""


class RoomAnalysis(_CamelModel):
    """Análise de foto de ambiente."""

    architectural_style: str = Field(..., alias="architecturalStyle")
    top_selling_features: list[str] = Field(
        ..., alias="topSellingFeatures", min_length=3, max_length=3
    )


class PropertyLead(_CamelModel):
    """Imóvel/proprietário candidato à análise de propensão.

    Apenas os campos propensity_* mudam, e apenas pelo ranker.
    """

    id: str
    owner_name: str = Field(..., alias="ownerName")
    address: str
    years_owned: int = Field(..., alias="yearsOwned", ge=0)
    estimated_equity: str = Field(..., alias="estimatedEquity")
    estimated_value: str = Field(..., alias="estimatedValue")
    propensity_score: int | None = Field(None, alias="propensityScore", ge=1, le=100)
    propensity_reasoning: str | None = Field(None, alias="propensityReasoning")
    propensity_category: PropensityCategory | None = Field(None, alias="propensityCategory")

    def to_ranking_input(self) -> dict[str, object]:
        """Projeção enviada ao modelo (sem nome do proprietário)."""
        return {
            "id": self.id,
            "yearsOwned": self.years_owned,
            "equity": self.estimated_equity,
            "value": self.estimated_value,
            "address": self.address,
        }
