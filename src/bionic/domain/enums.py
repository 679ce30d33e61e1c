"""Enums de domínio para papéis de mensagem, categorias de propensão e abas."""

from __future__ import annotations

from enum import StrEnum


class Role(StrEnum):
    """Autor de uma mensagem visível no transcript do concierge."""

    USER = "user"
    ASSISTANT = "assistant"


class PropensityCategory(StrEnum):
    """Categorias de propensão de venda.

    Hot/Warm são atribuídas pelo modelo (convenção comunicada no prompt:
    Hot para score > 85, Warm para 70-85). Stable é atribuída localmente a
    todo lead fora do top 3 retornado.
    """

    HOT = "Hot"
    WARM = "Warm"
    STABLE = "Stable"


HIGH_PROPENSITY_CATEGORIES: frozenset[PropensityCategory] = frozenset(
    {PropensityCategory.HOT, PropensityCategory.WARM}
)


class Tab(StrEnum):
    """Abas navegáveis do shell (um fluxo isolado por aba)."""

    CONCIERGE = "concierge"
    MULTIPLIER = "multiplier"
    HUNTER = "hunter"


TAB_LABELS: dict[Tab, str] = {
    Tab.CONCIERGE: "AI Concierge",
    Tab.MULTIPLIER: "Agent Multiplier",
    Tab.HUNTER: "Predictive Hunter",
}


class ConciergeState(StrEnum):
    """Estados da máquina de conversa do concierge."""

    IDLE = "IDLE"
    AWAITING_REPLY = "AWAITING_REPLY"
    TOOL_IN_FLIGHT = "TOOL_IN_FLIGHT"


class WorkflowStatus(StrEnum):
    """Resultado terminal de uma operação de fluxo."""

    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"
    SKIPPED = "SKIPPED"  # input em branco / sem imagem: nenhuma chamada ao modelo
    STALE = "STALE"  # análise concluída para uma imagem que já foi trocada


class LeadSortField(StrEnum):
    """Colunas ordenáveis da tabela de leads."""

    OWNER_NAME = "ownerName"
    ADDRESS = "address"
    YEARS_OWNED = "yearsOwned"
    PROPENSITY_SCORE = "propensityScore"
