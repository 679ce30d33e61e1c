"""Predictive Hunter — ranking de propensão de venda sobre os leads.

O score é do modelo; localmente só existe o left-merge por id e a
ordenação para exibição.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from bionic.ai.contracts.propensity import PropensityRanking
from bionic.ai.errors import GenerationError
from bionic.ai.gateway import ModelGateway
from bionic.application.errors import WorkflowBusyError
from bionic.domain.enums import HIGH_PROPENSITY_CATEGORIES, LeadSortField, PropensityCategory
from bionic.domain.models import PropertyLead
from bionic.domain.protocols.lead_provider import LeadProviderProtocol
from bionic.domain.results import WorkflowResult
from bionic.observability.logging import get_logger, log_workflow_failure

logger: logging.Logger = get_logger(__name__)

GENERATION_FAILED = "generation_failed"
PERSISTENCE_FAILED = "persistence_failed"


def merge_rankings(
    leads: Sequence[PropertyLead], rankings: Sequence[PropensityRanking]
) -> list[PropertyLead]:
    """Left-merge por id: ranqueados recebem score/categoria, o resto vira Stable.

    Ids retornados pelo modelo que não existem no conjunto são ignorados.
    """
    by_id = {ranking.id: ranking for ranking in rankings}
    merged: list[PropertyLead] = []
    for lead in leads:
        ranking = by_id.get(lead.id)
        if ranking is not None:
            update = {
                "propensity_score": ranking.score,
                "propensity_reasoning": ranking.reasoning,
                "propensity_category": PropensityCategory(ranking.category),
            }
        else:
            update = {
                "propensity_score": None,
                "propensity_reasoning": None,
                "propensity_category": PropensityCategory.STABLE,
            }
        merged.append(lead.model_copy(update=update))

    unknown = set(by_id) - {lead.id for lead in leads}
    if unknown:
        logger.warning("propensity_unknown_lead_ids", extra={"lead_ids": sorted(unknown)})
    return merged


def filter_high_propensity(leads: Sequence[PropertyLead]) -> list[PropertyLead]:
    """Hot/Warm ordenados por score decrescente (empates mantêm a ordem)."""
    high = [lead for lead in leads if lead.propensity_category in HIGH_PROPENSITY_CATEGORIES]
    return sorted(high, key=lambda lead: lead.propensity_score or 0, reverse=True)


def sort_leads(
    leads: Sequence[PropertyLead],
    sort_by: LeadSortField,
    descending: bool = False,
) -> list[PropertyLead]:
    """Ordena a tabela; leads sem score ficam sempre no fim."""
    if sort_by == LeadSortField.PROPENSITY_SCORE:
        scored = [lead for lead in leads if lead.propensity_score is not None]
        unscored = [lead for lead in leads if lead.propensity_score is None]
        scored.sort(key=lambda lead: lead.propensity_score, reverse=descending)
        return scored + unscored

    if sort_by == LeadSortField.YEARS_OWNED:
        return sorted(leads, key=lambda lead: lead.years_owned, reverse=descending)
    if sort_by == LeadSortField.OWNER_NAME:
        return sorted(leads, key=lambda lead: lead.owner_name.casefold(), reverse=descending)
    return sorted(leads, key=lambda lead: lead.address.casefold(), reverse=descending)


class PropensityRanker:
    """Estado local da aba Predictive Hunter."""

    def __init__(self, gateway: ModelGateway, provider: LeadProviderProtocol) -> None:
        self._gateway = gateway
        self._provider = provider
        self._leads: list[PropertyLead] = provider.list_leads()
        self._has_analyzed = False
        self._is_analyzing = False
        self._last_error: str | None = None

    @property
    def leads(self) -> list[PropertyLead]:
        return list(self._leads)

    @property
    def has_analyzed(self) -> bool:
        return self._has_analyzed

    @property
    def is_analyzing(self) -> bool:
        return self._is_analyzing

    @property
    def last_error(self) -> str | None:
        return self._last_error

    def high_propensity_leads(self) -> list[PropertyLead]:
        return filter_high_propensity(self._leads)

    def sorted_leads(
        self, sort_by: LeadSortField | None = None, descending: bool = False
    ) -> list[PropertyLead]:
        if sort_by is None:
            return self.leads
        return sort_leads(self._leads, sort_by, descending)

    async def run_analysis(self) -> WorkflowResult[list[PropertyLead]]:
        """Rodada completa: projeção → modelo → merge → persistência.

        Reexecutar substitui toda a categorização anterior.
        """
        if self._is_analyzing:
            raise WorkflowBusyError("propensity")

        self._is_analyzing = True
        try:
            current = self._provider.list_leads()
            projection = [lead.to_ranking_input() for lead in current]
            rankings = await self._gateway.rank_propensity(projection)
        except GenerationError as e:
            log_workflow_failure(
                logger, "propensity", reason=e.reason, error_type=type(e).__name__
            )
            self._last_error = GENERATION_FAILED
            return WorkflowResult.failed(GENERATION_FAILED)
        finally:
            self._is_analyzing = False

        merged = merge_rankings(current, rankings)
        try:
            self._provider.save_categorization(merged)
        except Exception as e:
            log_workflow_failure(
                logger, "propensity", reason="persistence", error_type=type(e).__name__
            )
            self._last_error = PERSISTENCE_FAILED
            return WorkflowResult.failed(PERSISTENCE_FAILED)

        self._leads = merged
        self._has_analyzed = True
        self._last_error = None
        logger.info(
            "propensity_analysis_completed",
            extra={
                "lead_count": len(merged),
                "high_propensity_count": len(filter_high_propensity(merged)),
            },
        )
        return WorkflowResult.succeeded(self.leads)
