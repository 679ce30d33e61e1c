"""Implementação de LeadProvider em memória (dataset fixo, dev/testes)."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from bionic.domain.models import PropertyLead
from bionic.domain.protocols.lead_provider import LeadProviderProtocol
from bionic.infra.seed_leads import load_seed_leads
from bionic.observability.logging import get_logger

logger: logging.Logger = get_logger(__name__)

_PROPENSITY_FIELDS = ("propensity_score", "propensity_reasoning", "propensity_category")


class InMemoryLeadProvider(LeadProviderProtocol):
    """Leads em memória, semeados na construção (não usar em produção)."""

    def __init__(self, leads: Sequence[PropertyLead] | None = None) -> None:
        seed = load_seed_leads() if leads is None else leads
        self._leads: dict[str, PropertyLead] = {}
        for lead in seed:
            if lead.id in self._leads:
                raise ValueError(f"duplicate lead id: {lead.id}")
            self._leads[lead.id] = lead.model_copy()

    def list_leads(self) -> list[PropertyLead]:
        return [lead.model_copy() for lead in self._leads.values()]

    def save_categorization(self, leads: Sequence[PropertyLead]) -> None:
        updated = 0
        for lead in leads:
            current = self._leads.get(lead.id)
            if current is None:
                logger.warning("lead_not_found", extra={"lead_id": lead.id})
                continue
            self._leads[lead.id] = current.model_copy(
                update={field: getattr(lead, field) for field in _PROPENSITY_FIELDS}
            )
            updated += 1
        logger.debug("Lead categorization saved (in-memory)", extra={"updated": updated})
