"""Workspace: o estado de uma sessão de navegador (uma instância por aba).

Os três fluxos não compartilham estado mutável entre si.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from bionic.ai.gateway import ModelGateway
from bionic.application.concierge import ConciergeSession
from bionic.application.marketing import MarketingGenerator
from bionic.application.propensity import PropensityRanker
from bionic.config.settings import Settings
from bionic.domain.enums import Tab
from bionic.domain.protocols.lead_provider import LeadProviderProtocol
from bionic.domain.protocols.qualification import QualificationRecorderProtocol
from bionic.infra.lead_provider_memory import InMemoryLeadProvider
from bionic.infra.qualification_log import LoggingQualificationRecorder
from bionic.utils.ids import new_workspace_id


@dataclass
class Workspace:
    """Abas isoladas + aba ativa."""

    workspace_id: str
    concierge: ConciergeSession
    marketing: MarketingGenerator
    hunter: PropensityRanker
    active_tab: Tab = field(default=Tab.CONCIERGE)


def build_workspace(
    gateway: ModelGateway,
    settings: Settings,
    lead_provider: LeadProviderProtocol | None = None,
    recorder: QualificationRecorderProtocol | None = None,
) -> Workspace:
    """Monta um workspace novo (cada um com sua cópia do dataset de leads)."""
    return Workspace(
        workspace_id=new_workspace_id(),
        concierge=ConciergeSession(
            gateway,
            recorder or LoggingQualificationRecorder(),
            max_tool_rounds=settings.concierge_max_tool_rounds,
        ),
        marketing=MarketingGenerator(gateway, max_image_bytes=settings.image_max_bytes),
        hunter=PropensityRanker(gateway, lead_provider or InMemoryLeadProvider()),
    )
