"""Protocolo de domínio para o registro de leads qualificados."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bionic.domain.models import QualifiedLead

QUALIFIED_STATUS = "qualified"


class QualificationRecorderProtocol(ABC):
    """Recebe o efeito colateral da tool qualifyLead."""

    @abstractmethod
    def record(self, lead: QualifiedLead) -> None: ...
