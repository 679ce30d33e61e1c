"""Protocolo de domínio para a fonte de leads de imóveis.

Substitui o dataset fixo por uma interface injetável: uma store real
pode entrar no lugar sem alterar o fluxo de ranking.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from bionic.domain.models import PropertyLead


class LeadProviderProtocol(ABC):
    """Contrato mínimo para listar leads e persistir categorização."""

    @abstractmethod
    def list_leads(self) -> list[PropertyLead]:
        """Retorna os leads atuais, na ordem de exibição."""

    @abstractmethod
    def save_categorization(self, leads: Sequence[PropertyLead]) -> None:
        """Persiste score/categoria/justificativa dos leads informados.

        Apenas os campos de propensão podem mudar; o join é feito por id.
        """
