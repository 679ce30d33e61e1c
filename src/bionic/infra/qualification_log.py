"""Registro de lead qualificado via log estruturado.

Substitui a escrita na coleção de leads: o registro é descobrível nos logs
com name, budget e status fixo "qualified". Nada é persistido.
"""

from __future__ import annotations

import logging

from bionic.domain.models import QualifiedLead
from bionic.domain.protocols.qualification import (
    QUALIFIED_STATUS,
    QualificationRecorderProtocol,
)
from bionic.observability.logging import get_logger

logger: logging.Logger = get_logger(__name__)

LEADS_COLLECTION = "leads"


class LoggingQualificationRecorder(QualificationRecorderProtocol):
    """Emite `leads_collection_update` para cada lead qualificado."""

    def __init__(self, collection: str = LEADS_COLLECTION) -> None:
        self._collection = collection

    def record(self, lead: QualifiedLead) -> None:
        logger.info(
            "leads_collection_update",
            extra={
                "collection": self._collection,
                "lead_name": lead.name,
                "lead_budget": lead.budget,
                "lead_status": QUALIFIED_STATUS,
            },
        )
