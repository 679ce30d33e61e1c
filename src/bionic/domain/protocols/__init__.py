"""Re-exports dos Protocolos de domínio para uso por Application."""

from __future__ import annotations

from bionic.domain.protocols.lead_provider import LeadProviderProtocol
from bionic.domain.protocols.qualification import (
    QUALIFIED_STATUS,
    QualificationRecorderProtocol,
)

__all__ = [
    "LeadProviderProtocol",
    "QualificationRecorderProtocol",
    "QUALIFIED_STATUS",
]
