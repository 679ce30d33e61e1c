"""Camada de infraestrutura — adapters em memória e registro por log.

Conforme regras do projeto:
- Infraestrutura não decide regra de negócio
- Domínio não conhece infraestrutura
- Logs estruturados sem notas, imagens ou prompts brutos
"""

from bionic.infra.lead_provider_memory import InMemoryLeadProvider
from bionic.infra.qualification_log import LoggingQualificationRecorder
from bionic.infra.seed_leads import SEED_LEADS, load_seed_leads
from bionic.infra.workspace_store_memory import InMemoryWorkspaceStore, WorkspaceNotFoundError

__all__ = [
    "InMemoryLeadProvider",
    "LoggingQualificationRecorder",
    "SEED_LEADS",
    "load_seed_leads",
    "InMemoryWorkspaceStore",
    "WorkspaceNotFoundError",
]
