"""Contratos Pydantic para as quatro operações do Model Gateway."""

from bionic.ai.contracts.concierge import (
    ConciergeReply,
    ConciergeTurn,
    ToolCall,
    TurnKind,
)
from bionic.ai.contracts.propensity import (
    MAX_RANKED_LEADS,
    PropensityRanking,
    PropensityRankingResult,
)

__all__ = [
    "ConciergeReply",
    "ConciergeTurn",
    "ToolCall",
    "TurnKind",
    "MAX_RANKED_LEADS",
    "PropensityRanking",
    "PropensityRankingResult",
]
