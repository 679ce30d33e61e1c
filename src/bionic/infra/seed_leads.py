"""Dataset fixo de leads (substituto de um banco de leads real)."""

from __future__ import annotations

from bionic.domain.models import PropertyLead

SEED_LEADS: tuple[dict[str, object], ...] = (
    {"id": "1", "ownerName": "Richard & Linda Sterling", "address": "422 N Canon Dr, Beverly Hills", "yearsOwned": 9, "estimatedEquity": "$3.1M", "estimatedValue": "$5.8M"},  # noqa: E501
    {"id": "2", "ownerName": "Marcus Vane", "address": "1200 Sierra Alta Way, Hollywood Hills", "yearsOwned": 2, "estimatedEquity": "$400K", "estimatedValue": "$4.2M"},  # noqa: E501
    {"id": "3", "ownerName": "The Miller Family Trust", "address": "8902 Wonderland Ave, LA", "yearsOwned": 12, "estimatedEquity": "$2.2M", "estimatedValue": "$2.9M"},  # noqa: E501
    {"id": "4", "ownerName": "Sarah Jenkins", "address": "105 S Rockingham Ave, Brentwood", "yearsOwned": 7, "estimatedEquity": "$4.5M", "estimatedValue": "$8.1M"},  # noqa: E501
    {"id": "5", "ownerName": "Tech Peak LLC", "address": "221 Ocean Ave, Santa Monica", "yearsOwned": 1, "estimatedEquity": "$1.2M", "estimatedValue": "$12.5M"},  # noqa: E501
    {"id": "6", "ownerName": "Gary Thompson", "address": "556 Chalon Rd, Bel Air", "yearsOwned": 15, "estimatedEquity": "$8.0M", "estimatedValue": "$11.2M"},  # noqa: E501
    {"id": "7", "ownerName": "Elena Rodriguez", "address": "1432 Blue Jay Way, Bird Streets", "yearsOwned": 8, "estimatedEquity": "$1.5M", "estimatedValue": "$6.7M"},  # noqa: E501
    {"id": "8", "ownerName": "Global Media Partners", "address": "9021 Melrose Ave, West Hollywood", "yearsOwned": 4, "estimatedEquity": "$600K", "estimatedValue": "$3.5M"},  # noqa: E501
    {"id": "9", "ownerName": "Dr. Alistair Cook", "address": "777 Mulholland Dr, Beverly Crest", "yearsOwned": 6, "estimatedEquity": "$2.8M", "estimatedValue": "$5.1M"},  # noqa: E501
    {"id": "10", "ownerName": "The Peterson Family", "address": "300 Palisades Beach Rd, Pacific Palisades", "yearsOwned": 10, "estimatedEquity": "$5.2M", "estimatedValue": "$9.4M"},  # noqa: E501
)


def load_seed_leads() -> list[PropertyLead]:
    """Retorna cópias novas dos 10 leads base (sem propensão)."""
    return [PropertyLead.model_validate(raw) for raw in SEED_LEADS]
