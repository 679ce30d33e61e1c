"""Texto copiado para a área de transferência a partir do kit de marketing."""

from __future__ import annotations

from enum import StrEnum

from bionic.domain.models import MarketingContent

BULLET = "•"


class ClipboardSection(StrEnum):
    """Blocos copiáveis do kit de marketing."""

    LISTING = "listing"
    SOCIAL = "social"
    FLYER = "flyer"
    FLYER_POINT = "flyer_point"


def format_flyer_block(points: list[str]) -> str:
    """Bullets prefixados com "• " e unidos por quebra de linha."""
    return "\n".join(f"{BULLET} {point}" for point in points)


def clipboard_text(
    content: MarketingContent,
    section: ClipboardSection,
    index: int | None = None,
) -> str:
    """Retorna exatamente o texto a ser copiado para a seção pedida.

    Raises:
        ValueError: seção flyer_point sem index válido
    """
    if section == ClipboardSection.LISTING:
        return content.professional_listing
    if section == ClipboardSection.SOCIAL:
        return content.instagram_caption
    if section == ClipboardSection.FLYER:
        return format_flyer_block(content.flyer_points)

    if index is None or not 0 <= index < len(content.flyer_points):
        raise ValueError(f"flyer point index out of range: {index}")
    return content.flyer_points[index]
