"""Agent Multiplier — kit de marketing a partir de notas e análise de fotos.

Duas operações independentes, sem estado compartilhado:
- notas → MarketingContent (substituição atômica, falha preserva o anterior)
- imagem selecionada → RoomAnalysis, sempre vinculada ao image_id de origem
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bionic.ai.errors import GenerationError
from bionic.ai.gateway import ModelGateway
from bionic.application.errors import WorkflowBusyError
from bionic.domain.models import MarketingContent, RoomAnalysis
from bionic.domain.results import WorkflowResult
from bionic.observability.logging import get_logger, log_workflow_failure
from bionic.utils.ids import new_image_id

logger: logging.Logger = get_logger(__name__)

GENERATION_FAILED = "generation_failed"


@dataclass(frozen=True, slots=True)
class SelectedImage:
    """Imagem atualmente selecionada para análise."""

    image_id: str
    data: bytes
    mime_type: str

    @property
    def size_bytes(self) -> int:
        return len(self.data)


@dataclass(frozen=True, slots=True)
class ImageAnalysis:
    """Resultado de análise com referência à imagem que o originou."""

    image_id: str
    analysis: RoomAnalysis


class MarketingGenerator:
    """Estado local da aba Agent Multiplier."""

    def __init__(self, gateway: ModelGateway, max_image_bytes: int | None = None) -> None:
        self._gateway = gateway
        self._max_image_bytes = max_image_bytes

        self._content: MarketingContent | None = None
        self._copy_error: str | None = None
        self._is_generating = False

        self._image: SelectedImage | None = None
        self._analysis: ImageAnalysis | None = None
        self._analysis_error: str | None = None
        self._is_analyzing = False

    # -- notas → copy -------------------------------------------------------

    @property
    def content(self) -> MarketingContent | None:
        return self._content

    @property
    def copy_error(self) -> str | None:
        return self._copy_error

    @property
    def is_generating(self) -> bool:
        return self._is_generating

    async def generate(self, notes: str) -> WorkflowResult[MarketingContent]:
        """Gera o kit de marketing; notas em branco não chamam o modelo."""
        if not notes or not notes.strip():
            return WorkflowResult.skipped("blank_input")
        if self._is_generating:
            raise WorkflowBusyError("marketing_copy")

        self._is_generating = True
        try:
            content = await self._gateway.generate_marketing_copy(notes)
        except GenerationError as e:
            log_workflow_failure(
                logger, "marketing_copy", reason=e.reason, error_type=type(e).__name__
            )
            self._copy_error = GENERATION_FAILED
            return WorkflowResult.failed(GENERATION_FAILED)
        finally:
            self._is_generating = False

        self._content = content
        self._copy_error = None
        return WorkflowResult.succeeded(content)

    # -- imagem → análise ---------------------------------------------------

    @property
    def selected_image(self) -> SelectedImage | None:
        return self._image

    @property
    def is_analyzing(self) -> bool:
        return self._is_analyzing

    @property
    def analysis_error(self) -> str | None:
        return self._analysis_error

    @property
    def current_analysis(self) -> RoomAnalysis | None:
        """Análise exibível: só quando referencia a imagem selecionada."""
        if self._analysis is None or self._image is None:
            return None
        if self._analysis.image_id != self._image.image_id:
            return None
        return self._analysis.analysis

    def select_image(self, data: bytes, mime_type: str) -> SelectedImage:
        """Seleciona nova imagem e limpa imediatamente qualquer análise anterior."""
        if not data:
            raise ValueError("image data must not be empty")
        if not mime_type or not mime_type.lower().startswith("image/"):
            raise ValueError(f"unsupported mime type: {mime_type!r}")
        if self._max_image_bytes is not None and len(data) > self._max_image_bytes:
            raise ValueError(f"image exceeds {self._max_image_bytes} bytes")

        self._image = SelectedImage(image_id=new_image_id(), data=data, mime_type=mime_type)
        self._analysis = None
        self._analysis_error = None
        logger.info(
            "room_image_selected",
            extra={"image_id": self._image.image_id, "size_bytes": len(data)},
        )
        return self._image

    def clear_image(self) -> None:
        self._image = None
        self._analysis = None
        self._analysis_error = None

    async def analyze_selected_image(self) -> WorkflowResult[RoomAnalysis]:
        """Analisa a imagem selecionada no momento da chamada.

        Se a imagem for trocada durante a chamada, o resultado é descartado
        (STALE) e não sobrescreve o estado da nova seleção.
        """
        image = self._image
        if image is None:
            return WorkflowResult.skipped("no_image_selected")
        if self._is_analyzing:
            raise WorkflowBusyError("room_analysis")

        self._is_analyzing = True
        try:
            analysis = await self._gateway.analyze_image(image.data, image.mime_type)
        except GenerationError as e:
            log_workflow_failure(
                logger, "room_analysis", reason=e.reason, error_type=type(e).__name__
            )
            if self._image is not None and self._image.image_id == image.image_id:
                self._analysis_error = GENERATION_FAILED
            return WorkflowResult.failed(GENERATION_FAILED)
        finally:
            self._is_analyzing = False

        if self._image is None or self._image.image_id != image.image_id:
            logger.info("room_analysis_discarded", extra={"image_id": image.image_id})
            return WorkflowResult.stale(analysis)

        self._analysis = ImageAnalysis(image_id=image.image_id, analysis=analysis)
        self._analysis_error = None
        return WorkflowResult.succeeded(analysis)
