"""Model Gateway: única porta de saída para o modelo hospedado.

Fornece abstração sobre a API OpenAI para os três fluxos:
- Conversa do concierge (com a tool qualifyLead)
- Kit de marketing a partir de notas
- Análise de foto de ambiente (visão)
- Ranking de propensão de venda

O cliente é injetado na construção (nunca criado por chamada). Não há
retry: falha de transporte e falha de contrato viram GenerationError.
"""

from __future__ import annotations

import base64
import json
import logging
from collections.abc import Sequence
from typing import Any

from openai import APIError, APITimeoutError, AsyncOpenAI

from bionic.ai import parser, prompts
from bionic.ai.contracts.concierge import ConciergeReply, ConciergeTurn, ToolCall, TurnKind
from bionic.ai.contracts.propensity import PropensityRanking
from bionic.ai.errors import (
    INVALID_RESPONSE,
    TRANSPORT_FAILURE,
    GenerationError,
    ResponseParseError,
)
from bionic.config.settings import Settings
from bionic.domain.models import MarketingContent, RoomAnalysis
from bionic.observability.logging import get_logger
from bionic.observability.timing import timed

logger: logging.Logger = get_logger(__name__)


def _turn_to_message(turn: ConciergeTurn) -> dict[str, Any]:
    """Converte um turno do histórico para o formato chat completions."""
    if turn.kind == TurnKind.TOOL_INVOCATION:
        return {
            "role": "assistant",
            "content": turn.content or None,
            "tool_calls": [
                {
                    "id": call.id,
                    "type": "function",
                    "function": {
                        "name": call.name,
                        "arguments": json.dumps(call.arguments, ensure_ascii=False),
                    },
                }
                for call in turn.tool_calls
            ],
        }
    if turn.kind == TurnKind.TOOL_RESULT:
        return {
            "role": "tool",
            "tool_call_id": turn.tool_call_id,
            "content": json.dumps(turn.tool_payload, ensure_ascii=False),
        }
    return {"role": turn.role.value, "content": turn.content or ""}


class ModelGateway:
    """Gateway do modelo com timeout e sem retry.

    Responsabilidades:
    - Montar payloads (system instruction, tools, response schemas)
    - Executar uma ida e volta por operação
    - Parsear respostas estruturadas ou falhar por inteiro
    """

    def __init__(
        self,
        client: AsyncOpenAI,
        model: str,
        timeout: float = 30.0,
    ) -> None:
        self._client = client
        self._model = model
        self._timeout = timeout

    @property
    def model(self) -> str:
        return self._model

    async def _complete(self, operation: str, **kwargs: Any) -> Any:
        """Executa chat.completions.create e retorna a primeira mensagem."""
        try:
            with timed(operation, model=self._model):
                response = await self._client.chat.completions.create(
                    model=self._model,
                    timeout=self._timeout,
                    **kwargs,
                )
        except (APIError, APITimeoutError) as e:
            logger.warning(
                f"{operation}_failed",
                extra={"reason": TRANSPORT_FAILURE, "error_type": type(e).__name__},
            )
            raise GenerationError(operation, TRANSPORT_FAILURE, str(e)) from e

        if not getattr(response, "choices", None):
            logger.warning(f"{operation}_failed", extra={"reason": INVALID_RESPONSE})
            raise GenerationError(operation, INVALID_RESPONSE, "response without choices")
        return response.choices[0].message

    def _parse(self, operation: str, func, raw: str | None):
        try:
            return func(raw)
        except ResponseParseError as e:
            logger.warning(
                f"{operation}_failed",
                extra={"reason": INVALID_RESPONSE, "error": str(e)},
            )
            raise GenerationError(operation, INVALID_RESPONSE, str(e)) from e

    async def converse(self, history: Sequence[ConciergeTurn]) -> ConciergeReply:
        """Envia o histórico completo ao concierge.

        Retorna texto e/ou tool calls; quem chama executa as tools e
        reenvia o histórico estendido.
        """
        messages = [{"role": "system", "content": prompts.CONCIERGE_SYSTEM_INSTRUCTION}]
        messages.extend(_turn_to_message(turn) for turn in history)

        message = await self._complete(
            "concierge",
            messages=messages,
            tools=prompts.get_concierge_tools(),
        )

        tool_calls: list[ToolCall] = []
        for raw_call in getattr(message, "tool_calls", None) or []:
            arguments = self._parse(
                "concierge", parser.parse_tool_arguments, raw_call.function.arguments
            )
            tool_calls.append(
                ToolCall(id=raw_call.id, name=raw_call.function.name, arguments=arguments)
            )

        return ConciergeReply(text=message.content or None, tool_calls=tool_calls)

    async def generate_marketing_copy(self, notes: str) -> MarketingContent:
        """Transforma notas cruas no kit de marketing (3 artefatos)."""
        if not notes or not notes.strip():
            raise ValueError("notes must not be blank")

        message = await self._complete(
            "marketing_copy",
            messages=[{"role": "user", "content": prompts.format_marketing_input(notes)}],
            response_format=prompts.get_marketing_response_format(),
        )
        return self._parse("marketing_copy", parser.parse_marketing_content, message.content)

    async def analyze_image(self, image_bytes: bytes, mime_type: str) -> RoomAnalysis:
        """Analisa uma foto de ambiente (estilo + 3 destaques de venda)."""
        if not image_bytes:
            raise ValueError("image_bytes must not be empty")
        if not mime_type or not mime_type.lower().startswith("image/"):
            raise ValueError(f"unsupported mime type: {mime_type!r}")

        encoded = base64.b64encode(image_bytes).decode("ascii")
        message = await self._complete(
            "room_analysis",
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image_url",
                            "image_url": {"url": f"data:{mime_type};base64,{encoded}"},
                        },
                        {"type": "text", "text": prompts.ROOM_ANALYSIS_INSTRUCTION},
                    ],
                }
            ],
            response_format=prompts.get_room_analysis_response_format(),
        )
        return self._parse("room_analysis", parser.parse_room_analysis, message.content)

    async def rank_propensity(
        self, leads: Sequence[dict[str, Any]]
    ) -> list[PropensityRanking]:
        """Pede ao modelo o top 3 de leads com maior chance de venda em 6 meses."""
        message = await self._complete(
            "propensity",
            messages=[{"role": "user", "content": prompts.format_propensity_input(leads)}],
            response_format=prompts.get_propensity_response_format(),
        )
        return self._parse("propensity", parser.parse_propensity_ranking, message.content)


def create_model_gateway(settings: Settings) -> ModelGateway:
    """Cria o gateway a partir das settings (credenciais explícitas)."""
    client = AsyncOpenAI(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        max_retries=0,
    )
    return ModelGateway(
        client=client,
        model=settings.openai_model,
        timeout=settings.openai_timeout_seconds,
    )
