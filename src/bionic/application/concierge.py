"""Sessão do AI Concierge — máquina de estados da conversa.

Estados: IDLE → AWAITING_REPLY → (TOOL_IN_FLIGHT)* → IDLE.

Cada submissão acrescenta exatamente uma mensagem do usuário e, ao final,
exatamente uma mensagem do assistente (resposta, ou desculpa fixa em caso
de falha). Turnos de tool existem apenas no histórico enviado ao modelo.
"""

from __future__ import annotations

import logging
from typing import Any

from bionic.ai.contracts.concierge import ConciergeReply, ConciergeTurn, ToolCall
from bionic.ai.errors import GenerationError
from bionic.ai.gateway import ModelGateway
from bionic.ai.prompts import QUALIFY_LEAD_TOOL_NAME
from bionic.application.errors import ConciergeBusyError
from bionic.domain.enums import ConciergeState, Role, WorkflowStatus
from bionic.domain.models import Message, QualifiedLead
from bionic.domain.protocols.qualification import QualificationRecorderProtocol
from bionic.domain.results import WorkflowResult
from bionic.observability.logging import get_logger, log_workflow_failure

logger: logging.Logger = get_logger(__name__)

WELCOME_MESSAGE = (
    "Welcome to the Bionic Brokerage Concierge. "
    "How can I help you dominate the market today?"
)
ERROR_MESSAGE = "Technical glitch in the matrix. Please try again."
EMPTY_REPLY_FALLBACK = "I've updated the records accordingly. Anything else?"

DEFAULT_MAX_TOOL_ROUNDS = 3


class ToolRoundsExceededError(Exception):
    """O modelo continuou pedindo tools além do limite configurado."""

    def __init__(self, max_rounds: int) -> None:
        self.max_rounds = max_rounds
        super().__init__(f"tool call rounds exceeded ({max_rounds})")


def _string_argument(arguments: dict[str, Any], key: str) -> str:
    """Valor textual do argumento; null e não-strings contam como ausentes."""
    value = arguments.get(key)
    if not isinstance(value, str):
        return ""
    return value.strip()


class ConciergeSession:
    """Transcript linear + lead qualificado corrente (apenas memória)."""

    def __init__(
        self,
        gateway: ModelGateway,
        recorder: QualificationRecorderProtocol,
        max_tool_rounds: int = DEFAULT_MAX_TOOL_ROUNDS,
    ) -> None:
        if max_tool_rounds < 1:
            raise ValueError("max_tool_rounds must be >= 1")
        self._gateway = gateway
        self._recorder = recorder
        self._max_tool_rounds = max_tool_rounds
        self._messages: list[Message] = [Message(role=Role.ASSISTANT, content=WELCOME_MESSAGE)]
        self._qualified_lead: QualifiedLead | None = None
        self._state = ConciergeState.IDLE
        self._last_error: str | None = None

    @property
    def messages(self) -> list[Message]:
        return list(self._messages)

    @property
    def qualified_lead(self) -> QualifiedLead | None:
        return self._qualified_lead

    @property
    def state(self) -> ConciergeState:
        return self._state

    @property
    def last_error(self) -> str | None:
        return self._last_error

    @property
    def is_busy(self) -> bool:
        return self._state != ConciergeState.IDLE

    def _history(self) -> list[ConciergeTurn]:
        return [ConciergeTurn.text(m.role, m.content) for m in self._messages]

    def _append(self, role: Role, content: str) -> Message:
        message = Message(role=role, content=content)
        self._messages.append(message)
        return message

    async def submit(self, text: str) -> WorkflowResult[Message]:
        """Processa um turno do usuário até obter a resposta final."""
        if not text or not text.strip():
            return WorkflowResult.skipped("blank_input")
        if self.is_busy:
            raise ConciergeBusyError()

        self._append(Role.USER, text)
        self._state = ConciergeState.AWAITING_REPLY
        history = self._history()
        try:
            reply = await self._gateway.converse(history)
            reply = await self._resolve_tool_calls(history, reply)
        except (GenerationError, ToolRoundsExceededError) as e:
            return self._fail(getattr(e, "reason", "tool_rounds_exceeded"), e)
        except Exception as e:
            # Falha de tool (ex: recorder externo) também vira a desculpa fixa.
            return self._fail("tool_failure", e)
        finally:
            self._state = ConciergeState.IDLE

        self._last_error = None
        message = self._append(Role.ASSISTANT, reply.text or EMPTY_REPLY_FALLBACK)
        return WorkflowResult.succeeded(message)

    def _fail(self, reason: str, error: Exception) -> WorkflowResult[Message]:
        log_workflow_failure(logger, "concierge", reason=reason, error_type=type(error).__name__)
        self._last_error = "generation_failed"
        message = self._append(Role.ASSISTANT, ERROR_MESSAGE)
        return WorkflowResult(
            status=WorkflowStatus.FAILED, value=message, error="generation_failed"
        )

    async def _resolve_tool_calls(
        self, history: list[ConciergeTurn], reply: ConciergeReply
    ) -> ConciergeReply:
        """Executa tool calls e reconsulta o modelo até vir texto final."""
        rounds = 0
        while reply.has_tool_calls:
            if rounds >= self._max_tool_rounds:
                raise ToolRoundsExceededError(self._max_tool_rounds)
            rounds += 1
            self._state = ConciergeState.TOOL_IN_FLIGHT
            # Todas as calls de uma resposta são respondidas antes da nova consulta.
            history.append(ConciergeTurn.tool_invocation(reply.tool_calls, reply.text))
            for call in reply.tool_calls:
                payload = self._execute_tool(call)
                history.append(ConciergeTurn.tool_result(call, payload))
            reply = await self._gateway.converse(history)
        return reply

    def _execute_tool(self, call: ToolCall) -> dict[str, Any]:
        if call.name != QUALIFY_LEAD_TOOL_NAME:
            logger.warning("unknown_tool_call", extra={"tool_name": call.name})
            return {"status": "error", "message": f"Unknown tool: {call.name}"}

        name = _string_argument(call.arguments, "name")
        budget = _string_argument(call.arguments, "budget")
        if not name or not budget:
            logger.warning("qualify_lead_missing_arguments", extra={"tool_call_id": call.id})
            return {"status": "error", "message": "Both name and budget are required."}

        lead = QualifiedLead(name=name, budget=budget)
        self._recorder.record(lead)
        self._qualified_lead = lead
        return {
            "status": "success",
            "message": (
                f"Lead {name} with budget {budget} has been marked as qualified "
                "in the Bionic CRM."
            ),
        }
