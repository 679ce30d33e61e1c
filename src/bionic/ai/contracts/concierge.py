"""Contratos Pydantic para a conversa do concierge (com tool calls)."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from bionic.domain.enums import Role


class TurnKind(StrEnum):
    """Tipo de turno enviado ao gateway."""

    TEXT = "text"
    TOOL_INVOCATION = "tool_invocation"
    TOOL_RESULT = "tool_result"


class ToolCall(BaseModel):
    """Pedido de execução de tool feito pelo modelo."""

    id: str
    """ID atribuído pelo provedor (ecoado no tool result)."""

    name: str
    """Nome da função declarada (ex: qualifyLead)."""

    arguments: dict[str, Any] = Field(default_factory=dict)
    """Argumentos estruturados já decodificados."""


class ConciergeTurn(BaseModel):
    """Um turno do histórico enviado ao modelo.

    Turnos TEXT vêm do transcript visível; TOOL_INVOCATION/TOOL_RESULT
    existem apenas durante a submissão que os produziu.
    """

    kind: TurnKind = TurnKind.TEXT
    role: Role = Role.USER
    content: str | None = None
    tool_calls: list[ToolCall] = Field(default_factory=list)
    tool_call_id: str | None = None
    tool_payload: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def text(cls, role: Role, content: str) -> ConciergeTurn:
        return cls(kind=TurnKind.TEXT, role=role, content=content)

    @classmethod
    def tool_invocation(
        cls, calls: list[ToolCall], content: str | None = None
    ) -> ConciergeTurn:
        return cls(
            kind=TurnKind.TOOL_INVOCATION,
            role=Role.ASSISTANT,
            content=content,
            tool_calls=list(calls),
        )

    @classmethod
    def tool_result(cls, call: ToolCall, payload: dict[str, Any]) -> ConciergeTurn:
        return cls(
            kind=TurnKind.TOOL_RESULT,
            role=Role.USER,
            tool_call_id=call.id,
            tool_payload=payload,
        )


class ConciergeReply(BaseModel):
    """Resposta do modelo: texto opcional e zero ou mais tool calls."""

    text: str | None = None
    tool_calls: list[ToolCall] = Field(default_factory=list)

    @property
    def has_tool_calls(self) -> bool:
        return bool(self.tool_calls)
