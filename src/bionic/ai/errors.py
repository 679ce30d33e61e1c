"""Erros da camada de IA (Model Gateway)."""

from __future__ import annotations

TRANSPORT_FAILURE = "transport"
INVALID_RESPONSE = "invalid_response"


class ResponseParseError(Exception):
    """Resposta do modelo fora do formato/contrato esperado."""

    pass


class GenerationError(Exception):
    """Falha única de geração propagada aos fluxos.

    Colapsa erro de transporte/autenticação e erro de contrato da resposta
    em um só desfecho; `reason` preserva a origem para logs.
    """

    def __init__(self, operation: str, reason: str, message: str | None = None) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(message or f"{operation} failed ({reason})")
