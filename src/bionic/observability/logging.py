"""Configuração de logging estruturado (JSON)."""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

from bionic.observability.middleware import get_correlation_id, get_workspace_id

_LOG_FORMAT = (
    "%(asctime)s %(levelname)s %(name)s %(message)s "
    "%(correlation_id)s %(workspace)s %(service)s"
)


class RequestContextFilter(logging.Filter):
    """Insere correlation_id, workspace e service no record de log.

    Importante: nunca adicionar notas, imagens ou prompts brutos nos logs.
    """

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self._service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        # correlation_id explícito via `extra` tem precedência.
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else get_correlation_id()
        record.workspace = getattr(record, "workspace", None) or get_workspace_id()
        record.service = self._service_name
        return True


def configure_logging(level: str, service_name: str) -> None:
    """Configura logging JSON no root logger (substitui handlers existentes)."""

    formatter = JsonFormatter(
        _LOG_FORMAT,
        rename_fields={"levelname": "level", "name": "logger"},
    )

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(RequestContextFilter(service_name))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [handler]

    # O cliente HTTP do SDK loga cada request em INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Retorna logger simples; o filtro injeta o contexto da request."""

    return logging.getLogger(name)


def log_workflow_failure(
    logger: logging.Logger,
    workflow: str,
    reason: str | None = None,
    error_type: str | None = None,
) -> None:
    """Log de falha de um fluxo (sem PII).

    A falha já foi convertida em WorkflowResult; este log é o rastro
    operacional. `reason` vem de GenerationError (transport | invalid_response).

    Exemplo:
        log_workflow_failure(logger, "marketing_copy", reason="transport")
    """
    extra: dict[str, object] = {"workflow": workflow, "workflow_failed": True}
    if reason:
        extra["reason"] = reason
    if error_type:
        extra["error_type"] = error_type

    logger.warning("workflow_failed", extra=extra)
