"""Middlewares de observabilidade: correlation_id e workspace por request."""

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

CORRELATION_ID_HEADER = "x-correlation-id"

_WORKSPACE_PATH_RE = re.compile(r"^/workspaces/([^/]+)")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")
_workspace_id: ContextVar[str] = ContextVar("workspace_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id corrente (ou vazio)."""

    return _correlation_id.get()


def get_workspace_id() -> str:
    """Retorna o prefixo do workspace da request corrente (ou vazio)."""

    return _workspace_id.get()


def _workspace_prefix(path: str) -> str:
    match = _WORKSPACE_PATH_RE.match(path)
    return match.group(1)[:8] if match else ""


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Gera ou propaga correlation_id e expõe o workspace aos logs.

    Só o prefixo do workspace_id vai para o contexto de log.
    """

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        correlation_id = request.headers.get(CORRELATION_ID_HEADER) or str(uuid.uuid4())
        cid_token = _correlation_id.set(correlation_id)
        ws_token = _workspace_id.set(_workspace_prefix(request.url.path))
        try:
            response = await call_next(request)
        finally:
            _workspace_id.reset(ws_token)
            _correlation_id.reset(cid_token)

        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response
