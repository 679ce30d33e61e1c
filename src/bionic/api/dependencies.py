"""Dependências injetadas nas rotas."""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request, status

from bionic.ai.gateway import ModelGateway
from bionic.application.workspace import Workspace
from bionic.config.settings import Settings
from bionic.infra.workspace_store_memory import InMemoryWorkspaceStore, WorkspaceNotFoundError


def get_settings(request: Request) -> Settings:
    """Retorna settings da aplicação."""

    return request.app.state.settings


def get_gateway(request: Request) -> ModelGateway:
    """Retorna o Model Gateway compartilhado."""

    return request.app.state.gateway


def get_workspace_store(request: Request) -> InMemoryWorkspaceStore:
    """Retorna o store de workspaces ativo."""

    return request.app.state.workspace_store


def get_workspace(
    workspace_id: str,
    store: InMemoryWorkspaceStore = Depends(get_workspace_store),
) -> Workspace:
    """Resolve o workspace do path ou responde 404."""
    try:
        return store.load(workspace_id)
    except WorkspaceNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="workspace_not_found"
        ) from exc
