"""Rotas HTTP: shell de navegação e as três abas."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from bionic.ai.gateway import ModelGateway
from bionic.api import views
from bionic.api.dependencies import get_gateway, get_settings, get_workspace, get_workspace_store
from bionic.application.clipboard import ClipboardSection, clipboard_text
from bionic.application.errors import WorkflowBusyError
from bionic.application.workspace import Workspace, build_workspace
from bionic.config.settings import Settings
from bionic.domain.enums import LeadSortField, Tab, WorkflowStatus
from bionic.domain.results import WorkflowResult
from bionic.infra.workspace_store_memory import InMemoryWorkspaceStore
from bionic.observability.logging import get_logger
from bionic.observability.middleware import get_correlation_id

logger = get_logger(__name__)

router = APIRouter()


class TabSelection(BaseModel):
    tab: Tab


class ConciergeInput(BaseModel):
    text: str


class MarketingNotesInput(BaseModel):
    notes: str


def _blank_input() -> HTTPException:
    return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="blank_input")


def _busy(exc: WorkflowBusyError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail={"error": "workflow_busy", "workflow": exc.workflow},
    )


def _raise_for_failure(result: WorkflowResult[Any]) -> None:
    if result.status == WorkflowStatus.FAILED:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"error": result.error, "correlation_id": get_correlation_id()},
        )


@router.get("/health")
def health(settings: Settings = Depends(get_settings)) -> dict[str, str]:
    """Healthcheck simples."""
    return {"status": "ok", "service": settings.service_name, "version": settings.version}


@router.get("/tabs")
def list_tabs() -> list[dict[str, str]]:
    """Abas navegáveis do shell."""
    return views.tabs_view()


# -- workspaces (shell) ---------------------------------------------------------


@router.post("/workspaces", status_code=status.HTTP_201_CREATED)
def create_workspace(
    settings: Settings = Depends(get_settings),
    gateway: ModelGateway = Depends(get_gateway),
    store: InMemoryWorkspaceStore = Depends(get_workspace_store),
) -> dict[str, Any]:
    """Cria um workspace isolado (equivale a abrir o app no navegador)."""
    workspace = build_workspace(gateway, settings)
    store.save(workspace)
    logger.info("workspace_created", extra={"workspace_id": workspace.workspace_id[:8] + "..."})
    return views.workspace_view(workspace)


@router.get("/workspaces/{workspace_id}")
def read_workspace(workspace: Workspace = Depends(get_workspace)) -> dict[str, Any]:
    return views.workspace_view(workspace)


@router.put("/workspaces/{workspace_id}/tab")
def select_tab(
    selection: TabSelection,
    workspace: Workspace = Depends(get_workspace),
) -> dict[str, Any]:
    """Troca a aba ativa; o estado de cada aba é preservado."""
    workspace.active_tab = selection.tab
    return views.workspace_view(workspace)


# -- AI Concierge -------------------------------------------------------------


@router.get("/workspaces/{workspace_id}/concierge")
def read_concierge(workspace: Workspace = Depends(get_workspace)) -> dict[str, Any]:
    return views.concierge_view(workspace.concierge)


@router.post("/workspaces/{workspace_id}/concierge/messages")
async def send_concierge_message(
    payload: ConciergeInput,
    workspace: Workspace = Depends(get_workspace),
) -> dict[str, Any]:
    """Envia um turno; falhas aparecem como mensagem fixa no transcript."""
    try:
        result = await workspace.concierge.submit(payload.text)
    except WorkflowBusyError as exc:
        raise _busy(exc) from exc
    if result.status == WorkflowStatus.SKIPPED:
        raise _blank_input()

    return {"result": views.result_view(result), **views.concierge_view(workspace.concierge)}


# -- Agent Multiplier ---------------------------------------------------------


@router.get("/workspaces/{workspace_id}/multiplier")
def read_multiplier(workspace: Workspace = Depends(get_workspace)) -> dict[str, Any]:
    return views.marketing_view(workspace.marketing)


@router.post("/workspaces/{workspace_id}/multiplier/copy")
async def generate_marketing_copy(
    payload: MarketingNotesInput,
    workspace: Workspace = Depends(get_workspace),
) -> dict[str, Any]:
    try:
        result = await workspace.marketing.generate(payload.notes)
    except WorkflowBusyError as exc:
        raise _busy(exc) from exc
    if result.status == WorkflowStatus.SKIPPED:
        raise _blank_input()
    _raise_for_failure(result)

    return {"result": views.result_view(result), **views.marketing_view(workspace.marketing)}


@router.get("/workspaces/{workspace_id}/multiplier/clipboard/{section}")
def read_clipboard(
    section: ClipboardSection,
    index: int | None = Query(None, ge=0),
    workspace: Workspace = Depends(get_workspace),
) -> PlainTextResponse:
    """Texto exato copiado para a área de transferência."""
    content = workspace.marketing.content
    if content is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="no_content")
    try:
        text = clipboard_text(content, section, index)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="invalid_index"
        ) from exc
    return PlainTextResponse(text)


@router.put("/workspaces/{workspace_id}/multiplier/image")
async def upload_room_image(
    request: Request,
    settings: Settings = Depends(get_settings),
    workspace: Workspace = Depends(get_workspace),
) -> dict[str, Any]:
    """Seleciona a foto do ambiente (corpo bruto + Content-Type)."""
    raw_body = await request.body()
    if len(raw_body) > settings.image_max_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail="image_too_large"
        )

    mime_type = (request.headers.get("content-type") or "").split(";")[0].strip()
    try:
        workspace.marketing.select_image(raw_body, mime_type)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="invalid_image"
        ) from exc
    return views.marketing_view(workspace.marketing)


@router.delete("/workspaces/{workspace_id}/multiplier/image")
def clear_room_image(workspace: Workspace = Depends(get_workspace)) -> dict[str, Any]:
    workspace.marketing.clear_image()
    return views.marketing_view(workspace.marketing)


@router.post("/workspaces/{workspace_id}/multiplier/image/analysis")
async def analyze_room_image(workspace: Workspace = Depends(get_workspace)) -> dict[str, Any]:
    try:
        result = await workspace.marketing.analyze_selected_image()
    except WorkflowBusyError as exc:
        raise _busy(exc) from exc
    if result.status == WorkflowStatus.SKIPPED:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="no_image_selected"
        )
    _raise_for_failure(result)

    return {"result": views.result_view(result), **views.marketing_view(workspace.marketing)}


# -- Predictive Hunter --------------------------------------------------------


@router.get("/workspaces/{workspace_id}/hunter")
def read_hunter(
    sort_by: LeadSortField | None = Query(None),
    descending: bool = Query(False),
    workspace: Workspace = Depends(get_workspace),
) -> dict[str, Any]:
    return views.hunter_view(workspace.hunter, sort_by, descending)


@router.post("/workspaces/{workspace_id}/hunter/analysis")
async def run_propensity_analysis(
    workspace: Workspace = Depends(get_workspace),
) -> dict[str, Any]:
    try:
        result = await workspace.hunter.run_analysis()
    except WorkflowBusyError as exc:
        raise _busy(exc) from exc
    _raise_for_failure(result)

    return {"result": views.result_view(result), **views.hunter_view(workspace.hunter)}


@router.delete("/workspaces/{workspace_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workspace(
    workspace_id: str,
    store: InMemoryWorkspaceStore = Depends(get_workspace_store),
) -> Response:
    if not store.delete(workspace_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="workspace_not_found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
