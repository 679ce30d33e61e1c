"""Implementação de WorkspaceStore em memória (estado vive só na sessão)."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from bionic.observability.logging import get_logger

if TYPE_CHECKING:
    from bionic.application.workspace import Workspace

logger: logging.Logger = get_logger(__name__)


class WorkspaceNotFoundError(KeyError):
    """Workspace inexistente ou expirado."""


class InMemoryWorkspaceStore:
    """Armazenamento em memória com TTL deslizante e limite de entradas."""

    def __init__(self, ttl_seconds: int = 7200, max_entries: int = 1000) -> None:
        self._ttl_seconds = ttl_seconds
        self._max_entries = max_entries
        self._workspaces: dict[str, tuple[Workspace, float]] = {}

    def _now(self) -> float:
        return datetime.now(tz=UTC).timestamp()

    def _purge_expired(self) -> None:
        now = self._now()
        expired = [wid for wid, (_, expire_at) in self._workspaces.items() if now > expire_at]
        for wid in expired:
            del self._workspaces[wid]
        if expired:
            logger.debug("Workspaces expired (in-memory)", extra={"count": len(expired)})

    def save(self, workspace: Workspace) -> None:
        self._purge_expired()
        if (
            workspace.workspace_id not in self._workspaces
            and len(self._workspaces) >= self._max_entries
        ):
            # Descarta o workspace que expira primeiro.
            oldest = min(self._workspaces, key=lambda wid: self._workspaces[wid][1])
            del self._workspaces[oldest]
            logger.info("workspace_evicted", extra={"workspace_id": oldest[:8] + "..."})
        self._workspaces[workspace.workspace_id] = (workspace, self._now() + self._ttl_seconds)
        logger.debug(
            "Workspace saved (in-memory)",
            extra={"workspace_id": workspace.workspace_id[:8] + "..."},
        )

    def load(self, workspace_id: str) -> Workspace:
        """Retorna o workspace e renova o TTL.

        Raises:
            WorkspaceNotFoundError: id desconhecido ou expirado
        """
        entry = self._workspaces.get(workspace_id)
        if entry is None:
            raise WorkspaceNotFoundError(workspace_id)

        workspace, expire_at = entry
        now = self._now()
        if now > expire_at:
            del self._workspaces[workspace_id]
            logger.debug(
                "Workspace expired (in-memory)",
                extra={"workspace_id": workspace_id[:8] + "..."},
            )
            raise WorkspaceNotFoundError(workspace_id)

        self._workspaces[workspace_id] = (workspace, now + self._ttl_seconds)
        return workspace

    def delete(self, workspace_id: str) -> bool:
        if workspace_id in self._workspaces:
            del self._workspaces[workspace_id]
            return True
        return False

    def __len__(self) -> int:
        return len(self._workspaces)
