"""Tipo de resultado explícito retornado por todos os fluxos.

Nenhum fluxo engole falhas em silêncio: a view recebe sempre status,
valor (quando houver) e um código de erro estável.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from bionic.domain.enums import WorkflowStatus

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class WorkflowResult(Generic[T]):
    """Resultado de uma operação de fluxo (sucesso/falha/skip)."""

    status: WorkflowStatus
    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == WorkflowStatus.SUCCEEDED

    @classmethod
    def succeeded(cls, value: T) -> WorkflowResult[T]:
        return cls(status=WorkflowStatus.SUCCEEDED, value=value)

    @classmethod
    def failed(cls, error: str) -> WorkflowResult[T]:
        return cls(status=WorkflowStatus.FAILED, error=error)

    @classmethod
    def skipped(cls, reason: str) -> WorkflowResult[T]:
        return cls(status=WorkflowStatus.SKIPPED, error=reason)

    @classmethod
    def stale(cls, value: T) -> WorkflowResult[T]:
        return cls(status=WorkflowStatus.STALE, value=value)
