"""Erros da camada de aplicação (fluxos)."""

from __future__ import annotations


class WorkflowBusyError(Exception):
    """Já existe uma operação em andamento neste fluxo.

    Equivale ao controle desabilitado na UI: não é uma falha de geração.
    """

    def __init__(self, workflow: str) -> None:
        self.workflow = workflow
        super().__init__(f"{workflow} already has an operation in flight")


class ConciergeBusyError(WorkflowBusyError):
    """Concierge fora do estado IDLE."""

    def __init__(self) -> None:
        super().__init__("concierge")
