"""Geradores de identificadores."""

from __future__ import annotations

import uuid


def new_workspace_id() -> str:
    """Gera um workspace_id único."""

    return str(uuid.uuid4())


def new_image_id() -> str:
    """Gera um identificador para cada imagem selecionada.

    Reenviar os mesmos bytes gera um novo id: a seleção é o que conta.
    """

    return uuid.uuid4().hex
