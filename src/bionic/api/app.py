"""Fábrica da aplicação FastAPI.

Execução local:
    uvicorn --factory bionic.api.app:create_app
"""

from __future__ import annotations

from fastapi import FastAPI

from bionic.ai.gateway import ModelGateway, create_model_gateway
from bionic.api.routes import router
from bionic.config.settings import Settings, get_settings
from bionic.infra.workspace_store_memory import InMemoryWorkspaceStore
from bionic.observability.logging import configure_logging, get_logger
from bionic.observability.middleware import RequestContextMiddleware

logger = get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    gateway: ModelGateway | None = None,
) -> FastAPI:
    """Cria a aplicação FastAPI.

    Um gateway injetado (fake em testes) dispensa a validação de credenciais.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.service_name)

    validation_errors: list[str] = []
    if gateway is None:
        validation_errors.extend(settings.validate_openai_config())
    validation_errors.extend(settings.validate_concierge())
    validation_errors.extend(settings.validate_workspace_store())

    if validation_errors:
        error_msg = "; ".join(validation_errors)
        raise ValueError(f"Configuração inválida: {error_msg}")

    app = FastAPI(title=settings.service_name, version=settings.version)
    app.add_middleware(RequestContextMiddleware)
    app.include_router(router)

    app.state.settings = settings
    app.state.gateway = gateway or create_model_gateway(settings)
    app.state.workspace_store = InMemoryWorkspaceStore(
        ttl_seconds=settings.workspace_ttl_seconds,
        max_entries=settings.workspace_max_entries,
    )

    logger.info(
        "app_created",
        extra={"environment": settings.environment, "model": app.state.gateway.model},
    )
    return app
