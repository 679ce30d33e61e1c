"""Configurações da aplicação via variáveis de ambiente.

Todas as configurações são carregadas de env vars.
Nunca hardcode secrets ou valores sensíveis.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_OPENAI_MODEL: str = "gpt-4o-mini"


class Settings(BaseSettings):
    """Configurações lidas do ambiente."""

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
    )

    # Aplicação
    service_name: str = "bionic"
    version: str = "0.1.0"
    environment: str = "development"
    log_level: str = "INFO"

    # OpenAI / IA
    openai_api_key: str | None = None  # Chave da API (nunca logar)
    openai_model: str = DEFAULT_OPENAI_MODEL  # Modelo com suporte a tools, JSON schema e visão
    openai_base_url: str | None = None  # Override opcional (proxy/gateway compatível)
    openai_timeout_seconds: float = 30.0  # Timeout por chamada (sem retry)

    # Concierge
    concierge_max_tool_rounds: int = 3  # Máximo de idas e voltas com tool calls por turno

    # Agent Multiplier (imagens)
    image_max_mb: float = 10.0  # Limite de upload da foto do ambiente

    # Workspaces (estado por sessão de navegador, apenas memória)
    workspace_ttl_seconds: int = 7200
    workspace_max_entries: int = 1000

    def validate_openai_config(self) -> list[str]:
        """Valida configuração de OpenAI.

        Retorna lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if not self.openai_api_key:
            errors.append("OPENAI_API_KEY obrigatório para chamar o modelo")
        if not self.openai_model:
            errors.append("OPENAI_MODEL não pode ser vazio")
        if self.openai_timeout_seconds <= 0:
            errors.append("OPENAI_TIMEOUT_SECONDS deve ser > 0")
        return errors

    def validate_concierge(self) -> list[str]:
        """Valida limites do concierge."""
        errors: list[str] = []
        if self.concierge_max_tool_rounds < 1:
            errors.append("CONCIERGE_MAX_TOOL_ROUNDS deve ser >= 1")
        return errors

    def validate_workspace_store(self) -> list[str]:
        """Valida store de workspaces em memória."""
        errors: list[str] = []
        if self.workspace_ttl_seconds <= 0:
            errors.append("WORKSPACE_TTL_SECONDS deve ser > 0")
        if self.workspace_max_entries < 1:
            errors.append("WORKSPACE_MAX_ENTRIES deve ser >= 1")
        if self.image_max_mb <= 0:
            errors.append("IMAGE_MAX_MB deve ser > 0")
        return errors

    @property
    def image_max_bytes(self) -> int:
        """Limite de upload em bytes."""
        return int(self.image_max_mb * 1024 * 1024)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Retorna uma instância cacheada de Settings.

    A cache garante que mesmo múltiplas injeções não criam novos objetos.
    """
    return Settings()
