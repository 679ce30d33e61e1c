"""Configurações centralizadas do bionic.

Este módulo exporta:
- Settings: classe de configuração via variáveis de ambiente
- get_settings: função cacheada para obter instância única
- DEFAULT_OPENAI_MODEL: modelo padrão para os três fluxos

Uso típico:
    from bionic.config import get_settings
"""

from bionic.config.settings import DEFAULT_OPENAI_MODEL, Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "DEFAULT_OPENAI_MODEL",
]
