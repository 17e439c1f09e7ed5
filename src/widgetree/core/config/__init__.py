# src/widgetree/core/config/__init__.py

"""
Camada de configuração do Widgetree.

Este pacote contém as estruturas e utilitários responsáveis por carregar
arquivos de configuração de widgets, mesclar overrides locais e ler as
opções do transformer.

Responsabilidades do pacote:
    - Carregamento de arquivos (base + override local) em YAML ou JSON
    - Resolução da configuração final via deep-merge determinístico
    - Leitura da seção `transform` (TransformSettings)

Limites explícitos:
    - Não interpreta widgets (responsabilidade de `core.widgets`)
    - Não avalia valores de atributo
"""

from .errors import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfigTypeConflictError,
    InvalidConfigRootTypeError,
    InvalidSettingsError,
    UnsupportedConfigFormatError,
)
from .loader import load_config
from .merge import deep_merge
from .settings import DEFAULT_MAX_DEPTH, TransformSettings, max_depth_ceiling

__all__ = [
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigParseError",
    "ConfigTypeConflictError",
    "InvalidConfigRootTypeError",
    "InvalidSettingsError",
    "UnsupportedConfigFormatError",
    "load_config",
    "deep_merge",
    "DEFAULT_MAX_DEPTH",
    "TransformSettings",
    "max_depth_ceiling",
]
